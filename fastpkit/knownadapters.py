"""Lookup of known sequencing adapters by sequence."""

from .adapterdata import primary_adapters

_NAME_SEPARATOR = " | "


def get_known_adapters() -> dict:
    """Return a new dict mapping each known adapter sequence to its name text.

    The name text is '>'-prefixed, with ' | ' between names when one
    sequence is known under several.
    """
    return primary_adapters()


def adapter_names(sequence: str) -> list:
    """Return the distinct names of a known adapter, without the '>' prefix.

    The sequence is matched case-insensitively. Names keep the order in
    which they are listed. A KeyError is raised for an unknown sequence.
    """
    key = sequence.strip().upper()
    adapters = primary_adapters()
    if key not in adapters:
        raise KeyError(f"unknown adapter sequence: {sequence}")
    names = []
    for part in adapters[key].split(_NAME_SEPARATOR):
        name = part.strip()
        if name.startswith(">"):
            name = name[1:]
        if name and name not in names:
            names.append(name)
    return names