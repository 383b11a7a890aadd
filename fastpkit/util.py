"""String, path and logging helpers."""

import os
import string
import sys
import threading
import time

_COMPLEMENTS = {
    "A": "T", "a": "T",
    "T": "A", "t": "A",
    "C": "G", "c": "G",
    "G": "C", "g": "C",
}

_ALPHA = frozenset(string.ascii_letters)

_log_lock = threading.Lock()


class FastpError(Exception):
    """Raised when an input or output path cannot be used."""


def complement(base: str) -> str:
    """Return the complementary base in upper case, or 'N' for anything else."""
    return _COMPLEMENTS.get(base, "N")


def trim(text: str) -> str:
    """Strip leading and trailing spaces (only the space character)."""
    return text.strip(" ")


def split(text: str, sep: str = ",") -> list:
    """Split on a separator, first skipping leading characters that appear in it.

    Empty fields between or after separators are kept.
    """
    if not sep:
        raise ValueError("separator must not be empty")
    if not text:
        return []
    start = next((i for i, ch in enumerate(text) if ch not in sep), None)
    if start is None:
        return []
    return text[start:].split(sep)


def replace(text: str, src: str, dest: str) -> str:
    """Replace each occurrence of src with dest.

    After a match the search resumes one character past the match start,
    and the text between matches is copied from there.
    """
    parts = []
    begin = 0
    pos = text.find(src)
    while pos != -1:
        parts.append(text[begin:pos])
        parts.append(dest)
        begin = pos + 1
        pos = text.find(src, begin)
    if begin < len(text):
        parts.append(text[begin:])
    return "".join(parts)


def reverse(text: str) -> str:
    """Return the text reversed."""
    return text[::-1]


def basename(path: str) -> str:
    """Return the part after the last '/', or '' when the path ends with '/'."""
    pos = path.rfind("/")
    if pos == -1:
        return path
    return path[pos + 1:]


def dirname(path: str) -> str:
    """Return the part up to and including the last '/', or './'."""
    pos = path.rfind("/")
    if pos == -1:
        return "./"
    return path[:pos + 1]


def joinpath(directory: str, name: str) -> str:
    """Join a directory and a file name with exactly one '/' added if needed."""
    if directory.endswith("/"):
        return directory + name
    return directory + "/" + name


def file_exists(path: str) -> bool:
    """Return True if the path names an existing file or directory."""
    if not path:
        return False
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_directory(path: str) -> bool:
    """Return True if the path is a directory."""
    return bool(path) and os.path.isdir(path)


def check_file_valid(path: str) -> None:
    """Raise FastpError unless the path is an existing regular file."""
    if not file_exists(path):
        raise FastpError(f"file '{path}' doesn't exist, quit now")
    if is_directory(path):
        raise FastpError(f"'{path}' is a folder, not a file, quit now")


def check_file_writable(path: str) -> None:
    """Raise FastpError unless the path's folder exists and the path is not a folder."""
    folder = dirname(path)
    if not file_exists(folder):
        raise FastpError(
            f"'{folder} doesn't exist. Create this folder and run this command again."
        )
    if is_directory(path):
        raise FastpError(f"'{path}' is not a writable file, quit now")


def str_keep_alpha(text: str) -> str:
    """Keep only ASCII letters."""
    return "".join(ch for ch in text if ch in _ALPHA)


def str_keep_valid_sequence(text: str, force_upper_case: bool = False) -> str:
    """Keep ASCII letters, '-' and '*', optionally upper-casing a-z first."""
    kept = []
    for ch in text:
        if force_upper_case and "a" <= ch <= "z":
            ch = ch.upper()
        if ch in _ALPHA or ch in "-*":
            kept.append(ch)
    return "".join(kept)


def find_with_right_pos(text: str, pattern: str, start: int = 0) -> int:
    """Return the index just past the first match at or after start, or -1."""
    if start < 0:
        return -1
    pos = text.find(pattern, start)
    if pos < 0:
        return -1
    return pos + len(pattern)


def num2qual(num: int) -> str:
    """Convert a Phred score to its Phred+33 character, clamped to 0..94."""
    num = max(0, min(num, 127 - 33))
    return chr(num + 33)


def loginfo(message: str) -> None:
    """Write a time-stamped message to standard error."""
    with _log_lock:
        stamp = time.strftime("%H:%M:%S", time.localtime())
        print(f"[{stamp}] {message}", file=sys.stderr, flush=True)