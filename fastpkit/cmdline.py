"""A small command-line option parser with typed values and usage text."""

import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_TYPE_NAMES = {str: "string", int: "int", float: "double", bool: "bool"}


class CmdlineError(Exception):
    """Raised for misuse of the parser or a value rejected by a reader."""


def _type_name(value_type) -> str:
    return _TYPE_NAMES.get(value_type, getattr(value_type, "__name__", str(value_type)))


def _format_default(value) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return "%g" % value
    return str(value)


def default_reader(value_type=str) -> Callable[[str], Any]:
    """Return a function that converts option text to value_type.

    Leading whitespace is allowed; anything left over after the value is not.
    A ValueError is raised for text that does not convert.
    """
    if value_type is str:
        return lambda text: text

    def read(text: str):
        body = text.lstrip()
        if value_type is bool:
            if body not in ("0", "1"):
                raise ValueError(f"not a bool: {text!r}")
            return body == "1"
        if value_type is int:
            if not _INT_RE.fullmatch(body):
                raise ValueError(f"not an int: {text!r}")
            return int(body)
        if value_type is float:
            if not _FLOAT_RE.fullmatch(body):
                raise ValueError(f"not a number: {text!r}")
            return float(body)
        try:
            return value_type(body)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"cannot read {text!r}") from exc

    return read


def range_reader(low, high, value_type=None) -> Callable[[str], Any]:
    """Return a reader that accepts only values between low and high inclusive."""
    base = default_reader(value_type if value_type is not None else type(low))

    def read(text: str):
        value = base(text)
        if not low <= value <= high:
            raise CmdlineError("range_error")
        return value

    return read


def oneof(*args) -> Callable[[str], Any]:
    """Return a reader that accepts only one of the given values."""
    if not args:
        raise CmdlineError("oneof needs at least one alternative")
    alternatives = list(args)
    base = default_reader(type(alternatives[0]))

    def read(text: str):
        value = base(text)
        if value not in alternatives:
            raise CmdlineError("")
        return value

    return read


@dataclass
class _Flag:
    name: str
    short_name: str
    description: str
    has_set: bool = False

    has_value = False

    def set(self, value: Optional[str] = None) -> bool:
        if value is not None:
            return False
        self.has_set = True
        return True

    def valid(self) -> bool:
        return True

    def must(self) -> bool:
        return False

    def short_description(self) -> str:
        return "--" + self.name


@dataclass
class _ValueOption:
    name: str
    short_name: str
    need: bool
    default: Any
    value_type: Any
    reader: Callable[[str], Any]
    raw_description: str
    has_set: bool = False
    actual: Any = field(init=False)

    has_value = True

    def __post_init__(self):
        self.actual = self.default

    @property
    def description(self) -> str:
        suffix = "" if self.need else " [=" + _format_default(self.default) + "]"
        return f"{self.raw_description} ({_type_name(self.value_type)}{suffix})"

    def set(self, value: Optional[str] = None) -> bool:
        if value is None:
            return False
        try:
            self.actual = self.reader(value)
        except (ValueError, TypeError, CmdlineError):
            return False
        self.has_set = True
        return True

    def valid(self) -> bool:
        return not (self.need and not self.has_set)

    def must(self) -> bool:
        return self.need

    def short_description(self) -> str:
        return f"--{self.name}={_type_name(self.value_type)}"


class Parser:
    """Command-line parser for long (--name) and short (-n) options."""

    def __init__(self):
        self._options = {}
        self._ordered = []
        self._footer = ""
        self._prog_name = ""
        self._others = []
        self._errors = []

    def _register(self, option) -> None:
        if option.name in self._options:
            raise CmdlineError("multiple definition: " + option.name)
        self._options[option.name] = option
        self._ordered.append(option)

    def add(self, name, short_name=None, desc=""):
        """Define a flag that takes no value."""
        self._register(_Flag(name, short_name or "", desc))

    def add_value(self, name, value_type=str, short_name=None, desc="",
                  need=True, default=None, reader=None):
        """Define an option that takes a value of value_type."""
        if default is None:
            default = value_type()
        if reader is None:
            reader = default_reader(value_type)
        self._register(_ValueOption(name, short_name or "", need, default,
                                    value_type, reader, desc))

    def footer(self, text):
        """Set the text shown after '[options] ...' in the usage line."""
        self._footer = text

    def set_program_name(self, name):
        """Set the program name shown in the usage line."""
        self._prog_name = name

    def exist(self, name) -> bool:
        """Return True if the option was given on the command line."""
        if name not in self._options:
            raise CmdlineError("there is no flag: --" + name)
        return self._options[name].has_set

    def get(self, name):
        """Return the value of an option (its default if not given)."""
        if name not in self._options:
            raise CmdlineError("there is no flag: --" + name)
        option = self._options[name]
        if not option.has_value:
            raise CmdlineError(f"type mismatch flag '{name}'")
        return option.actual

    def rest(self) -> list:
        """Return the arguments that were not options."""
        return list(self._others)

    def _set_option(self, name, value=None) -> None:
        option = self._options.get(name)
        if option is None:
            self._errors.append("undefined option: --" + name)
            return
        if value is None:
            if not option.set():
                self._errors.append("option needs value: --" + name)
        elif not option.set(value):
            self._errors.append(f"option value is invalid: --{name}={value}")

    def parse(self, args) -> bool:
        """Parse an argument list whose first item is the program name.

        Returns True if there were no errors; see error() and error_full().
        """
        args = list(args)
        self._errors = []
        self._others = []
        if len(args) < 1:
            self._errors.append("argument number must be longer than 0")
            return False
        if not self._prog_name:
            self._prog_name = args[0]

        lookup = {}
        for name in sorted(self._options):
            if not name:
                continue
            initial = self._options[name].short_name
            if initial:
                if initial in lookup:
                    lookup[initial] = ""
                    self._errors.append(f"short option '{initial}' is ambiguous")
                    return False
                lookup[initial] = name

        i = 1
        argc = len(args)
        while i < argc:
            arg = args[i]
            if arg.startswith("--"):
                body = arg[2:]
                if "=" in body:
                    name, value = body.split("=", 1)
                    self._set_option(name, value)
                elif body not in self._options:
                    self._errors.append("undefined option: --" + body)
                elif self._options[body].has_value:
                    if i + 1 >= argc:
                        self._errors.append("option needs value: --" + body)
                    else:
                        i += 1
                        self._set_option(body, args[i])
                else:
                    self._set_option(body)
            elif arg.startswith("-"):
                if len(arg) == 1:
                    i += 1
                    continue
                for ch in arg[1:-1]:
                    if ch not in lookup:
                        self._errors.append("undefined short option: -" + ch)
                    elif lookup[ch] == "":
                        self._errors.append("ambiguous short option: -" + ch)
                    else:
                        self._set_option(lookup[ch])
                last = arg[-1]
                if last not in lookup:
                    self._errors.append("undefined short option: -" + last)
                elif lookup[last] == "":
                    self._errors.append("ambiguous short option: -" + last)
                elif i + 1 < argc and self._options[lookup[last]].has_value:
                    self._set_option(lookup[last], args[i + 1])
                    i += 1
                else:
                    self._set_option(lookup[last])
            else:
                self._others.append(arg)
            i += 1

        for name in sorted(self._options):
            if not self._options[name].valid():
                self._errors.append("need option: --" + name)
        return not self._errors

    def parse_line(self, line) -> bool:
        """Split a command line on spaces, honouring quotes and backslashes, then parse."""
        self._errors = []
        args = []
        buf = []
        in_quote = False
        chars = iter(line)
        for ch in chars:
            if ch == '"':
                in_quote = not in_quote
                continue
            if ch == " " and not in_quote:
                args.append("".join(buf))
                buf = []
                continue
            if ch == "\\":
                ch = next(chars, None)
                if ch is None:
                    self._errors.append("unexpected occurrence of '\\' at end of string")
                    return False
            buf.append(ch)
        if in_quote:
            self._errors.append("quote is not closed")
            return False
        if buf:
            args.append("".join(buf))
        return self.parse(args)

    def parse_check(self, args):
        """Parse and exit: with status 0 after usage for --help, 1 on errors."""
        if "help" not in self._options:
            self.add("help", "?", "print this message")
        if isinstance(args, str):
            ok = self.parse_line(args)
            argc = 0
        else:
            args = list(args)
            ok = self.parse(args)
            argc = len(args)
        if (argc == 1 and not ok) or self.exist("help"):
            print(self.usage(), end="", file=sys.stderr)
            raise SystemExit(0)
        if not ok:
            print(self.error(), file=sys.stderr)
            print(self.usage(), end="", file=sys.stderr)
            raise SystemExit(1)

    def error(self) -> str:
        """Return the first error, or an empty string."""
        return self._errors[0] if self._errors else ""

    def error_full(self) -> str:
        """Return all errors, one per line."""
        return "".join(err + "\n" for err in self._errors)

    def usage(self) -> str:
        """Return the usage text listing every option."""
        lines = ["usage: " + self._prog_name + " "]
        for option in self._ordered:
            if option.must():
                lines.append(option.short_description() + " ")
        lines.append("[options] ... " + self._footer + "\n")
        lines.append("options:\n")
        width = max((len(o.name) for o in self._ordered), default=0) + 4
        for option in self._ordered:
            prefix = f"  -{option.short_name}, " if option.short_name else "      "
            lines.append(prefix + "--" + option.name.ljust(width)
                         + option.description + "\n")
        return "".join(lines)