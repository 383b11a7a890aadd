import pytest

from fastpkit.cmdline import (
    CmdlineError,
    Parser,
    default_reader,
    oneof,
    range_reader,
)


def make_parser():
    p = Parser()
    p.add_value("in1", str, "i", "read1 input file name", need=True)
    p.add_value("compression", int, "z", "compression level", need=False, default=4)
    p.add("verbose", "V", "output verbose log")
    p.add("dedup", "D", "enable deduplication")
    return p


def test_default_reader_int():
    assert default_reader(int)("12") == 12
    assert default_reader(int)("  -3") == -3
    with pytest.raises(ValueError):
        default_reader(int)("12 ")
    with pytest.raises(ValueError):
        default_reader(int)("abc")


def test_default_reader_float_and_bool():
    assert default_reader(float)("0.5") == 0.5
    assert default_reader(bool)("1") is True
    assert default_reader(bool)("0") is False
    with pytest.raises(ValueError):
        default_reader(bool)("true")


def test_default_reader_str_unchanged():
    assert default_reader(str)(" a b ") == " a b "


def test_range_reader():
    read = range_reader(1, 9, int)
    assert read("9") == 9
    with pytest.raises(CmdlineError, match="range_error"):
        read("10")


def test_oneof_reader():
    read = oneof("read1", "read2", "index1")
    assert read("read2") == "read2"
    with pytest.raises(CmdlineError):
        read("other")


def test_parse_long_and_short_options():
    p = make_parser()
    assert p.parse(["prog", "--in1", "a.fq", "-z", "6", "-VD", "extra"])
    assert p.get("in1") == "a.fq"
    assert p.get("compression") == 6
    assert p.exist("verbose") and p.exist("dedup")
    assert p.rest() == ["extra"]
    assert p.error() == ""


def test_parse_equals_form_and_defaults():
    p = make_parser()
    assert p.parse(["prog", "--in1=x.fq"])
    assert p.get("in1") == "x.fq"
    assert p.get("compression") == 4
    assert not p.exist("verbose")


def test_missing_required_option():
    p = make_parser()
    assert not p.parse(["prog", "-V"])
    assert p.error() == "need option: --in1"


def test_undefined_and_invalid_options():
    p = make_parser()
    assert not p.parse(["prog", "--in1", "a", "--nope", "--compression=x", "-q"])
    assert p.error_full() == (
        "undefined option: --nope\n"
        "option value is invalid: --compression=x\n"
        "undefined short option: -q\n"
    )


def test_option_needs_value_at_end():
    p = make_parser()
    assert not p.parse(["prog", "--in1"])
    assert p.error() == "option needs value: --in1"


def test_flag_given_value_is_invalid():
    p = make_parser()
    assert not p.parse(["prog", "--in1", "a", "--verbose=1"])
    assert p.error() == "option value is invalid: --verbose=1"


def test_range_reader_in_parser():
    p = Parser()
    p.add_value("level", int, "l", "level", need=False, default=3,
                reader=range_reader(1, 9, int))
    assert not p.parse(["prog", "-l", "12"])
    assert p.get("level") == 3
    assert p.parse(["prog", "-l", "7"])
    assert p.get("level") == 7


def test_duplicate_definition():
    p = make_parser()
    with pytest.raises(CmdlineError, match="multiple definition: in1"):
        p.add("in1")


def test_ambiguous_short_option():
    p = Parser()
    p.add("alpha", "a")
    p.add("apple", "a")
    assert not p.parse(["prog"])
    assert p.error() == "short option 'a' is ambiguous"


def test_get_errors():
    p = make_parser()
    with pytest.raises(CmdlineError, match="there is no flag: --missing"):
        p.get("missing")
    with pytest.raises(CmdlineError, match="type mismatch flag 'verbose'"):
        p.get("verbose")
    with pytest.raises(CmdlineError):
        p.exist("missing")


def test_empty_argument_list():
    p = make_parser()
    assert not p.parse([])
    assert p.error() == "argument number must be longer than 0"


def test_parse_line_quotes_and_escapes():
    p = make_parser()
    assert p.parse_line('prog --in1 "a b.fq" x\\ y')
    assert p.get("in1") == "a b.fq"
    assert p.rest() == ["x y"]


def test_parse_line_errors():
    p = make_parser()
    assert not p.parse_line('prog --in1 "open')
    assert p.error() == "quote is not closed"
    assert not p.parse_line("prog \\")
    assert p.error() == "unexpected occurrence of '\\' at end of string"


def test_usage_text():
    p = Parser()
    p.set_program_name("prog")
    p.add_value("input", str, "i", "read1 input file name")
    p.add("help", "?", "print this message")
    assert p.usage() == (
        "usage: prog --input=string [options] ... \n"
        "options:\n"
        "  -i, --input    read1 input file name (string)\n"
        "  -?, --help     print this message\n"
    )


def test_usage_shows_defaults_of_optional_values():
    p = make_parser()
    p.footer("end")
    p.parse(["prog", "--in1", "a"])
    text = p.usage()
    assert text.startswith("usage: prog --in1=string [options] ... end\n")
    assert "compression level (int [=4])" in text


def test_parse_check_help_exits_zero(capsys):
    p = make_parser()
    with pytest.raises(SystemExit) as info:
        p.parse_check(["prog", "--help"])
    assert info.value.code == 0
    assert "usage: prog" in capsys.readouterr().err


def test_parse_check_error_exits_one(capsys):
    p = make_parser()
    with pytest.raises(SystemExit) as info:
        p.parse_check(["prog", "-V"])
    assert info.value.code == 1
    assert capsys.readouterr().err.startswith("need option: --in1\n")


def test_parse_check_success():
    p = make_parser()
    p.parse_check(["prog", "-i", "r.fq"])
    assert p.get("in1") == "r.fq"
    assert p.exist("help") is False