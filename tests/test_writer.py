import gzip
import io

import pytest

from fastpkit.writer import Writer


def test_plain_file_output(tmp_path):
    path = tmp_path / "out.fq"
    writer = Writer(str(path))
    writer.write_line("@r1")
    writer.write_string("ACGT")
    writer.write(b"\n+")
    writer.close()
    assert not writer.is_zipped()
    assert writer.filename == str(path)
    assert path.read_bytes() == b"@r1\nACGT\n+"


def test_gzip_file_output_round_trip(tmp_path):
    path = tmp_path / "out.fq.gz"
    with Writer(str(path)) as writer:
        assert writer.is_zipped()
        writer.write_line("@r1")
        writer.write_line("ACGT")
    assert gzip.decompress(path.read_bytes()) == b"@r1\nACGT\n"


@pytest.mark.parametrize("level", [1, 6, 9])
def test_compression_levels_decompress(tmp_path, level):
    path = tmp_path / f"l{level}.gz"
    payload = "ACGTACGTNN" * 200
    with Writer(path, level) as writer:
        writer.write_string(payload)
    assert gzip.decompress(path.read_bytes()).decode() == payload


def test_stream_is_flushed_but_left_open():
    stream = io.BytesIO()
    writer = Writer(stream)
    writer.write_line("line")
    writer.close()
    assert not stream.closed
    assert stream.getvalue() == b"line\n"
    assert writer.filename == ""
    assert not writer.is_zipped()


def test_gzip_stream_counts_as_zipped():
    raw = io.BytesIO()
    gz = gzip.GzipFile(fileobj=raw, mode="wb")
    writer = Writer(gz)
    assert writer.is_zipped()
    writer.write_line("x")
    writer.close()
    gz.close()
    assert gzip.decompress(raw.getvalue()) == b"x\n"


def test_write_after_close_raises(tmp_path):
    writer = Writer(str(tmp_path / "o.txt"))
    writer.close()
    writer.close()
    with pytest.raises(ValueError):
        writer.write_line("late")


def test_context_manager_closes(tmp_path):
    path = tmp_path / "ctx.txt"
    with Writer(str(path)) as writer:
        writer.write_string("abc")
    with pytest.raises(ValueError):
        writer.write_string("more")
    assert path.read_text() == "abc"