"""Output writer for plain or gzip-compressed files."""

import gzip
import os


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Writer:
    """Write text to a file, gzip-compressed when the name ends with '.gz'.

    A binary stream may be given instead of a file name; it is then flushed
    but left open when the writer is closed.
    """

    def __init__(self, filename, compression=3):
        self.compression = compression
        if isinstance(filename, (str, os.PathLike)):
            self.filename = os.fsdecode(filename)
            self._zipped = self.filename.endswith(".gz")
            if self._zipped:
                self._stream = gzip.open(filename, "wb", compresslevel=compression)
            else:
                self._stream = open(filename, "wb")
            self._owns_stream = True
        else:
            self.filename = ""
            self._stream = filename
            self._zipped = isinstance(filename, gzip.GzipFile)
            self._owns_stream = False
        self._closed = False

    def is_zipped(self) -> bool:
        """Return True if output is gzip-compressed."""
        return self._zipped

    def _write(self, data: bytes) -> None:
        if self._closed:
            raise ValueError("write to a closed writer")
        self._stream.write(data)

    def write_line(self, line) -> None:
        """Write the line followed by a newline."""
        self._write(_as_bytes(line) + b"\n")

    def write_string(self, text) -> None:
        """Write the text as it is."""
        self._write(_as_bytes(text))

    def write(self, data) -> None:
        """Write raw bytes."""
        self._write(_as_bytes(data))

    def close(self) -> None:
        """Finish the output; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._owns_stream:
            self._stream.close()
        else:
            self._stream.flush()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False