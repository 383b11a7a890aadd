"""Building blocks for FASTQ preprocessing: result codes, helpers, writers, option parsing and adapters."""

__version__ = "0.21.0"

__all__ = ["adapterdata", "cmdline", "common", "knownadapters", "util", "writer"]