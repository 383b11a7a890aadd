# fastpkit

Small, dependency-free building blocks for tools that preprocess
sequencing reads in FASTQ format.

## What is inside

- `fastpkit.common` — the filter result codes (`FilterResult`) that
  record why a read was dropped, each with a `label` property, and
  `failed_type_name(code)`, which turns a code from 0 to 31 into its
  report label such as `"failed_too_short"` (reserved codes give `""`,
  codes out of range raise `ValueError`). It also holds shared constants
  such as `FASTP_VER`, `PACK_SIZE` and `ATCG_BASES`.
- `fastpkit.util` — string and sequence helpers: `complement`, `reverse`,
  `trim`, `split`, `replace`, `str_keep_alpha`,
  `str_keep_valid_sequence`, `find_with_right_pos`, `num2qual`; path
  helpers `basename`, `dirname` and `joinpath`; file checks
  `file_exists`, `is_directory`, `check_file_valid` and
  `check_file_writable`, which raise `FastpError` when a check fails;
  and `loginfo`, which writes a time-stamped message to standard error.
- `fastpkit.writer` — `Writer`, which writes to a file, gzip-compressed
  when the file name ends in `.gz`. It can also wrap an open binary
  stream, which it flushes but leaves open on close. It offers
  `write_line`, `write_string`, `write`, `is_zipped`, `close`, and works
  as a context manager.
- `fastpkit.cmdline` — `Parser`, a compact option parser with long
  (`--name`, `--name=value`) and short (`-n`) options, grouped short
  flags, typed values, required options and generated usage text.
  `default_reader`, `range_reader` and `oneof` build value readers;
  misuse of the parser raises `CmdlineError`. `parse` and `parse_line`
  return whether parsing succeeded and collect messages for `error()`
  and `error_full()`; `parse_check` prints usage and exits instead.
- `fastpkit.knownadapters` — `get_known_adapters()` returns a new dict
  from known adapter and primer sequences to their `>`-prefixed names;
  `adapter_names(sequence)` returns the distinct names of one sequence
  (matched case-insensitively) and raises `KeyError` for an unknown one.
- `fastpkit.adapterdata` — `primary_adapters()`, the table behind
  `get_known_adapters()`, in sorted sequence order.

## Installation

```
pip install fastpkit
```

## Examples

```python
from fastpkit.util import complement, reverse
from fastpkit.writer import Writer

seq = "AAGTCGG"
revcomp = reverse("".join(complement(b) for b in seq))

with Writer("out.fastq.gz") as out:
    out.write_line("@read1")
    out.write_line(revcomp)
```

```python
from fastpkit.cmdline import Parser, range_reader

parser = Parser()
parser.add_value("in1", str, "i", "read1 input file name", True, "")
parser.add_value("thread", int, "w", "worker thread number", False, 3,
                 range_reader(1, 16, int))
parser.add("verbose", "V", "output verbose log information")
if parser.parse(["prog", "-i", "reads.fq", "-w", "4"]):
    print(parser.get("in1"), parser.get("thread"))
else:
    print(parser.error_full())
```

```python
from fastpkit.knownadapters import adapter_names

print(adapter_names("AGATCGGAAGAGCACACGTCTGAACTCCAGTCA"))
```

## What it does not do

fastpkit is a set of parts, not a finished preprocessing tool. It has no
command of its own, does not read FASTQ files, and does not itself trim
adapters, filter reads, correct bases or write reports; the result codes,
writer, parser and adapter table are there for a program that does.

## Running the tests

```
pip install -e ".[test]"
pytest
```