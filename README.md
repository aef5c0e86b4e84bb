# helixkit

A set of small utilities with no dependencies outside the standard library.

## What is in it

- `helixkit.strings`: `make` (text up to the first NUL), `trim`, `split` with an optional limit, `split_on_whitespace`, `join`, and `all_of_digits`, `all_of_alphas`, `all_of_alpha_numerics` (ASCII only).
- `helixkit.errors`: `string_error` and `errno_message` describe operating-system error numbers.
- `helixkit.paragraph`: `format_paragraph(paragraph, indent, width)` wraps text on spaces into indented lines.
- `helixkit.numeric_string`: `NumericString` and `numeric_string_compare` order text so that runs of digits compare as numbers.
- `helixkit.paths`: `join`, `base`, `directory`, `split`, `split_extension`, `exists`, `is_file`, `is_directory`, `is_fifo`, `make_fifo`, `make_directory`, `make_directories` (like `mkdir -p`), `make_unique_system_name` and `get_creation_time`. Failures raise `PathError`.
- `helixkit.listing`: `list_directory` returns a directory's entries and raises `BadDirectory` when the path cannot be listed.
- `helixkit.guards`: `Cleanup` calls a function when a `with` block exits. `Operation` runs an action at once and undoes it on exit unless `commit()` was called.
- `helixkit.equal`: `Equal` and `DigitsEqual` compare floats to within a relative tolerance.
- `helixkit.power`: `power(base, exponent)` for integers.
- `helixkit.overflow`: `IntegerType` (INT8 to UINT64), `get_extrema`, `will_overflow` and `check_convertible`.
- `helixkit.multiply_rounded`: `round_if_integral` and `multiply_rounded`. Integer results are rounded half away from zero and can be checked for overflow.
- `helixkit.circular_index`, `helixkit.circular_buffer`: `CircularIndex` is an index that wraps around. `CircularBuffer` is a fixed-capacity ring with `write`, `peek`, `read` and `remove`.
- `helixkit.averaging_window`, `helixkit.integer_window`: `AveragingWindow` keeps a running sum of the last N samples and provides the average, variance, standard deviation, minimum and maximum. `IntegerWindow` holds 2**N integers and computes its average with a right shift.
- `helixkit.endian`: conversions between host, big-endian and little-endian order for values described by a `struct` format character.
- `helixkit.binary_io`: `read`/`write` with `struct` formats, one-byte-length strings (`read_short_string`, `write_short_string`), counted strings (`read_string`, `write_string`) and `skip`.
- `helixkit.formatter`: `formatter` is a printf-style formatter that understands C length modifiers and `*` width and precision. `fast_formatter` also enforces a maximum length. `get_formatter_count` counts conversions.
- `helixkit.auto_format`: `auto_format(type_name, base)` builds a format string and `auto_formatter` applies it.
- `helixkit.precise_string`: `precise_string` writes a number with all of its significant digits for `"float"`, `"double"` or `"long double"`.
- `helixkit.hex_formatter`: `format_hex`, `format_hex_lines`, `format_hex_lines_with_ascii`, `get_printable`, `format_byte` and `get_hex_string`.
- `helixkit.colorize`: colour constants and `Colorize`, which adds colour codes only when writing to standard output on a terminal.
- `helixkit.net`: `Address` and `ServiceAddress` (IPv4), `Socket` (a TCP socket wrapper that raises `SocketError`), and `Client`, which connects on creation and decodes buffered `struct` values. `SocketDisconnected` is raised when the peer closes.

## Examples

```python
from helixkit.numeric_string import NumericString

sorted(["file10", "file2", "file1"], key=NumericString)
# ['file1', 'file2', 'file10']
```

```python
from helixkit.strings import split

split("a,b,c", ",", 1)   # ['a', 'b,c']
```

```python
from helixkit.circular_buffer import CircularBuffer

buffer = CircularBuffer(8)
buffer.write([1, 2, 3])
buffer.read(2)   # [1, 2]
len(buffer)      # 1
```

```python
from helixkit.formatter import formatter
from helixkit.auto_format import auto_format
from helixkit.hex_formatter import get_hex_string, format_hex_lines_with_ascii

formatter("%d %s", 42, "is the answer")   # '42 is the answer'
auto_format("double", 10)                 # '%*.*l#g'
get_hex_string(255)                       # '0xFF'
print(format_hex_lines_with_ascii(b"hello, world"))
```

```python
from helixkit.guards import Operation

created = []
with Operation(lambda: created.append("thing"), created.clear) as op:
    ...          # further work; if it raises, created is cleared again
    op.commit()  # keep the change
```

## What it does not do

- The package is a library only. It installs no commands.
- Networking covers blocking IPv4 TCP only. There is no IPv6, UDP, TLS or server framework.
- `make_fifo`, `is_fifo` and the socket timeouts rely on POSIX facilities.

## Tests

```
pip install -e ".[test]"
pytest
```