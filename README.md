# kon

A handful of small building blocks with no dependencies outside the standard library.

## Modules

### `kon.base16`

Helpers for single hexadecimal digits:

- `decode_digit(char)` returns the value of a hexadecimal digit (either case), or
  `None` if the character is not one. It raises `ValueError` for anything other than
  a single character.
- `encode_digit(value)` returns the upper-case digit for a value from 0 to 15.
- `is_base10(char)` and `is_base16(char)` tell whether a character is a decimal or
  hexadecimal digit.

### `kon.conv`

Strict parsing of a number from the start of a string. Integer parsers take the text
and a bit width (8, 16, 32 or 64; any other width raises `ValueError`). Every parser
returns a `(value, consumed)` pair, where `consumed` is the number of characters read,
and raises `ConversionError` (a subclass of `ValueError`) when there are no digits,
when the value does not fit, or when there are more digits than the width allows.
Leading zeros are skipped.

- `rstring10_to_uint`, `rstring16_to_uint` – bare decimal or hexadecimal digits.
- `string10_to_uint`, `string16_to_uint` – unsigned, with an optional `+`; the
  hexadecimal form needs a `0x` or `0X` prefix.
- `string10_to_int`, `string16_to_int` – signed, with an optional `+` or `-`.
- `string_to_uint`, `string_to_int` – try hexadecimal with `0x` first, then decimal.
- `string_to_float(text)` – a decimal float, optionally with an exponent, or
  `inf`/`infinity`/`nan`; values that overflow or underflow to zero raise
  `ConversionError`.

### `kon.dbuf`

`DeviceBuffer(buffer, iova=0, headroom=0)` manages a data region inside a fixed,
writable buffer such as a `bytearray`. `append(size)` grows the data at its end,
`prepend(size)` grows it into the headroom, and `read(size)` and `adjust(size)`
consume it from the front. Each returns a `memoryview` into the buffer and raises
`BufferError` when there is not enough room or data. `reset(headroom, data_length)`
repositions the data region; `data()`, `data_length()`, `iova()` and `data_iova()`
describe it.

### `kon.file_helper`

`read_all(path)` returns the whole content of a file as bytes and raises `OSError`
if it cannot be read.

### `kon.string_helper`

`StringSplitter(text, delimiter)` iterates over the non-empty fields of a `str` or
`bytes` value between single-character delimiters.

### `kon.maybe`

`Maybe` holds a value or nothing. How emptiness is stored is chosen with the
`nothing` argument:

- `FlagNothing` (the default) keeps a flag beside the value; `get()` on an empty
  holder raises `ValueError`.
- `FloatNothing` stores NaN, `NoneNothing` stores `None`, and a plain
  `Nothing(marker)` stores `marker`; any value the rule recognises counts as empty,
  and `get()` returns what is stored.

Methods: `has_value()`, `bool()`, `get()`, `assign(value)`, `emplace(*args)`
(several arguments are stored as a tuple), `reset()`, `and_then(func, default=None)`
and `copy()`.

### `kon.vlm_ring`

`VlmRing(size)` is a single-producer, single-consumer ring of variable-length
messages. Each message is an 8-byte `MessageHead` (unsigned 32-bit `type` and
`length`) followed by its payload, padded to a multiple of 8 bytes.

- `push(type, data=b"")` copies a message in and returns `False` when there is no room.
- `pop(max_length=None)` returns `(type, payload)` for the oldest message, or `None`
  when empty; it raises `BufferError` and keeps the message if the payload is longer
  than `max_length`.
- `push_begin(length)` / `push_end(scope)` and `pop_begin()` / `pop_end(scope)` work
  in place through a `ZeroCopyScope` holding the head and a `memoryview` of the payload.
- `empty()`, `capacity()`, `write_index()` and `read_index()` report the ring's state.

## Example

```python
from kon.conv import string_to_int
from kon.string_helper import StringSplitter
from kon.vlm_ring import VlmRing

value, consumed = string_to_int("-0x80", 8)         # (-128, 5)
parts = list(StringSplitter(";;abc;;defg;;", ";"))  # ["abc", "defg"]

ring = VlmRing(64)
ring.push(0x70, b"hello")
ring.pop()                                          # (0x70, b"hello")
```

## What it does not do

This is a library only: it has no command-line tool.

## Tests

The test suite uses pytest, which the `test` extra installs.