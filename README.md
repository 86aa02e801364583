# cubkit

A small toolkit of plain-Python helpers with no runtime dependencies.

## Modules

- **`cubkit.ascii`**: character classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) and case mapping (`to_lower`,
  `to_upper`). They accept an int code or a one-character string, and the
  case mappers return the same type they were given. `atoi` reads a leading
  decimal integer after whitespace and an optional sign, giving 0 when there
  are no digits. `itoa` renders a 32-bit signed integer and raises
  `OverflowError` for anything outside that range.
- **`cubkit.memory`**: operations on `bytearray` buffers: `memset`, `bzero`,
  `calloc`, `memcpy`, `memmove(buf, dst_offset, src_offset, length)` (which
  handles overlapping regions within one buffer), `memchr` (returns an index
  or `None`) and `memcmp`. Lengths that are negative or that run past a
  buffer raise `ValueError`.
- **`cubkit.cstring`**: string routines that treat a NUL character as the
  end of the string: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`.
  Searches return an index or `None`. `strlcpy` and `strlcat` write into a
  `bytearray` and return the length of the string they tried to create.
- **`cubkit.linked_list`**: `LinkedList`, a singly linked list that supports
  `len()`, iteration, `push_front`, `push_back`, `last` (which raises
  `IndexError` when the list is empty), `clear(delete)`, `for_each(func)`
  and `map(func, delete)`. If `func` raises during `map`, the contents
  already produced are passed to `delete` and the exception propagates.
- **`cubkit.output`**: `put_char`, `put_str`, `put_endl` and `put_number`
  write to a text stream, which is standard output when none is given.
- **`cubkit.colors`**: `lookup_color` resolves X11 colour names such as
  `"dark orange"` or `"grey50"` to `0xRRGGBB` values, ignoring ASCII case.
  `"none"` gives -1, and unknown names raise `KeyError`. `COLORS` is a
  read-only mapping from lower-case names to their values.
- **`cubkit.wordtab`**: `find`, `find_unquoted` (which skips matches inside
  double quotes) and `split_words` (which splits on spaces and tabs).
- **`cubkit.xpm`**: an XPM pixmap reader. `parse_xpm` takes the XPM strings
  (header, colour table, pixel rows) and `parse_xpm_file` reads a file,
  removes its comments and pulls out the quoted strings. Both return an
  `Image` with `width`, `height` and `pixels`, a row-major list of
  `0xAARRGGBB` integers. Pixels of the colour `None` become `TRANSPARENT`
  (`0xFF000000`). Malformed data raises `XpmError`, a subclass of
  `ValueError`. The helpers `strip_comments`, `extract_strings`,
  `color_code` and `text_to_rgb` are available as well.

## Installation

```
pip install cubkit
```

## Examples

```python
from cubkit.ascii import atoi, itoa
from cubkit.colors import lookup_color
from cubkit.xpm import parse_xpm

atoi("  -42abc")            # -42
itoa(-2147483648)           # "-2147483648"
lookup_color("DodgerBlue")  # 0x1e90ff

image = parse_xpm([
    "2 1 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
])
image.width, image.height   # (2, 1)
image.pixels                # [0xff0000, 0xff]
```

```python
from cubkit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)  # [0, 2, 4, 6]
```

## What it does not do

cubkit has no command-line program, and it does not open windows or draw
anything. The XPM reader decodes images into lists of pixel values and
nothing more. It does not write XPM files or read any other image format.

## Running the tests

```
pip install -e .[test]
pytest
```