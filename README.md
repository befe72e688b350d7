# ftformat

A tiny printf-style formatter. It handles a fixed set of conversions, works
like a minimal C `printf`, and reports how many characters it produced.

## Conversions

| Spec | Meaning                                                                     |
|------|-----------------------------------------------------------------------------|
| `%c` | a single character: a one-character string, or an integer code (low 8 bits) |
| `%s` | a string; `None` prints `(null)`, and a NUL character ends the text         |
| `%d` | a signed 32-bit integer (larger values wrap)                                |
| `%i` | same as `%d`                                                                |
| `%u` | an unsigned 32-bit integer (negative values wrap)                           |
| `%x` | lowercase hexadecimal of an unsigned 32-bit integer                         |
| `%X` | uppercase hexadecimal of an unsigned 32-bit integer                         |
| `%p` | a 64-bit address as `0x...` in lowercase hex; `None` or `0` prints `(nil)`  |
| `%%` | a literal percent sign                                                      |

An unknown conversion character produces nothing and takes no argument.
A lone `%` at the end of the format is dropped. A NUL character in the
format ends it.

If the format needs more arguments than it was given, `TypeError` is raised.
Passing `None` as the format also raises `TypeError`.

## Usage

```python
from ftformat.printf import printf, render

text = render("%s is %d years, %x in hex", "Answer", 42, 255)
# 'Answer is 42 years, ff in hex'

count = printf("%c%c\n", "h", "i")   # writes "hi\n" to stdout, returns 3
```

`printf` writes to `sys.stdout` by default. Pass `stream=` to write to any
text file object instead. It returns the number of characters written.

The single conversions are also available on their own in
`ftformat.conversions`: `format_char`, `format_string`, `format_int`,
`format_unsigned`, `format_hex(n, upper)` and `format_pointer`.
`ftformat.printf.convert(spec, args)` renders one conversion character,
taking its value from an iterator of arguments.

## What it does not do

There are no flags, field widths, precisions or length modifiers, and no
floating-point conversions. The package is a library only; it has no
command-line tool.

## Installing for development

```
pip install -e ".[test]"
pytest
```