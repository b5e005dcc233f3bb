# libmyprint

A small library built around a printf-style formatter. The formatter has its
own rules for flags, widths and conversions. These rules are not the same as
those of Python's `%` operator or `str.format`. The library also has string
helpers and integer helpers that work on ASCII text and 32-bit integers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting

```python
from libmyprint.printf import sprintf, printf

sprintf("%d apples and %s", 3, "pears")   # '3 apples and pears'
sprintf("%05d", 42)                       # '00042'
sprintf("%-5d|", 42)                      # '42   |'
printf("%x\n", 255)                       # writes 'ff\n', returns 3
```

- `sprintf(fmt, *args)` returns the formatted text. The format ends at its
  first NUL character.
- `printf(fmt, *args, file=None)` writes the formatted text to `file`, or to
  standard output when `file` is not given. It returns the length of the text
  it wrote.
- `format_conversion(conversion, args, flags="")` renders a single
  conversion. It takes its value from the iterator `args`.

### Conversions

- `%d`, `%i`: signed 32-bit integers. Width, zero padding, `-` and `+` apply.
- `%u`: the output starts with the line `u\n`, followed by the number. A
  negative argument is rendered as `4294962729`.
- `%x`, `%X`: the magnitude in lower-case or upper-case hexadecimal.
- `%o`: the magnitude in octal.
- `%c`: a one-character string, or the character for an integer code taken
  modulo 256.
- `%s`: the string. `None` is rendered as `(null)`.
- `%S`: the string. Characters outside the codes 32 to 127 are rendered in
  octal. `None` raises `TypeError`.
- `%f`, `%F`: fixed notation, with the value rounded to single precision.
- `%e`, `%E`: exponent notation. This works for positive values only.
- `%g`, `%G`: fixed notation when the decimal exponent is below the precision
  (6 by default). Otherwise exponent notation is used.
- `%p`: `0x` followed by a hexadecimal value.
- `%n`: uses up an argument and writes nothing.
- `%%`: a literal percent sign.

Any other character after `%` is written out as it is, with the `%` before
it.

If there are too few arguments, `TypeError` is raised. If a format ends inside
a conversion specification, `ValueError` is raised. A non-finite value, or a
non-positive value where exponent form is needed, also raises `ValueError`.

### Flags

`libmyprint.flags` reads the run of flag characters between `%` and the
conversion.

- `parse_flags(fmt, index)` returns the flags that follow the `%` at position
  `index`.
- `width(flags)` returns every digit before the first `.`, joined together.
- `precision(flags)` returns the digits right after the first `.`. Without a
  `.` it returns 6.
- `alignment(flags)` returns an `Align` value: `RIGHT`, `LEFT` (any `-`), or
  `PLUS` (a `+` and no `-`).
- `zero_pad(flags)` tells whether zero padding applies.
- `alternate_prefix(flags, conversion)` returns the prefix that a leading `#`
  gives: `0`, `0x` or `0X`.
- `alternate_changes(conversion)` tells whether `#` changes the output of a
  conversion.
- `space_prefix(flags, conversion)` returns the blank that a leading space
  gives.
- `padding(count, zero, align)` returns the fill characters.

Width, zero padding and alignment affect only the integer conversions and
`%p`. Precision affects only `%g` and `%G`.

## Building blocks

- `libmyprint.intfmt` renders integers. It provides `format_nbr`,
  `format_nbr_u`, `format_hexa`, `format_hexa_upper`, `format_octa`,
  `format_octa_char` and `format_printables`.
- `libmyprint.floatfmt` renders single-precision floats. It provides
  `format_float`, `format_float_zero`, `format_exp`, `format_exp_upper`,
  `format_general` and `format_general_upper`.
- `libmyprint.textutils` has ASCII string helpers:
  - `strlen`, `revstr`, `strcat`, `strncat`, `strncpy`, `strstr`
  - `strcmp` and `strncmp`, which compare lengths only
  - `strupcase`, `strlowcase`, `strcapitalize`
  - `str_isalpha`, `str_isnum`, `str_islower`, `str_isupper`,
    `str_isprintable`, `is_alphanum`
  - `count_words`, `str_to_word_array`, `show_word_array`
- `libmyprint.numbers` has integer helpers:
  - `getnbr` parses leading signs and digits. It returns 0 when the magnitude
    exceeds the 32-bit maximum.
  - `compute_power_rec` and `compute_square_root`.
  - `is_prime`, which tests divisors below `nb // 2`. Because of this, 4
    counts as prime.
  - `find_prime_sup`, `isneg`, `sort_int_array` and `swap`.

```python
from libmyprint.textutils import str_to_word_array
from libmyprint.numbers import getnbr, find_prime_sup

str_to_word_array("hello, big world")   # ['hello', 'big', 'world']
getnbr("--42abc")                       # 42
find_prime_sup(8)                       # 11
```

## What it does not do

This is a library only. It has no command-line program.

The formatter does not support:

- length modifiers such as `l` or `h`
- widths read from the arguments (`*` is accepted as a flag but ignored)
- the `%a` and `%A` conversions