"""C-style string formatting with a fixed, well-defined subset of printf.

Supported conversions: ``c s p d i u x X %``. Flags ``- 0 + space #``,
a field width and a precision (either may be ``*``, taken from the
argument list) are honoured. Unknown conversions are echoed back as-is.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator

_FLAGS = "-0+ #"
_DIGITS = "0123456789"
_BASES = {
    "u": "0123456789",
    "x": "0123456789abcdef",
    "X": "0123456789ABCDEF",
}


@dataclass
class FormatSpec:
    """Flags, width and precision parsed from one conversion specifier."""

    minus: bool = False
    zero: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    width: int = 0
    precision: int | None = None

    def pad(self, body: str) -> str:
        """Pad ``body`` with spaces to the field width."""
        fill = " " * max(self.width - len(body), 0)
        return body + fill if self.minus else fill + body

    def pad_number(self, prefix: str, digits: str) -> str:
        """Lay out a number as [spaces][prefix][zeros][digits][spaces]."""
        precision_fill = ""
        if self.precision is not None and self.precision > len(digits):
            precision_fill = "0" * (self.precision - len(digits))
        content = len(prefix) + len(precision_fill) + len(digits)
        pad = max(self.width - content, 0)
        zero_pad = self.zero and self.precision is None and not self.minus
        leading = "" if self.minus or zero_pad else " " * pad
        zeros = "0" * pad if zero_pad else ""
        trailing = " " * pad if self.minus else ""
        return leading + prefix + zeros + precision_fill + digits + trailing


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _read_number(fmt: str, index: int) -> tuple[int, int]:
    value = 0
    while index < len(fmt) and fmt[index] in _DIGITS:
        value = value * 10 + int(fmt[index])
        index += 1
    return value, index


def parse_spec(fmt: str, index: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    """Parse flags, width and precision starting just after a ``%``.

    ``args`` is an iterator from which ``*`` values are taken. Returns the
    spec and the index of the conversion character.
    """
    spec = FormatSpec()
    while index < len(fmt) and fmt[index] in _FLAGS:
        flag = fmt[index]
        if flag == "-":
            spec.minus = True
        elif flag == "0":
            spec.zero = True
        elif flag == "+":
            spec.plus = True
        elif flag == " ":
            spec.space = True
        else:
            spec.hash = True
        index += 1

    if index < len(fmt) and fmt[index] == "*":
        width = int(_next_arg(args))
        if width < 0:
            spec.minus = True
            width = -width
        spec.width = width
        index += 1
    else:
        spec.width, index = _read_number(fmt, index)

    if index < len(fmt) and fmt[index] == ".":
        index += 1
        if index < len(fmt) and fmt[index] == "*":
            precision = int(_next_arg(args))
            spec.precision = precision if precision >= 0 else None
            index += 1
        else:
            spec.precision, index = _read_number(fmt, index)

    if spec.minus:
        spec.zero = False
    if spec.plus:
        spec.space = False
    return spec, index


def _to_base(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    radix = len(digits)
    out = []
    while value > 0:
        value, rem = divmod(value, radix)
        out.append(digits[rem])
    return "".join(reversed(out))


def _format_char(value: Any, spec: FormatSpec) -> str:
    char = chr(value & 0xFF) if isinstance(value, int) else str(value)[:1]
    return spec.pad(char)


def _format_str(value: Any, spec: FormatSpec) -> str:
    text = "(null)" if value is None else str(value)
    if spec.precision is not None:
        text = text[: spec.precision]
    return spec.pad(text)


def _format_ptr(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + _to_base(address & 0xFFFFFFFFFFFFFFFF, _BASES["x"])


def _format_signed(value: Any, spec: FormatSpec) -> str:
    number = int(value) & 0xFFFFFFFF
    if number >= 0x80000000:
        number -= 0x100000000
    if number < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    return spec.pad_number(sign, _to_base(abs(number), _DIGITS))


def _format_unsigned(value: Any, conv: str, spec: FormatSpec) -> str:
    number = int(value) & 0xFFFFFFFF
    prefix = ""
    if spec.hash and number != 0 and conv in "xX":
        prefix = "0" + conv
    return spec.pad_number(prefix, _to_base(number, _BASES[conv]))


def _convert(conv: str, args: Iterator[Any], spec: FormatSpec) -> str:
    if conv == "c":
        return _format_char(_next_arg(args), spec)
    if conv == "s":
        return _format_str(_next_arg(args), spec)
    if conv == "p":
        return _format_ptr(_next_arg(args))
    if conv in "di":
        return _format_signed(_next_arg(args), spec)
    if conv in _BASES:
        return _format_unsigned(_next_arg(args), conv, spec)
    if conv == "%":
        return "%"
    return "%" + conv


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    arg_iter = iter(args)
    out: list[str] = []
    index = 0
    while index < len(fmt):
        char = fmt[index]
        if char == "%" and index + 1 < len(fmt):
            spec, index = parse_spec(fmt, index + 1, arg_iter)
            if index >= len(fmt):
                out.append("%")
                break
            out.append(_convert(fmt[index], arg_iter, spec))
        else:
            out.append(char)
        index += 1
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)