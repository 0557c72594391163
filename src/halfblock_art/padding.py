"""CSS-style padding shorthand."""

import argparse
from typing import NamedTuple

from .errors import PaddingArityError, PaddingError, PaddingParseError


class Padding(NamedTuple):
    top: int
    right: int
    bottom: int
    left: int


def parse_padding(text: str) -> Padding:
    """
    Parse 1-4 whitespace-separated non-negative integers the way CSS does:

        "a"       -> (a, a, a, a)
        "a b"     -> (a, b, a, b)   vertical, horizontal
        "a b c"   -> (a, b, c, b)   top, horizontal, bottom
        "a b c d" -> (a, b, c, d)   top, right, bottom, left
    """
    parts = text.split()

    # every token is checked before the count, so "x y z w v" is a parse error;
    # a single leading "+" is allowed, any other sign is not
    values = []
    for part in parts:
        digits = part[1:] if part.startswith("+") else part
        if not (digits.isascii() and digits.isdigit()):
            raise PaddingParseError(text)
        values.append(int(digits))

    if len(values) == 1:
        v = values[0]
        return Padding(v, v, v, v)
    if len(values) == 2:
        vert, horiz = values
        return Padding(vert, horiz, vert, horiz)
    if len(values) == 3:
        top, horiz, bottom = values
        return Padding(top, horiz, bottom, horiz)
    if len(values) == 4:
        return Padding(*values)
    raise PaddingArityError(len(values))


def padding_arg(text: str) -> Padding:
    """argparse `type=` adapter for --padding."""
    try:
        return parse_padding(text)
    except PaddingError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
