"""Random CSS value generators.

Each generator assembles a random fragment of one CSS value grammar from
:class:`~cssdice.core.RandomSource` draws, then decodes its own text with the
grammar's parser from :mod:`cssdice.decode` and returns both as a
:class:`~cssdice.types.GeneratedContent`.  Whitespace sampled into a fragment
is trimmed before the text is stored.

Supported grammars:

* ``integer``: ``[+-]?[0-9]+``
* ``number``: ``[+-]?\\d*\\.?\\d+``
* ``length``: a non-zero number followed by a unit, or ``0``
* ``opacity-value``: ``1``, ``0``, ``D.NeE`` or ``.N``/``0.N``
* ``color``: ``#rrggbb``, ``#rgb``, ``rgb(r,g,b)``, ``rgb(r%,g%,b%)`` or a name

All generators accept an optional ``source``; the process-wide default from
:func:`cssdice.core.default_source` is used when it is omitted.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Final

from .colors import NAMED_COLOR_NAMES, NAMED_COLORS
from .core import RandomSource, default_source
from .decode import PERCENT_SCALE, clamp, parse_leading_float, parse_leading_int
from .types import RGB, GeneratedContent, ValueKind

__all__ = [
    "Generator",
    "KINDS",
    "LENGTH_UNITS",
    "color",
    "integer",
    "length",
    "number",
    "opacity_value",
]

SIGNS: Final = "+- "
LENGTH_UNITS: Final = ("em", "ex", "px", "in", "cm", "mm", "pt", "pc", "%")
INTEGER_MAX: Final = 9_999_999_999

# Thresholds of the color cascade, tested in order with one draw each.
_HEX6_P: Final = 1 / 5
_HEX3_P: Final = 1 / 4
_RGB_P: Final = 1 / 3
_PERCENT_P: Final = 1 / 2


def _decimal(src: RandomSource) -> str:
    """Return ``I.F`` or ``.F`` with ``I`` and ``F`` in ``[0, 100)``."""

    whole = src.coin(str(src.uniform_int(0, 99)), "")
    return f"{whole}.{src.uniform_int(0, 99)}"


def integer(source: RandomSource | None = None) -> GeneratedContent:
    """Return a random CSS ``<integer>``."""

    src = source or default_source()
    s = src.sample_char(SIGNS) + str(src.uniform_int(0, INTEGER_MAX))
    return GeneratedContent(parse_leading_int(s), s.strip())


def number(source: RandomSource | None = None) -> GeneratedContent:
    """Return a random CSS ``<number>``."""

    src = source or default_source()
    s = src.sample_char(SIGNS) + _decimal(src)
    return GeneratedContent(parse_leading_float(s), s.strip())


def length(source: RandomSource | None = None) -> GeneratedContent:
    """Return a random CSS ``<length>``; zero is always written unitless."""

    src = source or default_source()
    s = _decimal(src)
    if parse_leading_float(s) != 0:
        s += src.choice(LENGTH_UNITS) or ""
    else:
        s = "0"
    return GeneratedContent(parse_leading_float(s), s.strip())


def _scientific(src: RandomSource) -> str:
    return (
        f"{src.uniform_int(0, 9)}.{src.uniform_int(1, 1000)}"
        f"{src.sample_char('Ee')}{src.uniform_int(-10, -1)}"
    )


def _fraction(src: RandomSource) -> str:
    return f"{src.sample_char(' 0')}.{src.uniform_int(1, 1000)}"


def opacity_value(source: RandomSource | None = None) -> GeneratedContent:
    """Return a random CSS ``<opacity-value>`` clamped to ``[0, 1]``."""

    src = source or default_source()
    shapes: tuple[Callable[[RandomSource], str], ...] = (
        lambda _: "1",
        lambda _: "0",
        _scientific,
        _fraction,
    )
    shape = src.choice(shapes)
    assert shape is not None
    s = shape(src)
    return GeneratedContent(clamp(parse_leading_float(s), 0.0, 1.0), s.strip())


def _hex6(rgb: RGB) -> str:
    return "#" + "".join(f"{c:02x}" for c in rgb.as_tuple())


def color(source: RandomSource | None = None) -> GeneratedContent:
    """Return a random CSS ``<color>``.

    Three channels are drawn first.  The form is then picked by a cascade of
    independent draws: below 1/5 gives ``#rrggbb``, otherwise below 1/4 gives
    ``#rgb``, otherwise below 1/3 gives ``rgb(r,g,b)``, otherwise below 1/2
    gives ``rgb(r%,g%,b%)`` and the remainder a named color.  Each form ends
    up with probability 1/5.

    The value is the drawn triple, except for ``#rgb`` where it is the
    rendered nibbles expanded (``n * 17``) and for names where it is the table
    triple.
    """

    src = source or default_source()
    rgb = RGB(src.uniform_int(0, 255), src.uniform_int(0, 255), src.uniform_int(0, 255))

    if src.random() < _HEX6_P:
        return GeneratedContent(rgb, _hex6(rgb))
    if src.random() < _HEX3_P:
        nibbles = tuple(c // 16 for c in rgb.as_tuple())
        text = "#" + "".join(f"{n:x}" for n in nibbles)
        return GeneratedContent(RGB(*(n * 17 for n in nibbles)), text)
    if src.random() < _RGB_P:
        return GeneratedContent(rgb, f"rgb({rgb.r},{rgb.g},{rgb.b})")
    if src.random() < _PERCENT_P:
        percents = ",".join(f"{math.floor(c / PERCENT_SCALE)}%" for c in rgb.as_tuple())
        return GeneratedContent(rgb, f"rgb({percents})")

    name = src.choice(NAMED_COLOR_NAMES)
    assert name is not None
    return GeneratedContent(NAMED_COLORS[name], name)


Generator = Callable[[RandomSource | None], GeneratedContent]

KINDS: dict[str, Generator] = {
    ValueKind.INTEGER.value: integer,
    ValueKind.NUMBER.value: number,
    ValueKind.LENGTH.value: length,
    ValueKind.OPACITY_VALUE.value: opacity_value,
    ValueKind.COLOR.value: color,
}
