"""Decoding rules for the generated value grammars.

The generators build their decoded values by running these parsers over their
own text, and the test-suite uses the same parsers to check the pairing
contract.  Numeric parsers read the longest valid prefix after leading
whitespace and stop at the first character that cannot extend it, so
``parse_leading_float("1.5em")`` is ``1.5``.

A :class:`~cssdice.utils.errors.GrammarError` from self-generated text means
the generator and its grammar disagree.
"""

from __future__ import annotations

import math
import re

from .colors import NAMED_COLORS
from .types import RGB
from .utils.errors import GrammarError

__all__ = [
    "clamp",
    "color_matches",
    "parse_color",
    "parse_leading_float",
    "parse_leading_int",
]

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_RGB_RE = re.compile(r"rgb\(\s*(\d+%?)\s*,\s*(\d+%?)\s*,\s*(\d+%?)\s*\)")

# Percentage channels are quantized by this factor in both directions.
PERCENT_SCALE = 2.55


def parse_leading_int(text: str) -> int:
    """Parse the leading integer of ``text``."""

    match = _INT_RE.match(text)
    if match is None:
        raise GrammarError(f"no integer at start of {text!r}")
    return int(match.group(1))


def parse_leading_float(text: str) -> float:
    """Parse the leading decimal number of ``text``."""

    match = _FLOAT_RE.match(text)
    if match is None:
        raise GrammarError(f"no number at start of {text!r}")
    return float(match.group(1))


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def _channel(token: str) -> int:
    if token.endswith("%"):
        # p% of 255, rounded half up.
        value = (int(token[:-1]) * 255 + 50) // 100
    else:
        value = int(token)
    if not 0 <= value <= 255:
        raise GrammarError(f"color channel out of range: {token!r}")
    return value


def parse_color(text: str) -> RGB:
    """Decode a hex, ``rgb()`` or named color to its triple.

    ``#rgb`` expands each nibble as CSS does (``0xa`` becomes ``0xaa``) and
    percentages map to ``p * 255 / 100`` rounded half up, so ``100%`` is 255.
    """

    text = text.strip()
    match = _HEX_RE.fullmatch(text)
    if match is not None:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        return RGB.from_hex(digits)
    match = _RGB_RE.fullmatch(text)
    if match is not None:
        r, g, b = (_channel(token) for token in match.groups())
        return RGB(r, g, b)
    named = NAMED_COLORS.get(text.lower())
    if named is not None:
        return named
    raise GrammarError(f"not a color: {text!r}")


def color_matches(text: str, rgb: RGB) -> bool:
    """Return whether ``text`` renders ``rgb`` under its own color grammar.

    Lossy forms compare after quantizing ``rgb`` the way the form does:
    percentages as ``floor(channel / 2.55)``.
    """

    text = text.strip()
    match = _RGB_RE.fullmatch(text)
    if match is not None and all(token.endswith("%") for token in match.groups()):
        percents = tuple(int(token[:-1]) for token in match.groups())
        return percents == tuple(math.floor(c / PERCENT_SCALE) for c in rgb.as_tuple())
    try:
        return parse_color(text) == rgb
    except GrammarError:
        return False
