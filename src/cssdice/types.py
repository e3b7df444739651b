"""Value types shared by the generators and decoders.

:class:`GeneratedContent` pairs a generated CSS fragment with the value it
decodes to.  Color values are carried as :class:`RGB` triples whose channels
lie in ``[0, 255]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ValueKind(str, Enum):
    """Enumeration of supported value grammars."""

    INTEGER = "integer"
    NUMBER = "number"
    LENGTH = "length"
    OPACITY_VALUE = "opacity-value"
    COLOR = "color"


@dataclass(slots=True, frozen=True)
class RGB:
    """Color triple with each channel in ``[0, 255]``."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel out of range: {channel}")

    @classmethod
    def from_hex(cls, code: str) -> "RGB":
        """Build a triple from ``#RRGGBB`` or ``RRGGBB``."""

        digits = code.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"expected 6 hex digits, got {code!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


DecodedValue = Union[int, float, RGB]


@dataclass(slots=True, frozen=True)
class GeneratedContent:
    """A generated fragment and the value it decodes to.

    ``text`` is already trimmed.  Decoding ``text`` with the grammar's own rule
    yields something equal to ``value`` under that grammar's equality.
    """

    value: DecodedValue
    text: str


__all__ = ["DecodedValue", "GeneratedContent", "RGB", "ValueKind"]
