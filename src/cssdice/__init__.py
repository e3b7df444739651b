"""Random CSS value fragments paired with the values they decode to.

Typical use in a randomized parser test::

    from cssdice import ContentGenerator, RandomSource

    gen = ContentGenerator(RandomSource(seed=7))
    item = gen.color()
    assert my_parser(item.text) == item.value
"""

from .content import KINDS, color, integer, length, number, opacity_value
from .core import RandomSource, default_source, seed
from .generator import ContentGenerator
from .types import RGB, GeneratedContent, ValueKind

__version__ = "0.1.0"

__all__ = [
    "KINDS",
    "RGB",
    "ContentGenerator",
    "GeneratedContent",
    "RandomSource",
    "ValueKind",
    "color",
    "default_source",
    "integer",
    "length",
    "number",
    "opacity_value",
    "seed",
]
