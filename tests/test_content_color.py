from __future__ import annotations

import math
import re
from collections import Counter
from typing import Any

from cssdice.colors import NAMED_COLORS
from cssdice.content import color
from cssdice.core import RandomSource
from cssdice.decode import color_matches, parse_color
from cssdice.types import RGB

LAPS = 10000

COLOR_RE = re.compile(r"^(#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})|rgb\(\d+%?,\d+%?,\d+%?\))$")


def _form(text: str) -> str:
    if text.startswith("#"):
        return "hex6" if len(text) == 7 else "hex3"
    if text.startswith("rgb("):
        return "percent" if "%" in text else "rgb"
    return "named"


def test_color_grammar_and_value() -> None:
    src = RandomSource(seed=201)
    for _ in range(LAPS):
        r = color(src)
        assert isinstance(r.value, RGB)
        assert r.text in NAMED_COLORS or COLOR_RE.match(r.text), r.text
        assert color_matches(r.text, r.value), r.text
        if r.text.startswith("rgb("):
            for token in r.text[4:-1].split(","):
                if token.endswith("%"):
                    assert 0 <= math.floor(2.55 * int(token[:-1])) <= 255
                else:
                    assert 0 <= int(token) <= 255
        elif not r.text.startswith("#"):
            assert r.value == NAMED_COLORS[r.text]


def test_hex6_pairs_match_channels() -> None:
    src = RandomSource(seed=202)
    checked = 0
    for _ in range(LAPS):
        r = color(src)
        if _form(r.text) != "hex6":
            continue
        checked += 1
        assert isinstance(r.value, RGB)
        assert int(r.text[1:3], 16) == r.value.r
        assert int(r.text[3:5], 16) == r.value.g
        assert int(r.text[5:7], 16) == r.value.b
    assert checked > 0


def test_cascade_branch_frequencies() -> None:
    src = RandomSource(seed=203)
    counts = Counter(_form(color(src).text) for _ in range(LAPS))
    assert set(counts) == {"hex6", "hex3", "rgb", "percent", "named"}
    for form, count in counts.items():
        assert 0.17 < count / LAPS < 0.23, form


def test_cascade_hex6(scripted: Any) -> None:
    src = scripted([0.0, 0.999, 0.5, 0.1])
    r = color(src)
    assert r.text == "#00ff80"
    assert r.value == RGB(0, 255, 128)
    assert src.rng.values == []


def test_cascade_hex3(scripted: Any) -> None:
    src = scripted([0.5, 0.5, 0.5, 0.9, 0.1])
    r = color(src)
    assert r.text == "#888"
    assert r.value == RGB(136, 136, 136)
    assert parse_color(r.text) == r.value
    assert src.rng.values == []


def test_cascade_rgb(scripted: Any) -> None:
    src = scripted([0.5, 0.5, 0.5, 0.9, 0.9, 0.1])
    r = color(src)
    assert r.text == "rgb(128,128,128)"
    assert r.value == RGB(128, 128, 128)
    assert src.rng.values == []


def test_cascade_percent(scripted: Any) -> None:
    src = scripted([0.5, 0.5, 0.5, 0.9, 0.9, 0.9, 0.1])
    r = color(src)
    assert r.text == "rgb(50%,50%,50%)"
    assert r.value == RGB(128, 128, 128)
    assert src.rng.values == []


def test_cascade_named(scripted: Any) -> None:
    src = scripted([0.5, 0.5, 0.5, 0.9, 0.9, 0.9, 0.9, 0.0])
    r = color(src)
    assert r.text == "aliceblue"
    assert r.value == RGB(0xF0, 0xF8, 0xFF)
    assert src.rng.values == []
