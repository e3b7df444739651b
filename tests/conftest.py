from __future__ import annotations

import random
from collections.abc import Callable, Iterable

import pytest

from cssdice.core import RandomSource


class ScriptedRandom(random.Random):
    """``random.Random`` whose ``random()`` replays a fixed list of draws."""

    def __init__(self, values: Iterable[float]) -> None:
        super().__init__(0)
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)


@pytest.fixture
def scripted() -> Callable[[Iterable[float]], RandomSource]:
    """Return a factory of sources replaying the given draws in order."""

    def make(values: Iterable[float]) -> RandomSource:
        return RandomSource(ScriptedRandom(values))

    return make
