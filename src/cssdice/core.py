"""Random primitives backing every value generator.

:class:`RandomSource` wraps an explicitly injected :class:`random.Random` and
exposes the small set of draws the generators need: uniform floats and
integers, choice from a sequence, character sampling, an in-place
Fisher–Yates shuffle and biased coin flips.

Every primitive has a scalar form and an explicit fixed-length sequence form
(``uniform_int`` / ``uniform_ints`` and so on).  All draws go through the
wrapped generator's ``random()`` method, one call per scalar, so that a seeded
source reproduces the exact same stream and tests can script the draws.

Empty or missing input to :meth:`RandomSource.choice` and
:meth:`RandomSource.sample_char` yields ``None`` and ``""`` respectively rather
than raising.
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable, MutableSequence, Sequence
from typing import TypeVar

__all__ = ["RandomSource", "default_source", "seed"]

T = TypeVar("T")
S = TypeVar("S", bound=MutableSequence)


def _between(rng: random.Random, lo: float, hi: float) -> float:
    if lo < hi:
        return rng.random() * (hi - lo) + lo
    return rng.random() * (lo - hi) + hi


class RandomSource:
    """Seedable provider of uniform draws."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        """Wrap ``rng`` or create a new generator seeded with ``seed``.

        Parameters
        ----------
        rng:
            Generator to draw from.  Takes precedence over ``seed``.
        seed:
            Seed for a fresh :class:`random.Random` when ``rng`` is omitted.
            ``None`` seeds from system entropy.
        """

        self._rng: random.Random = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def reseed(self, value: int | None) -> None:
        self._rng.seed(value)

    def random(self) -> float:
        """Return one float in ``[0, 1)``."""

        return self._rng.random()

    # -- Floats -------------------------------------------------------------

    def uniform_float(self, lo: float | None = None, hi: float | None = None) -> float:
        """Return one uniformly distributed float.

        With no arguments the draw lies in ``[0, 1)``; with only ``lo`` it lies
        between ``0`` and ``lo``; with both it lies between the smaller and the
        larger bound, whichever order they are given in.  Passing ``hi``
        without ``lo`` raises :class:`TypeError`.
        """

        if lo is None:
            if hi is not None:
                raise TypeError("uniform_float() got hi without lo")
            return _between(self._rng, 0.0, 1.0)
        if hi is None:
            return _between(self._rng, 0.0, lo)
        return _between(self._rng, lo, hi)

    def uniform_floats(self, lo: float, hi: float, n: int) -> list[float]:
        return self.repeat(lambda: _between(self._rng, lo, hi), n)

    # -- Integers -----------------------------------------------------------

    def uniform_int(self, lo: int, hi: int | None = None) -> int:
        """Return one integer in ``[lo, hi]`` with both ends inclusive.

        With only ``lo`` the range is ``[0, lo]``.  The draw is taken from
        ``[lo, hi + 1)`` and floored.
        """

        if hi is None:
            lo, hi = 0, lo
        if lo > hi:
            lo, hi = hi, lo
        return min(math.floor(_between(self._rng, lo, hi + 1)), hi)

    def uniform_ints(self, lo: int, hi: int, n: int) -> list[int]:
        return self.repeat(lambda: self.uniform_int(lo, hi), n)

    # -- Sampling -----------------------------------------------------------

    def choice(self, items: Sequence[T] | None) -> T | None:
        """Return one element of ``items`` or ``None`` if there is none."""

        if not items:
            return None
        return items[math.floor(_between(self._rng, 0, len(items)))]

    def choices(self, items: Sequence[T] | None, n: int) -> list[T] | None:
        """Sample ``n`` elements with replacement; ``None`` for empty input."""

        if not items:
            return None
        return self.repeat(lambda: items[math.floor(_between(self._rng, 0, len(items)))], n)

    def sample_char(self, chars: str | None) -> str:
        if not chars:
            return ""
        return chars[math.floor(_between(self._rng, 0, len(chars)))]

    def sample_chars(self, chars: str | None, n: int) -> str:
        """Return a string of ``n`` characters sampled with replacement."""

        if not chars:
            return ""
        return "".join(self.repeat(lambda: self.sample_char(chars), n))

    def shuffle(self, items: S) -> S:
        """Permute ``items`` in place (Fisher–Yates) and return it."""

        remaining = len(items)
        while remaining:
            i = math.floor(self._rng.random() * remaining)
            remaining -= 1
            items[remaining], items[i] = items[i], items[remaining]
        return items

    # -- Coins --------------------------------------------------------------

    def coin(self, head: T, tail: T, p: float = 0.5) -> T:
        """Return ``head`` with probability ``p``, otherwise ``tail``."""

        return head if self._rng.random() < p else tail

    def coins(self, head: T, tail: T, n: int, p: float = 0.5) -> list[T]:
        return self.repeat(lambda: self.coin(head, tail, p), n)

    # -- Helpers ------------------------------------------------------------

    @staticmethod
    def repeat(generator: Callable[[], T], n: int) -> list[T]:
        """Call ``generator`` ``n`` times and collect the results in order."""

        return [generator() for _ in range(max(n, 0))]


_DEFAULT = RandomSource()


def default_source() -> RandomSource:
    """Return the process-wide source used when none is injected."""

    return _DEFAULT


def seed(value: int | None) -> None:
    """Reseed the process-wide source."""

    _DEFAULT.reseed(value)
