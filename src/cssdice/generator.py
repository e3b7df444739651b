"""Generator facade bound to a single random source.

:class:`ContentGenerator` exposes the value generators of
:mod:`cssdice.content` as zero-argument methods drawing from one
:class:`~cssdice.core.RandomSource`.  Building it from a
:class:`~cssdice.config.ConfigModel` seeds that source, so the same
configuration always yields the same fragments.
"""

from __future__ import annotations

from collections.abc import Iterator

from cssdice.config import ConfigModel

from . import content
from .core import RandomSource, default_source
from .types import GeneratedContent
from .utils.errors import UnknownKindError
from .utils.logging import ROOT_LOGGER_NAME, get_logger

logger = get_logger(__name__)


def _lookup(kind: str) -> content.Generator:
    try:
        return content.KINDS[kind]
    except KeyError:
        raise UnknownKindError(
            f"unknown value kind {kind!r}; expected one of {sorted(content.KINDS)}"
        ) from None


class ContentGenerator:
    """Generate CSS fragments paired with their decoded values."""

    def __init__(self, source: RandomSource | None = None) -> None:
        self.source: RandomSource = source if source is not None else default_source()

    @classmethod
    def from_config(cls, cfg: ConfigModel) -> "ContentGenerator":
        """Return a generator with a fresh source seeded from ``cfg``."""

        get_logger(ROOT_LOGGER_NAME).setLevel(cfg.logging.level)
        if cfg.seed.value is None:
            logger.debug("seeding random source from system entropy")
        else:
            logger.debug("seeding random source with %d", cfg.seed.value)
        return cls(RandomSource(seed=cfg.seed.value))

    def integer(self) -> GeneratedContent:
        return content.integer(self.source)

    def number(self) -> GeneratedContent:
        return content.number(self.source)

    def length(self) -> GeneratedContent:
        return content.length(self.source)

    def opacity_value(self) -> GeneratedContent:
        return content.opacity_value(self.source)

    def color(self) -> GeneratedContent:
        return content.color(self.source)

    def generate(self, kind: str) -> GeneratedContent:
        """Return one fragment of ``kind`` (e.g. ``"opacity-value"``)."""

        return _lookup(kind)(self.source)

    def batch(self, kind: str, n: int) -> list[GeneratedContent]:
        """Return ``n`` independent fragments of ``kind``."""

        make = _lookup(kind)
        logger.debug("generating %d %s values", n, kind)
        return self.source.repeat(lambda: make(self.source), n)

    def iter_config(self, cfg: ConfigModel) -> Iterator[tuple[str, GeneratedContent]]:
        """Yield ``cfg.generate.count`` fragments for each configured kind."""

        for kind in cfg.generate.kinds:
            for item in self.batch(kind, cfg.generate.count):
                yield kind, item


__all__ = ["ContentGenerator"]
