"""Smoke tests for package import and version."""

import cssdice


def test_import_package() -> None:
    assert isinstance(cssdice, object)


def test_version() -> None:
    assert cssdice.__version__ == "0.1.0"


def test_public_generators() -> None:
    for name in ("integer", "number", "length", "opacity_value", "color"):
        assert callable(getattr(cssdice, name))
    assert isinstance(cssdice.integer(), cssdice.GeneratedContent)
