# Tests for verifying the package skeleton is importable and documented.

import importlib
import pkgutil

import cssdice


def test_root_package_has_docstring() -> None:
    """The root package should define a module docstring."""
    assert cssdice.__doc__ and cssdice.__doc__.strip()


def test_all_modules_have_docstrings() -> None:
    """Ensure every submodule can be imported and has a docstring."""
    for module_info in pkgutil.walk_packages(cssdice.__path__, cssdice.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"


def test_kinds_registry_matches_value_kinds() -> None:
    """Every value kind has exactly one registered generator."""
    assert set(cssdice.KINDS) == {kind.value for kind in cssdice.ValueKind}
