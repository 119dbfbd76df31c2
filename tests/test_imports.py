"""Tests for gregorian package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_gregorian() -> None:
    """Import gregorian package succeeds."""
    import gregorian

    assert hasattr(gregorian, "__version__")
    assert gregorian.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import gregorian.core submodule succeeds."""
    from gregorian import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import gregorian.format submodule succeeds."""
    from gregorian import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import gregorian.convert submodule succeeds."""
    from gregorian import convert

    assert hasattr(convert, "__all__")


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package."""
    import gregorian

    for name in gregorian.__all__:
        assert hasattr(gregorian, name), name
