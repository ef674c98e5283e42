"""Tests for Horologe package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_horologe() -> None:
    """Import horologe package succeeds."""
    import horologe

    assert hasattr(horologe, "__version__")
    assert horologe.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import horologe.core submodule succeeds."""
    from horologe import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import horologe.format submodule succeeds."""
    from horologe import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import horologe.convert submodule succeeds."""
    from horologe import convert

    assert hasattr(convert, "__all__")


def test_public_names_resolve() -> None:
    """Every name in horologe.__all__ is an attribute of the package."""
    import horologe

    for name in horologe.__all__:
        assert hasattr(horologe, name), name


def test_core_types_are_independent() -> None:
    """Date, Time and DateTime share no base class beyond object."""
    from horologe import Date, DateTime, Time

    assert Date.__bases__ == (object,)
    assert Time.__bases__ == (object,)
    assert DateTime.__bases__ == (object,)
