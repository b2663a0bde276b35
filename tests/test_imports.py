"""Tests for Leaptime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_leaptime() -> None:
    """Import leaptime package succeeds."""
    import leaptime

    assert hasattr(leaptime, "__version__")
    assert leaptime.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import leaptime.core submodule succeeds."""
    from leaptime import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import leaptime.format submodule succeeds."""
    from leaptime import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_internal_module() -> None:
    """Import leaptime._internal submodule succeeds."""
    from leaptime import _internal

    assert hasattr(_internal, "__all__")


def test_public_api() -> None:
    """Every name in __all__ is exported."""
    import leaptime

    for name in leaptime.__all__:
        assert hasattr(leaptime, name), name


def test_errors_hierarchy() -> None:
    """All exceptions derive from LeaptimeError."""
    from leaptime import LeaptimeError, ParseError, ValidationError

    assert issubclass(ValidationError, LeaptimeError)
    assert issubclass(ParseError, LeaptimeError)
