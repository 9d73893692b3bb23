"""Tests for perch.__init__ — lazy public API covers all exported names."""

import pytest

import perch


@pytest.mark.parametrize("name", perch.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(perch, name)
    assert obj is not None, f"perch.{name} resolved to None"


def test_resolves_to_defining_module() -> None:
    from perch.http.response import ResponseBuilder
    from perch.routing.router import Router

    assert perch.Router is Router
    assert perch.ResponseBuilder is ResponseBuilder


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        perch.__getattr__("ThisDoesNotExist")


def test_version() -> None:
    assert isinstance(perch.__version__, str)
