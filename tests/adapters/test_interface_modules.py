"""Interface packages should not re-export anything."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "package",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_have_empty_exports(package: str) -> None:
    assert import_module(package).__all__ == []
