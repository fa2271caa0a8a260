"""Tests for the process-wide default registry and module-level functions.

This module verifies:
- The module-level create/add/get/merge_data/replace_data operate on one shared registry
- The default registry is created lazily and reused
- set_default_registry swaps the registry and returns the previous one
- The default registry picks up config from ENTREGISTRY_CONFIG
"""

import pytest

import entregistry
from entregistry import default
from entregistry.registry import InMemoryEntityRegistry
from entschema.errors import UnknownEntityError

from tests.conftest import make_link


class TestModuleLevelFunctions:
    """Tests for the package-level registry API."""

    def test_example_scenario(self, default_registry: InMemoryEntityRegistry) -> None:
        """The documented create/merge/replace flow works on the default registry."""
        key = entregistry.create("LINK", "MUTABLE", {"uri": "http://a"})
        assert entregistry.get(key).data == {"uri": "http://a"}

        entregistry.merge_data(key, {"target": "_blank"})
        assert entregistry.get(key).data == {"uri": "http://a", "target": "_blank"}

        entregistry.replace_data(key, {"uri": "http://b"})
        assert entregistry.get(key).data == {"uri": "http://b"}

        with pytest.raises(UnknownEntityError):
            entregistry.get("999")

    def test_functions_share_default_registry(self, default_registry: InMemoryEntityRegistry) -> None:
        """Keys minted through the functions are visible on the registry object."""
        key = entregistry.add(make_link())

        assert key in default_registry
        assert default_registry.get(key) is entregistry.get(key)

    def test_default_registry_is_reused(self, default_registry: InMemoryEntityRegistry) -> None:
        assert entregistry.get_default_registry() is default_registry
        assert entregistry.get_default_registry() is default_registry


class TestSetDefaultRegistry:
    """Tests for replacing the default registry."""

    def test_swap_returns_previous(self, default_registry: InMemoryEntityRegistry) -> None:
        """Installing a registry returns the one it replaces."""
        replacement = InMemoryEntityRegistry()

        previous = entregistry.set_default_registry(replacement)

        assert previous is default_registry
        assert entregistry.create("LINK", "MUTABLE") == "1"
        assert len(replacement) == 1
        assert len(default_registry) == 0

    def test_none_rebuilds_lazily(self, default_registry: InMemoryEntityRegistry) -> None:
        """After clearing, the next access builds a fresh, empty registry."""
        entregistry.create("LINK", "MUTABLE")
        entregistry.set_default_registry(None)

        fresh = entregistry.get_default_registry()

        assert fresh is not default_registry
        assert len(fresh) == 0

    def test_default_registry_reads_config_file(self, default_registry, monkeypatch, tmp_path) -> None:
        """A lazily built default registry uses ENTREGISTRY_CONFIG."""
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[entregistry]\nkey_prefix = "main:"\n')
        monkeypatch.setenv("ENTREGISTRY_CONFIG", str(config_file))
        default.set_default_registry(None)

        assert entregistry.create("LINK", "MUTABLE") == "main:1"


class TestModuleDocumentation:
    """The package-level functions are the main entry points and carry docstrings."""

    @pytest.mark.parametrize("name", ["create", "add", "get", "merge_data", "replace_data"])
    def test_function_has_docstring(self, name: str) -> None:
        assert getattr(entregistry, name).__doc__
