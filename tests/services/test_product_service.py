"""Tests for ProductService and ConfigService."""

from orderctl.config.shared import SharedConfiguration
from orderctl.services.configuration import ConfigService
from orderctl.services.product import ProductService


class TestProductService:
    def test_create_physical(self, config: SharedConfiguration) -> None:
        result = ProductService(config).create_product("FISICO", "Book", 75.90, 1.2)
        assert result.ok
        assert result.op == "create_product"
        assert result.data["kind"] == "physical"
        assert result.data["weight"] == "1.2"
        assert result.data["price"] == "75.9"
        assert "Book" in result.data["description"]
        assert result.warnings == []

    def test_wrong_shape_extra_is_warning(self, config: SharedConfiguration) -> None:
        result = ProductService(config).create_product("digital", "Ebook", 9.99, 123)
        assert result.ok
        assert result.data["download_url"] == ""
        assert len(result.warnings) == 1

    def test_unknown_kind(self, config: SharedConfiguration) -> None:
        result = ProductService(config).create_product("invalido", "X", 10.0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"
        assert "invalido" in result.error.message
        assert result.error.detail == {"kind": "invalido"}


class TestConfigService:
    def test_show(self, config: SharedConfiguration) -> None:
        result = ConfigService(config).show()
        assert result.ok
        assert result.data == {"max_items_per_order": 50, "default_currency": "BRL"}

    def test_update(self, config: SharedConfiguration) -> None:
        result = ConfigService(config).update(max_items_per_order=5, default_currency="USD")
        assert result.ok
        assert result.data["fields_changed"] == ["max_items_per_order", "default_currency"]
        assert config.max_items_per_order == 5
        assert config.default_currency == "USD"
        assert result.meta == {"persisted": False}

    def test_ignored_values_are_warnings(self, config: SharedConfiguration) -> None:
        result = ConfigService(config).update(max_items_per_order=0, default_currency="  ")
        assert result.ok
        assert result.data["fields_changed"] == []
        assert len(result.warnings) == 2
        assert config.max_items_per_order == 50
        assert config.default_currency == "BRL"
