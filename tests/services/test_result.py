"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from orderctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="build_order", data={"id": "abcd1234"})
        assert result.ok is True
        assert result.op == "build_order"
        assert result.data == {"id": "abcd1234"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        result = ServiceResult(
            ok=False,
            op="build_order",
            error=ServiceError(code="LIMIT_EXCEEDED", message="too many", detail={"limit": 3}),
        )
        assert result.error is not None
        assert result.error.code == "LIMIT_EXCEEDED"
        assert result.error.detail == {"limit": 3}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="show_config", data={"default_currency": "BRL"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["default_currency"] == "BRL"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="INVALID_ARGUMENT", message="bad").detail == {}
