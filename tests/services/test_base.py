"""Tests for BaseService."""

from orderctl.config.shared import SharedConfiguration, get_shared_configuration
from orderctl.domain.errors import IncompleteStateError, InvalidArgumentError, LimitExceededError
from orderctl.services.base import BaseService


class TestBaseService:
    def test_injected_config(self) -> None:
        cfg = SharedConfiguration()
        assert BaseService(cfg)._config is cfg

    def test_defaults_to_process_wide_config(self) -> None:
        assert BaseService()._config is get_shared_configuration()


class TestFailure:
    def test_invalid_argument(self) -> None:
        result = BaseService._failure("create_product", InvalidArgumentError("bad name"))
        assert result.ok is False
        assert result.op == "create_product"
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"
        assert result.error.message == "bad name"

    def test_limit_exceeded_carries_limit(self) -> None:
        result = BaseService._failure("build_order", LimitExceededError(5), index=5)
        assert result.error is not None
        assert result.error.code == "LIMIT_EXCEEDED"
        assert result.error.detail == {"limit": 5, "index": 5}

    def test_warnings_preserved(self) -> None:
        result = BaseService._failure("build_order", IncompleteStateError("x"), warnings=["w"])
        assert result.warnings == ["w"]
