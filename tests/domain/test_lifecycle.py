"""Tests for order status defaults."""

from orderctl.domain.lifecycle import OrderStatus, finalize_status


class TestFinalizeStatus:
    def test_provisional_status_promoted(self) -> None:
        assert finalize_status("initial-pending") == "pending"

    def test_enum_value_promoted(self) -> None:
        assert finalize_status(OrderStatus.INITIAL_PENDING) == OrderStatus.PENDING

    def test_caller_status_untouched(self) -> None:
        assert finalize_status("AWAITING_PAYMENT") == "AWAITING_PAYMENT"

    def test_similar_status_untouched(self) -> None:
        assert finalize_status("INITIAL-PENDING") == "INITIAL-PENDING"
