"""Shared configuration — process-wide, mutable assembly limits.

One logical :class:`SharedConfiguration` exists per process, created lazily
by :func:`get_shared_configuration` with a check / lock / check-again
sequence so racing first callers all observe the same instance.

Builders receive the handle by injection; tests and embedders can create
independent instances. Writes through any reference are visible to every
holder of that reference immediately. There is no snapshot or versioning.

INVARIANT: ``max_items_per_order > 0`` and ``default_currency`` is non-blank.
Setters ignore values that would break this; they never raise.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from orderctl.config.settings import OrderSettings

log = structlog.get_logger(__name__)

DEFAULT_MAX_ITEMS_PER_ORDER = 50
DEFAULT_CURRENCY = "BRL"


class SharedConfiguration:
    """Mutable store of order assembly limits.

    Every accessor holds an internal lock, so builders on other threads
    may read the limit while it is being changed.
    """

    def __init__(
        self,
        *,
        max_items_per_order: int = DEFAULT_MAX_ITEMS_PER_ORDER,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._lock = threading.Lock()
        self._max_items_per_order = DEFAULT_MAX_ITEMS_PER_ORDER
        self._default_currency = DEFAULT_CURRENCY
        self.set_max_items_per_order(max_items_per_order)
        self.set_default_currency(default_currency)

    @classmethod
    def from_settings(cls, settings: OrderSettings) -> SharedConfiguration:
        """Seed a new instance from the ``[orders]`` settings section."""
        return cls(
            max_items_per_order=settings.orders.max_items_per_order,
            default_currency=settings.orders.default_currency,
        )

    @property
    def max_items_per_order(self) -> int:
        with self._lock:
            return self._max_items_per_order

    def set_max_items_per_order(self, value: Any) -> bool:
        """Set the item limit. Non-positive or non-integer values are ignored.

        Returns:
            True if the value was applied.
        """
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            log.debug("config.shared.ignored", key="max_items_per_order", value=repr(value))
            return False
        with self._lock:
            self._max_items_per_order = value
        return True

    @property
    def default_currency(self) -> str:
        with self._lock:
            return self._default_currency

    def set_default_currency(self, code: Any) -> bool:
        """Set the currency code. Empty, blank, or non-text values are ignored.

        Returns:
            True if the value was applied.
        """
        if not isinstance(code, str) or not code.strip():
            log.debug("config.shared.ignored", key="default_currency", value=repr(code))
            return False
        with self._lock:
            self._default_currency = code
        return True

    def snapshot(self) -> dict[str, Any]:
        """Both values read under a single lock acquisition."""
        with self._lock:
            return {
                "max_items_per_order": self._max_items_per_order,
                "default_currency": self._default_currency,
            }


_instance: SharedConfiguration | None = None
_instance_lock = threading.Lock()


def get_shared_configuration() -> SharedConfiguration:
    """Return the process-wide instance, creating it on first access."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = SharedConfiguration()
                log.debug("config.shared.initialized", **_instance.snapshot())
    return _instance


def configure_shared(settings: OrderSettings) -> SharedConfiguration:
    """Apply the ``[orders]`` settings section to the process-wide instance."""
    shared = get_shared_configuration()
    shared.set_max_items_per_order(settings.orders.max_items_per_order)
    shared.set_default_currency(settings.orders.default_currency)
    return shared
