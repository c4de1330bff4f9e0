"""ConfigService — read and change the shared configuration."""

from __future__ import annotations

from typing import Any

from orderctl.services.base import BaseService
from orderctl.services.result import ServiceResult


class ConfigService(BaseService):
    """Inspect or mutate the shared configuration handle.

    Values the configuration ignores come back as warnings, never errors.
    """

    def show(self) -> ServiceResult:
        return ServiceResult(ok=True, op="show_config", data=self._config.snapshot())

    def update(
        self,
        *,
        max_items_per_order: Any = None,
        default_currency: Any = None,
    ) -> ServiceResult:
        warnings: list[str] = []
        changed: list[str] = []

        if max_items_per_order is not None:
            if self._config.set_max_items_per_order(max_items_per_order):
                changed.append("max_items_per_order")
            else:
                warnings.append(f"Ignored max_items_per_order={max_items_per_order!r}")

        if default_currency is not None:
            if self._config.set_default_currency(default_currency):
                changed.append("default_currency")
            else:
                warnings.append(f"Ignored default_currency={default_currency!r}")

        return ServiceResult(
            ok=True,
            op="update_config",
            data={**self._config.snapshot(), "fields_changed": changed},
            warnings=warnings,
            meta={"persisted": False},
        )
