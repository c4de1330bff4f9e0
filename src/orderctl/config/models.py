"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, orderctl.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from orderctl.config.shared import DEFAULT_CURRENCY, DEFAULT_MAX_ITEMS_PER_ORDER

# --- orderctl.toml sections ---


class OrdersConfig(BaseModel):
    """[orders] section — seeds the shared configuration at startup."""

    model_config = {"frozen": True}

    max_items_per_order: int = Field(default=DEFAULT_MAX_ITEMS_PER_ORDER, gt=0)
    default_currency: str = DEFAULT_CURRENCY

    @field_validator("default_currency")
    @classmethod
    def _currency_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_currency must not be blank")
        return value.strip()
