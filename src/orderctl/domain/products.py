"""Product value types.

Two variants share the :class:`Product` base:

- :class:`PhysicalProduct` carries a non-negative weight in kilograms.
- :class:`DigitalProduct` carries a download URL (empty when unknown).

INVARIANT: name is non-empty, price > 0, weight >= 0. Products are frozen
once constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any, ClassVar

from orderctl.domain.errors import InvalidArgumentError


class ProductKind(StrEnum):
    """Product variants understood by the factory."""

    PHYSICAL = "physical"
    DIGITAL = "digital"


def to_decimal(value: Any, field_name: str) -> Decimal:
    """Convert *value* to ``Decimal`` via its string form.

    Raises:
        InvalidArgumentError: If *value* is a bool or not numeric.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidArgumentError(f"{field_name} must be a number, got {value!r}.")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"{field_name} must be a number, got {value!r}.") from exc


@dataclass(frozen=True)
class Product:
    """Base product: a named, positively priced sellable item."""

    kind: ClassVar[ProductKind]

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("Product name must not be empty.")
        price = to_decimal(self.price, "Product price")
        if not price.is_finite() or price <= 0:
            raise InvalidArgumentError("Product price must be positive.")
        object.__setattr__(self, "price", price)

    def describe(self) -> str:
        return f"{self.name} ({self.kind}) @ {self.price:.2f}"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "name": self.name, "price": str(self.price)}


@dataclass(frozen=True)
class PhysicalProduct(Product):
    """Product shipped as a physical good."""

    kind: ClassVar[ProductKind] = ProductKind.PHYSICAL

    weight: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        super().__post_init__()
        weight = to_decimal(self.weight, "Product weight")
        if not weight.is_finite() or weight < 0:
            raise InvalidArgumentError("Product weight must not be negative.")
        object.__setattr__(self, "weight", weight)

    def describe(self) -> str:
        return f"Physical product: {self.name}, price {self.price:.2f}, weight {self.weight}kg"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "weight": str(self.weight)}


@dataclass(frozen=True)
class DigitalProduct(Product):
    """Product delivered by download."""

    kind: ClassVar[ProductKind] = ProductKind.DIGITAL

    download_url: str = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.download_url is None:
            object.__setattr__(self, "download_url", "")

    def describe(self) -> str:
        url = self.download_url or "N/A"
        return f"Digital product: {self.name}, price {self.price:.2f}, URL: {url}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "download_url": self.download_url}
