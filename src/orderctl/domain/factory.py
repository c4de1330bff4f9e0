"""Product factory — dispatch product creation on a type tag.

Two entry points:

- :func:`create_product` takes a kind tag plus loosely-typed extra
  arguments. A wrong-shaped optional argument is not an error: the factory
  emits a diagnostic and substitutes the variant's default.
- :func:`build_product` takes an explicit attribute bundle per variant and
  needs no runtime shape checking.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import structlog

from orderctl.domain.errors import InvalidArgumentError
from orderctl.domain.products import DigitalProduct, PhysicalProduct, Product, ProductKind

log = structlog.get_logger(__name__)

# Tag aliases accepted in addition to the canonical ProductKind values.
KIND_ALIASES: dict[str, ProductKind] = {
    "fisico": ProductKind.PHYSICAL,
}


@dataclass(frozen=True)
class PhysicalAttributes:
    """Variant-specific arguments for a physical product."""

    weight: Decimal = Decimal("0")


@dataclass(frozen=True)
class DigitalAttributes:
    """Variant-specific arguments for a digital product."""

    download_url: str = ""


ProductAttributes = PhysicalAttributes | DigitalAttributes


def resolve_kind(kind: Any) -> ProductKind:
    """Map a case-insensitive tag to a :class:`ProductKind`.

    Raises:
        InvalidArgumentError: If *kind* is absent or unrecognized.
    """
    if not isinstance(kind, str):
        raise InvalidArgumentError(f"Unknown product kind: {kind}")
    tag = kind.strip().lower()
    if tag in KIND_ALIASES:
        return KIND_ALIASES[tag]
    try:
        return ProductKind(tag)
    except ValueError:
        raise InvalidArgumentError(f"Unknown product kind: {kind}") from None


def _diagnose(message: str, warnings: list[str] | None, **fields: Any) -> None:
    log.warning("product.extra_ignored", detail=message, **fields)
    if warnings is not None:
        warnings.append(message)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _attributes_from_extra(
    kind: ProductKind,
    extra: tuple[Any, ...],
    warnings: list[str] | None,
) -> ProductAttributes:
    if kind is ProductKind.PHYSICAL:
        if not extra:
            return PhysicalAttributes()
        if _is_number(extra[0]):
            return PhysicalAttributes(weight=Decimal(str(extra[0])))
        _diagnose(
            "Weight argument for a physical product is not a number; using 0.0.",
            warnings,
            kind=str(kind),
            value=repr(extra[0]),
        )
        return PhysicalAttributes()

    if not extra:
        return DigitalAttributes()
    if isinstance(extra[0], str):
        return DigitalAttributes(download_url=extra[0])
    _diagnose(
        "Download URL argument for a digital product is not text; using an empty URL.",
        warnings,
        kind=str(kind),
        value=repr(extra[0]),
    )
    return DigitalAttributes()


def build_product(name: str, price: Any, attributes: ProductAttributes) -> Product:
    """Construct the product variant matching *attributes*."""
    if isinstance(attributes, PhysicalAttributes):
        return PhysicalProduct(name=name, price=price, weight=attributes.weight)
    return DigitalProduct(name=name, price=price, download_url=attributes.download_url)


def create_product(
    kind: Any,
    name: str,
    price: Any,
    *extra: Any,
    warnings: list[str] | None = None,
) -> Product:
    """Create a product from a kind tag and loosely-typed extra arguments.

    Args:
        kind: ``"physical"`` (alias ``"fisico"``) or ``"digital"``, any case.
        name: Product name.
        price: Positive price; ints, floats, Decimals, and numeric strings.
        extra: ``extra[0]`` is the weight (physical) or download URL
            (digital). Further values are ignored.
        warnings: When given, diagnostics are appended here as well as logged.

    Raises:
        InvalidArgumentError: Unknown kind, or the product itself is invalid.
    """
    resolved = resolve_kind(kind)
    attributes = _attributes_from_extra(resolved, extra, warnings)
    return build_product(name, price, attributes)
