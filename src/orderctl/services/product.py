"""ProductService — product creation through the factory."""

from __future__ import annotations

from typing import Any

from orderctl.domain.errors import OrderError
from orderctl.domain.factory import create_product
from orderctl.services.base import BaseService
from orderctl.services.result import ServiceResult


class ProductService(BaseService):
    """Creates products and reports factory diagnostics as warnings."""

    def create_product(self, kind: Any, name: str, price: Any, *extra: Any) -> ServiceResult:
        warnings: list[str] = []
        try:
            product = create_product(kind, name, price, *extra, warnings=warnings)
        except OrderError as exc:
            return self._failure("create_product", exc, warnings=warnings, kind=str(kind))
        return ServiceResult(
            ok=True,
            op="create_product",
            data={**product.to_dict(), "description": product.describe()},
            warnings=warnings,
        )
