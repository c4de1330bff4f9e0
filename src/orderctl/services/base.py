"""BaseService — common foundation for orderctl services.

Every service receives the :class:`SharedConfiguration` handle at
construction time and hands it to the builders it creates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from orderctl.domain.errors import LimitExceededError, OrderError
from orderctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from orderctl.config.shared import SharedConfiguration

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class OrderService(BaseService):
            def build_order(self, ...) -> ServiceResult:
                try:
                    order = OrderBuilder(self._config)...build()
                except OrderError as exc:
                    return self._failure("build_order", exc)
    """

    def __init__(self, config: SharedConfiguration | None = None) -> None:
        if config is None:
            from orderctl.config.shared import get_shared_configuration

            config = get_shared_configuration()
        self._config = config

    @staticmethod
    def _failure(
        op: str,
        exc: OrderError,
        *,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Convert a domain exception into a failed ServiceResult."""
        if isinstance(exc, LimitExceededError):
            detail.setdefault("limit", exc.limit)
        logger.debug("%s failed: %s (%s)", op, exc.message, exc.code)
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=exc.code, message=exc.message, detail=detail),
        )
