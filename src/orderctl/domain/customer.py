"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from orderctl.domain.errors import InvalidArgumentError


def _require_text(value: Any, message: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(message)


@dataclass(frozen=True)
class Customer:
    """A buyer identified by ``id``.

    Two customers are equal iff their ids match; name and email are
    ignored for equality and hashing.
    """

    id: str
    name: str = field(compare=False)
    email: str = field(compare=False)

    def __post_init__(self) -> None:
        _require_text(self.id, "Customer id must not be empty.")
        _require_text(self.name, "Customer name must not be empty.")
        # Shape check only, not address validation.
        if not isinstance(self.email, str) or "@" not in self.email:
            raise InvalidArgumentError("Customer email is invalid.")

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}
