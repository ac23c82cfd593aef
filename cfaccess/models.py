"""Access rule value types."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import UnsupportedScopeError


class Scope(enum.Enum):
    ZONE = "zone"
    ACCOUNT = "account"


@dataclass(frozen=True)
class AccessRule:
    """
    One IP Access rule as returned by Cloudflare.

    target is kept exactly as the API returns it (IP, CIDR or ASN).
    """

    id: str
    target: str
    mode: str
    notes: str = ""
    scope: Scope = Scope.ZONE

    def __post_init__(self):
        if not isinstance(self.scope, Scope):
            try:
                scope = Scope(self.scope)
            except ValueError:
                raise UnsupportedScopeError(self.scope) from None
            # frozen dataclass
            object.__setattr__(self, "scope", scope)

    @classmethod
    def from_api(cls, payload: dict) -> "AccessRule":
        """Build a zone rule from one item of the access_rules/rules result."""
        configuration = payload.get("configuration") or {}
        return cls(
            id=payload["id"],
            target=configuration.get("value", ""),
            mode=payload.get("mode", ""),
            notes=payload.get("notes") or "",
            scope=Scope.ZONE,
        )

    def describe(self) -> str:
        return f"{self.target} ({self.mode}) - {self.notes}"
