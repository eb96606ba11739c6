"""Result type returned by the fallible bootstrap steps."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Outcome:
    """Success with a value, or failure with a reason."""
    ok: bool
    value: Any = None
    reason: str | None = None

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> "Outcome":
        return cls(ok=False, reason=reason)
