from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Error:
    code: str
    message: str
    path: str

    def __str__(self) -> str:
        return f"{self.code}:{self.path}:{self.message}"


class UnwrapError(ValueError):
    """Raised when unwrapping the variant an outcome does not hold."""
