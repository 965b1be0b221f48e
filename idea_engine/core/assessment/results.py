"""Result values returned by workflow actions."""

from dataclasses import dataclass
from typing import Any

from idea_engine.core.errors import AssessmentError


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a reviewer action, suitable for a success/warning/error notification."""

    ok: bool
    message: str
    error: AssessmentError | None = None
    data: Any = None

    @classmethod
    def success(cls, message: str, data: Any = None) -> "ActionResult":
        return cls(ok=True, message=message, data=data)

    @classmethod
    def failure(cls, error: AssessmentError, data: Any = None) -> "ActionResult":
        return cls(ok=False, message=str(error), error=error, data=data)

    @property
    def error_kind(self) -> str | None:
        return type(self.error).__name__ if self.error else None
