"""Resource instance state and diagnostics exchanged with the host runtime."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class DiagnosticSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Diagnostic(BaseModel):
    """A non-exceptional message returned from a lifecycle operation."""

    severity: DiagnosticSeverity
    summary: str
    detail: str = ""


class ResourceData(BaseModel):
    """One resource instance as seen by the host runtime.

    An empty ``id`` means the instance does not exist (yet, or any more) and
    the host should schedule its creation.
    """

    id: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    state: dict[str, Any] = Field(default_factory=dict)

    @property
    def exists(self) -> bool:
        return self.id != ""

    def clear(self) -> None:
        """Drop the instance from local state."""
        self.id = ""
        self.state = {}
