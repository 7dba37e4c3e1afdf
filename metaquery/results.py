"""
Per-entry outcomes of a template run.

The result set is the only contract with renderers: an ordered sequence
of outcomes, one per executed template entry, in template order.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeStatus(Enum):
    """Outcome of one template entry."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class QueryOutcome:
    """Result of running one query definition within a template."""
    service: str
    template: str                 # Query definition name
    status: OutcomeStatus
    data: Any = None              # Extracted payload, None on an extraction miss
    error: Optional[str] = None

    @classmethod
    def ok(cls, service: str, template: str, data: Any) -> "QueryOutcome":
        return cls(service=service, template=template, status=OutcomeStatus.SUCCESS, data=data)

    @classmethod
    def failed(cls, service: str, template: str, error: str) -> "QueryOutcome":
        return cls(service=service, template=template, status=OutcomeStatus.FAILURE, error=error)

    @property
    def success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        """Renderer-facing record."""
        record: dict[str, Any] = {
            "service": self.service,
            "template": self.template,
            "success": self.success,
        }
        if self.success:
            record["data"] = self.data
        else:
            record["error"] = self.error
        return record


class ResultSet(Sequence):
    """Immutable, ordered collection of query outcomes."""

    def __init__(self, outcomes: Optional[Sequence[QueryOutcome]] = None,
                 template_name: Optional[str] = None):
        self._outcomes = tuple(outcomes or ())
        self.template_name = template_name

    def __getitem__(self, index):
        return self._outcomes[index]

    def __len__(self) -> int:
        return len(self._outcomes)

    def __iter__(self) -> Iterator[QueryOutcome]:
        return iter(self._outcomes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResultSet):
            return self._outcomes == other._outcomes
        return NotImplemented

    def __repr__(self) -> str:
        return f"ResultSet(template={self.template_name!r}, outcomes={list(self._outcomes)!r})"

    def successes(self) -> list[QueryOutcome]:
        return [outcome for outcome in self._outcomes if outcome.success]

    def failures(self) -> list[QueryOutcome]:
        return [outcome for outcome in self._outcomes if not outcome.success]

    @property
    def has_failures(self) -> bool:
        return any(not outcome.success for outcome in self._outcomes)

    def to_list(self) -> list[dict[str, Any]]:
        return [outcome.to_dict() for outcome in self._outcomes]
