"""Core models for PageLint."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagelint.document import Document


class Severity(Enum):
    """Rule failure severity levels."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def is_blocking(self) -> bool:
        return self == Severity.ERROR


@dataclass
class RuleResult:
    """Outcome of evaluating a single rule against a document."""
    rule_id: str
    category: str
    severity: Severity
    passed: bool
    message: str
    details: list[str] = field(default_factory=list)

    @property
    def is_blocking(self) -> bool:
        return not self.passed and self.severity.is_blocking

    def to_dict(self) -> dict:
        return {
            "rule_id": self.rule_id,
            "category": self.category,
            "severity": self.severity.value,
            "passed": self.passed,
            "message": self.message,
            "details": list(self.details),
        }


@dataclass
class RuleContext:
    """Context passed to rules during evaluation."""
    document: Document
    config: dict = field(default_factory=dict)

    def option(self, key: str, default=None):
        value = self.config.get(key)
        return default if value is None else value


class Rule(ABC):
    """Base class for all PageLint rules."""
    id: str
    description: str
    severity: Severity
    pack: str

    @property
    def category(self) -> str:
        return self.pack

    @abstractmethod
    def evaluate(self, context: RuleContext) -> RuleResult:
        """Evaluate this rule against the given context."""

    def passed(self, message: str) -> RuleResult:
        return RuleResult(
            rule_id=self.id,
            category=self.category,
            severity=self.severity,
            passed=True,
            message=message,
        )

    def failed(self, message: str, details: list[str] | None = None) -> RuleResult:
        return RuleResult(
            rule_id=self.id,
            category=self.category,
            severity=self.severity,
            passed=False,
            message=message,
            details=list(details or []),
        )
