"""PageLint evaluation engine."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pagelint.config import PageLintConfig
from pagelint.document import Document
from pagelint.models import Rule, RuleContext, RuleResult

logger = logging.getLogger("pagelint")


class RuleEvaluationError(Exception):
    """A rule raised while evaluating a document."""

    def __init__(self, rule_id: str, cause: Exception):
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.rule_id = rule_id
        self.cause = cause


@dataclass
class Report:
    """Ordered results of evaluating every active rule against one document."""
    results: list[RuleResult] = field(default_factory=list)

    @property
    def rules_evaluated(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[RuleResult]:
        return [r for r in self.results if not r.passed]

    @property
    def is_blocking(self) -> bool:
        return any(r.is_blocking for r in self.results)

    def by_category(self) -> dict[str, list[RuleResult]]:
        grouped: dict[str, list[RuleResult]] = {}
        for r in self.results:
            grouped.setdefault(r.category, []).append(r)
        return grouped

    def get(self, rule_id: str) -> RuleResult | None:
        for r in self.results:
            if r.rule_id == rule_id:
                return r
        return None


class Engine:
    """Orchestrates rule evaluation."""

    def __init__(self, config: PageLintConfig, rules: list[Rule]):
        self.config = config
        self.rules = rules

    def active_rules(self) -> list[Rule]:
        return [
            rule for rule in self.rules
            if rule.pack in self.config.packs and self.config.is_rule_enabled(rule.id)
        ]

    def _run_rule(self, rule: Rule, context: RuleContext) -> RuleResult:
        """Run one rule, wrapping anything it raises in RuleEvaluationError."""
        try:
            result = rule.evaluate(context)
            if not isinstance(result, RuleResult):
                raise TypeError(f"evaluate() returned {type(result).__name__}, expected RuleResult")
        except Exception as exc:
            raise RuleEvaluationError(rule.id, exc) from exc
        return result

    def evaluate(self, document: Document) -> Report:
        """Evaluate all active rules against the document, in order."""
        report = Report()

        for rule in self.active_rules():
            context = RuleContext(
                document=document,
                config=self.config.get_rule_config(rule.id),
            )

            try:
                result = self._run_rule(rule, context)
            except RuleEvaluationError as error:
                logger.exception("Rule %s raised an exception", rule.id)
                result = rule.failed(f"Rule raised {error}", details=[str(error.cause)])

            result.severity = self.config.effective_severity(result.severity)
            report.results.append(result)

        return report
