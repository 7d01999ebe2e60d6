"""Output formatting for PageLint reports."""
from __future__ import annotations

import json

from pagelint.engine import Report
from pagelint.models import Severity


class Reporter:
    """Formats a Report as text or JSON."""

    def __init__(self, report: Report):
        self.report = report

    def has_blocking_failures(self) -> bool:
        return self.report.is_blocking

    def exit_code(self) -> int:
        """1 when any rule at error severity failed, else 0."""
        return 1 if self.has_blocking_failures() else 0

    def summary(self) -> dict:
        failures = self.report.failures
        return {
            "rules_evaluated": self.report.rules_evaluated,
            "passed": self.report.rules_evaluated - len(failures),
            "failed": len(failures),
            "errors": sum(1 for r in failures if r.severity == Severity.ERROR),
            "warnings": sum(1 for r in failures if r.severity == Severity.WARNING),
        }

    def format_text(self, source: str | None = None) -> str:
        lines = [f"PageLint Report: {source}" if source else "PageLint Report"]

        for category, results in self.report.by_category().items():
            lines.append("")
            lines.append(f"{category}:")
            for r in results:
                status = "PASS" if r.passed else "FAIL"
                suffix = "" if r.passed or r.severity == Severity.ERROR else f" ({r.severity.value})"
                lines.append(f"  {status}  [{r.rule_id}] {r.message}{suffix}")
                if not r.passed:
                    for detail in r.details:
                        lines.append(f"        - {detail}")

        s = self.summary()
        lines.append("")
        lines.append(
            f"Rules evaluated: {s['rules_evaluated']}  |  Passed: {s['passed']}  |  "
            f"Failed: {s['failed']} ({s['errors']} errors, {s['warnings']} warnings)"
        )
        return "\n".join(lines)

    def format_json(self, source: str | None = None) -> str:
        return json.dumps({
            "source": source,
            "passed": self.report.passed,
            "summary": self.summary(),
            "results": [r.to_dict() for r in self.report.results],
        }, indent=2)
