"""Rule: sections use <h2> headings."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class H2Present(Rule):
    id = "h2-present"
    description = "Ensures the page has at least one <h2>"
    severity = Severity.ERROR
    pack = "headings"

    def evaluate(self, context: RuleContext) -> RuleResult:
        count = context.document.count("h2")
        if count == 0:
            return self.failed("No <h2> elements found")
        return self.passed(f"Found {count} <h2> element(s)")
