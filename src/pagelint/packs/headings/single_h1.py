"""Rule: exactly one non-empty <h1>."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class SingleH1(Rule):
    """Zero, several, or empty level-1 headings."""

    id = "single-h1"
    description = "Ensures the page has exactly one non-empty <h1>"
    severity = Severity.ERROR
    pack = "headings"

    def evaluate(self, context: RuleContext) -> RuleResult:
        headings = context.document.select("h1")
        if not headings:
            return self.failed("Missing <h1> element")
        if len(headings) > 1:
            return self.failed(
                f"Found {len(headings)} <h1> elements, expected exactly one",
                details=[h.get_text(" ", strip=True) for h in headings],
            )

        text = headings[0].get_text(" ", strip=True)
        if not text:
            return self.failed("<h1> element is empty")
        return self.passed(f"<h1> is '{text}'")
