"""Rule: non-empty <title>."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class TitlePresent(Rule):
    """Missing or empty <title>."""

    id = "title-present"
    description = "Ensures the page has a non-empty <title>"
    severity = Severity.ERROR
    pack = "seo"

    def evaluate(self, context: RuleContext) -> RuleResult:
        document = context.document
        if document.select_one("title") is None:
            return self.failed("Missing <title> element")
        if not document.text("title").strip():
            return self.failed("<title> element is empty")
        return self.passed("<title> is present")
