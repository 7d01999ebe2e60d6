"""Rule: non-empty meta description."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class MetaDescriptionPresent(Rule):
    """Missing or empty <meta name="description">."""

    id = "meta-description-present"
    description = "Ensures the page has a meta description"
    severity = Severity.ERROR
    pack = "seo"

    def evaluate(self, context: RuleContext) -> RuleResult:
        content = context.document.attr('meta[name="description"]', "content")
        if content is None:
            return self.failed("Missing <meta name=\"description\"> element")
        if not content.strip():
            return self.failed("Meta description is empty")
        return self.passed("Meta description is present")
