"""Rule: absolute canonical link."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs._helpers import is_absolute_url


class CanonicalLink(Rule):
    """Missing canonical link or a relative canonical URL."""

    id = "canonical-link"
    description = "Ensures a <link rel=\"canonical\"> with an absolute URL"
    severity = Severity.ERROR
    pack = "seo"

    def evaluate(self, context: RuleContext) -> RuleResult:
        tag = context.document.select_one('link[rel~="canonical"]')
        if tag is None:
            return self.failed("Missing <link rel=\"canonical\"> element")

        href = tag.get("href")
        if not is_absolute_url(href):
            return self.failed("Canonical URL is not absolute", details=[href or ""])
        return self.passed(f"Canonical URL is {href}")
