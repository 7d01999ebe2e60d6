"""Rule: twitter:card declared."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class TwitterCard(Rule):
    id = "twitter-card"
    description = "Ensures a twitter:card meta tag is declared"
    severity = Severity.ERROR
    pack = "social"

    def evaluate(self, context: RuleContext) -> RuleResult:
        card = context.document.attr('meta[name="twitter:card"]', "content")
        if card is None:
            return self.failed("Missing <meta name=\"twitter:card\"> element")
        return self.passed(f"twitter:card is '{card}'")
