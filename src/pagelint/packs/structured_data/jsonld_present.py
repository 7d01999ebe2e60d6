"""Rule: JSON-LD structured data script exists."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs.structured_data._helpers import JSONLD_SELECTOR


class JsonLdPresent(Rule):
    id = "jsonld-present"
    description = 'Ensures a <script type="application/ld+json"> block exists'
    severity = Severity.ERROR
    pack = "structured-data"

    def evaluate(self, context: RuleContext) -> RuleResult:
        count = context.document.count(JSONLD_SELECTOR)
        if count == 0:
            return self.failed('Missing <script type="application/ld+json"> block')
        return self.passed(f"Found {count} JSON-LD block(s)")
