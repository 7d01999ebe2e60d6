"""Rule: favicon declared."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class Favicon(Rule):
    id = "favicon"
    description = "Ensures a favicon <link rel=\"icon\"> is declared"
    severity = Severity.ERROR
    pack = "security"

    def evaluate(self, context: RuleContext) -> RuleResult:
        tag = context.document.select_one('link[rel~="icon"]')
        if tag is None:
            return self.failed("Missing <link rel=\"icon\"> element")

        href = (tag.get("href") or "").strip()
        if not href:
            return self.failed("Favicon link has an empty href")
        return self.passed(f"Favicon is {href}")
