"""Rule: UTF-8 charset declaration."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class MetaCharset(Rule):
    """Missing or non-UTF-8 <meta charset>."""

    id = "meta-charset"
    description = "Ensures a <meta charset=\"utf-8\"> declaration"
    severity = Severity.ERROR
    pack = "structure"

    def evaluate(self, context: RuleContext) -> RuleResult:
        charset = context.document.attr("meta[charset]", "charset")
        if charset is None:
            return self.failed("Missing <meta charset> element")
        if charset.strip().lower() != "utf-8":
            return self.failed(f"Charset is '{charset}', expected 'utf-8'")
        return self.passed("Charset is utf-8")
