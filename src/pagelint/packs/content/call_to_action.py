"""Rule: at least one call-to-action element."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_DEFAULT_CTA_SELECTOR = ".btn-main"


class CallToAction(Rule):
    id = "call-to-action"
    description = "Ensures the page has at least one call-to-action button"
    severity = Severity.ERROR
    pack = "content"

    def evaluate(self, context: RuleContext) -> RuleResult:
        selector = context.option("cta_selector", _DEFAULT_CTA_SELECTOR)
        count = context.document.count(selector)
        if count == 0:
            return self.failed(f"No call-to-action element matches '{selector}'")
        return self.passed(f"Found {count} call-to-action element(s)")
