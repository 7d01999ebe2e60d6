"""Rule: responsive viewport meta tag."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class MetaViewport(Rule):
    """Missing viewport meta or one without width=device-width."""

    id = "meta-viewport"
    description = "Ensures a viewport meta tag with width=device-width"
    severity = Severity.ERROR
    pack = "structure"

    def evaluate(self, context: RuleContext) -> RuleResult:
        viewport = context.document.attr('meta[name="viewport"]', "content")
        if viewport is None:
            return self.failed("Missing <meta name=\"viewport\"> element")
        if "width=device-width" not in viewport:
            return self.failed(f"Viewport '{viewport}' does not contain width=device-width")
        return self.passed("Viewport declares width=device-width")
