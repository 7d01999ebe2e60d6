"""Rule: robots meta allows indexing."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_INDEX_DIRECTIVES = {"index", "all"}
_NOINDEX_DIRECTIVES = {"noindex", "none"}


class RobotsIndex(Rule):
    """Missing robots meta or one that blocks indexing."""

    id = "robots-index"
    description = "Ensures the robots meta tag allows indexing"
    severity = Severity.ERROR
    pack = "seo"

    def evaluate(self, context: RuleContext) -> RuleResult:
        content = context.document.attr('meta[name="robots"]', "content")
        if content is None:
            return self.failed("Missing <meta name=\"robots\"> element")

        directives = {d.strip().lower() for d in content.split(",") if d.strip()}
        blocking = sorted(directives & _NOINDEX_DIRECTIVES)
        if blocking:
            return self.failed("Robots meta blocks indexing", details=blocking)
        if not directives & _INDEX_DIRECTIVES:
            return self.failed(f"Robots meta '{content}' has no index directive")
        return self.passed(f"Robots meta allows indexing ({content})")
