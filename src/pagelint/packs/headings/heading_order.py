"""Rule: heading levels are not skipped."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"


class HeadingOrder(Rule):
    """Headings that skip a level, e.g. <h2> followed by <h4>."""

    id = "heading-order"
    description = "Ensures heading levels are not skipped"
    severity = Severity.WARNING
    pack = "headings"

    def evaluate(self, context: RuleContext) -> RuleResult:
        # select() returns matches in document order
        levels = [int(tag.name[1]) for tag in context.document.select(_HEADING_SELECTOR)]

        skips: list[str] = []
        for prev_level, curr_level in zip(levels, levels[1:]):
            if curr_level > prev_level + 1:
                skips.append(f"h{prev_level} -> h{curr_level}")

        if skips:
            return self.failed(f"{len(skips)} skipped heading level(s)", details=skips)
        return self.passed(f"{len(levels)} heading(s) in order")
