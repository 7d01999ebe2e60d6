"""Rule: complete Open Graph metadata."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs._helpers import is_absolute_url

_DEFAULT_REQUIRED = ["og:title", "og:description", "og:image", "og:url"]
_URL_PROPERTIES = {"og:image", "og:url"}


class OpenGraph(Rule):
    """Missing, empty, or relative Open Graph properties."""

    id = "open-graph"
    description = "Ensures og:title, og:description, og:image and og:url are set"
    severity = Severity.ERROR
    pack = "social"

    def evaluate(self, context: RuleContext) -> RuleResult:
        required = context.option("required_properties", _DEFAULT_REQUIRED)

        problems: list[str] = []
        for prop in required:
            content = context.document.attr(f'meta[property="{prop}"]', "content")
            if content is None:
                problems.append(f"{prop}: missing")
            elif not content.strip():
                problems.append(f"{prop}: empty")
            elif prop in _URL_PROPERTIES and not is_absolute_url(content):
                problems.append(f"{prop}: not an absolute URL ({content})")

        if problems:
            return self.failed(
                f"{len(problems)} Open Graph propert{'y' if len(problems) == 1 else 'ies'} invalid",
                details=problems,
            )
        return self.passed(f"Open Graph properties set: {', '.join(required)}")
