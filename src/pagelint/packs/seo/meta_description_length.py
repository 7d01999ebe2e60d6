"""Rule: meta description length."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_DEFAULT_MIN_LENGTH = 50
_DEFAULT_MAX_LENGTH = 160


class MetaDescriptionLength(Rule):
    """Meta descriptions outside [min_length, max_length]."""

    id = "meta-description-length"
    description = "Ensures the meta description has between 50 and 160 characters"
    severity = Severity.ERROR
    pack = "seo"

    def evaluate(self, context: RuleContext) -> RuleResult:
        min_length = context.option("min_length", _DEFAULT_MIN_LENGTH)
        max_length = context.option("max_length", _DEFAULT_MAX_LENGTH)

        content = context.document.attr('meta[name="description"]', "content")
        if content is None:
            return self.failed("Missing <meta name=\"description\"> element")

        length = len(content)
        if not min_length <= length <= max_length:
            return self.failed(
                f"Meta description has {length} characters, "
                f"expected between {min_length} and {max_length}",
            )
        return self.passed(f"Meta description has {length} characters")
