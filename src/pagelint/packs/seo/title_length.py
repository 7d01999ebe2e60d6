"""Rule: <title> length within search result limits."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_DEFAULT_MIN_LENGTH = 10
_DEFAULT_MAX_LENGTH = 70


class TitleLength(Rule):
    """Titles that look like placeholders or get truncated by search engines.

    Passes when ``min_length < len(title) <= max_length``. The lower bound is
    exclusive: a ten character title is treated as a placeholder.
    """

    id = "title-length"
    description = "Ensures the <title> is longer than 10 and at most 70 characters"
    severity = Severity.ERROR
    pack = "seo"

    def evaluate(self, context: RuleContext) -> RuleResult:
        min_length = context.option("min_length", _DEFAULT_MIN_LENGTH)
        max_length = context.option("max_length", _DEFAULT_MAX_LENGTH)

        if context.document.select_one("title") is None:
            return self.failed("Missing <title> element")

        title = context.document.text("title").strip()
        length = len(title)
        if length <= min_length:
            return self.failed(
                f"<title> has {length} characters, must be more than {min_length}",
                details=[title],
            )
        if length > max_length:
            return self.failed(
                f"<title> has {length} characters, must be at most {max_length}",
                details=[title],
            )
        return self.passed(f"<title> has {length} characters")
