"""Rule: key landing page sections exist exactly once."""
from __future__ import annotations

from collections import Counter

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_DEFAULT_SECTIONS = ["products", "warranty", "contact"]


class RequiredSections(Rule):
    """Configured section ids that are missing or duplicated."""

    id = "required-sections"
    description = "Ensures each required section id occurs exactly once"
    severity = Severity.ERROR
    pack = "content"

    def evaluate(self, context: RuleContext) -> RuleResult:
        sections = context.option("sections", _DEFAULT_SECTIONS)
        if not sections:
            return self.passed("No required sections configured")

        id_counts = Counter(tag.get("id") for tag in context.document.select("[id]"))

        problems: list[str] = []
        for section_id in sections:
            count = id_counts[section_id]
            if count != 1:
                problems.append(f"#{section_id} (found {count})")

        if problems:
            return self.failed(
                f"{len(problems)} required section(s) missing or duplicated",
                details=problems,
            )
        return self.passed(f"Sections present: {', '.join('#' + s for s in sections)}")
