"""Rule: footer carries a copyright year."""
from __future__ import annotations

import re

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_DEFAULT_YEAR_PATTERN = r"\b20\d{2}\b"


class FooterCopyrightYear(Rule):
    id = "footer-copyright-year"
    description = "Ensures the footer contains a copyright year"
    severity = Severity.ERROR
    pack = "content"

    def evaluate(self, context: RuleContext) -> RuleResult:
        pattern = re.compile(context.option("year_pattern", _DEFAULT_YEAR_PATTERN))

        if context.document.select_one("footer") is None:
            return self.failed("Missing <footer> element")

        match = pattern.search(context.document.text("footer"))
        if match is None:
            return self.failed("Footer has no copyright year")
        return self.passed(f"Footer copyright year is {match.group(0)}")
