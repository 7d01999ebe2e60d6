"""Rule: target=_blank links without noopener/noreferrer."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs._helpers import attr_tokens, describe

_REQUIRED_REL = ("noopener", "noreferrer")


class SafeExternalLinks(Rule):
    """Links opening a new tab that leak window.opener or the referrer."""

    id = "safe-external-links"
    description = 'Ensures target="_blank" links have rel="noopener noreferrer"'
    severity = Severity.ERROR
    pack = "security"

    def evaluate(self, context: RuleContext) -> RuleResult:
        links = context.document.select('a[target="_blank"]')
        unsafe = [
            describe(link, "href", "link", i)
            for i, link in enumerate(links, start=1)
            if not all(token in attr_tokens(link, "rel") for token in _REQUIRED_REL)
        ]

        if unsafe:
            return self.failed(
                f'{len(unsafe)} target="_blank" link(s) missing rel="noopener noreferrer"',
                details=unsafe,
            )
        return self.passed(f'All {len(links)} target="_blank" link(s) are safe')
