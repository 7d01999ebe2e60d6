"""Rule: logo declares width and height."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_DEFAULT_LOGO_SELECTOR = "nav img"


class LogoDimensions(Rule):
    """Logo image without explicit dimensions, which causes layout shift."""

    id = "logo-dimensions"
    description = "Ensures the logo image declares width and height"
    severity = Severity.ERROR
    pack = "images"

    def evaluate(self, context: RuleContext) -> RuleResult:
        selector = context.option("logo_selector", _DEFAULT_LOGO_SELECTOR)
        logo = context.document.select_one(selector)
        if logo is None:
            return self.failed(f"No logo image found for selector '{selector}'")

        missing = [attr for attr in ("width", "height") if logo.get(attr) is None]
        if missing:
            return self.failed(
                f"Logo image missing {' and '.join(missing)}",
                details=[logo.get("src") or selector],
            )
        return self.passed(f"Logo is {logo['width']}x{logo['height']}")
