"""Rule: footer names the company."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class FooterCompanyName(Rule):
    """Footer text without the configured ``company_name``."""

    id = "footer-company-name"
    description = "Ensures the footer contains the company name"
    severity = Severity.ERROR
    pack = "content"

    def evaluate(self, context: RuleContext) -> RuleResult:
        company = context.option("company_name")
        if not company:
            return self.passed("No company_name configured, check skipped")

        if context.document.select_one("footer") is None:
            return self.failed("Missing <footer> element")

        footer_text = context.document.text("footer")
        if company.lower() not in footer_text.lower():
            return self.failed(f"Footer does not mention '{company}'")
        return self.passed(f"Footer mentions '{company}'")
