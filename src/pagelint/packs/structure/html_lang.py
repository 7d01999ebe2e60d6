"""Rule: <html> declares a language."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class HtmlLang(Rule):
    """Root element without a lang attribute (WCAG 3.1.1)."""

    id = "html-lang"
    description = "Ensures the <html> element declares a lang attribute"
    severity = Severity.ERROR
    pack = "structure"

    def evaluate(self, context: RuleContext) -> RuleResult:
        lang = context.document.attr("html", "lang")
        if lang is None:
            return self.failed("<html> element has no lang attribute")
        if not lang.strip():
            return self.failed("<html> lang attribute is empty")
        return self.passed(f"<html lang=\"{lang}\">")
