"""Rule: the document has content."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity


class DocumentNotEmpty(Rule):
    """Empty or whitespace-only documents."""

    id = "document-not-empty"
    description = "Ensures the HTML document is not empty"
    severity = Severity.ERROR
    pack = "structure"

    def evaluate(self, context: RuleContext) -> RuleResult:
        size = len(context.document.source.strip())
        if size == 0:
            return self.failed("Document is empty")
        return self.passed(f"Document has {size} characters")
