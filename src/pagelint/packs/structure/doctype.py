"""Rule: HTML5 doctype declaration."""
from __future__ import annotations

import re

from pagelint.models import Rule, RuleContext, RuleResult, Severity

_DOCTYPE_RE = re.compile(r"^<!doctype html>")


class Doctype(Rule):
    """Documents that do not open with <!DOCTYPE html>."""

    id = "doctype"
    description = "Ensures the document starts with an HTML5 doctype declaration"
    severity = Severity.ERROR
    pack = "structure"

    def evaluate(self, context: RuleContext) -> RuleResult:
        source = context.document.source.strip().lower()
        if _DOCTYPE_RE.match(source):
            return self.passed("Document starts with <!DOCTYPE html>")
        return self.failed("Missing <!DOCTYPE html> declaration at the start of the document")
