"""Rule: JSON-LD block parses as JSON."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs.structured_data._helpers import load_jsonld


class JsonLdParseable(Rule):
    """First JSON-LD block is not valid JSON.

    Parse errors propagate; the engine reports them as a failed result
    carrying the decoder message.
    """

    id = "jsonld-parseable"
    description = "Ensures the JSON-LD block is valid JSON"
    severity = Severity.ERROR
    pack = "structured-data"

    def evaluate(self, context: RuleContext) -> RuleResult:
        data = load_jsonld(context.document)
        if data is None:
            return self.failed("No JSON-LD block to parse")
        return self.passed(f"JSON-LD parsed ({type(data).__name__})")
