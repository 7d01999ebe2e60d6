"""Rule: JSON-LD declares the expected @type."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs.structured_data._helpers import (
    DEFAULT_EXPECTED_TYPE,
    declared_types,
    find_entity,
    load_jsonld,
)


class JsonLdType(Rule):
    id = "jsonld-type"
    description = "Ensures the JSON-LD declares the expected @type (Organization)"
    severity = Severity.ERROR
    pack = "structured-data"

    def evaluate(self, context: RuleContext) -> RuleResult:
        expected_type = context.option("expected_type", DEFAULT_EXPECTED_TYPE)

        data = load_jsonld(context.document)
        if data is None:
            return self.failed("No JSON-LD block found")

        if find_entity(data, expected_type) is None:
            return self.failed(
                f"JSON-LD does not declare @type '{expected_type}'",
                details=declared_types(data),
            )
        return self.passed(f"JSON-LD declares @type '{expected_type}'")
