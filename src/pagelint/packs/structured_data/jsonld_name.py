"""Rule: JSON-LD entity has a name."""
from __future__ import annotations

from pagelint.models import Rule, RuleContext, RuleResult, Severity
from pagelint.packs.structured_data._helpers import DEFAULT_EXPECTED_TYPE, find_entity, load_jsonld


class JsonLdName(Rule):
    """JSON-LD entity of the expected type without a non-empty name."""

    id = "jsonld-name"
    description = "Ensures the JSON-LD entity has a non-empty name"
    severity = Severity.ERROR
    pack = "structured-data"

    def evaluate(self, context: RuleContext) -> RuleResult:
        expected_type = context.option("expected_type", DEFAULT_EXPECTED_TYPE)

        data = load_jsonld(context.document)
        if data is None:
            return self.failed("No JSON-LD block found")

        entity = find_entity(data, expected_type)
        if entity is None:
            return self.failed(f"No JSON-LD entity of @type '{expected_type}'")

        name = entity.get("name")
        if not isinstance(name, str) or not name.strip():
            return self.failed(f"JSON-LD {expected_type} has no name")
        return self.passed(f"JSON-LD {expected_type} name is '{name.strip()}'")
