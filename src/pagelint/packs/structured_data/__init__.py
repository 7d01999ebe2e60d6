"""Structured data rule pack: schema.org JSON-LD."""
from pagelint.packs.structured_data.jsonld_present import JsonLdPresent
from pagelint.packs.structured_data.jsonld_parseable import JsonLdParseable
from pagelint.packs.structured_data.jsonld_type import JsonLdType
from pagelint.packs.structured_data.jsonld_name import JsonLdName

RULES = [
    JsonLdPresent(),
    JsonLdParseable(),
    JsonLdType(),
    JsonLdName(),
]
