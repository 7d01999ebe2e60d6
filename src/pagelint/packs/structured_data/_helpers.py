"""Shared helpers for structured data rules."""
from __future__ import annotations

import json

from pagelint.document import Document

JSONLD_SELECTOR = 'script[type="application/ld+json"]'
DEFAULT_EXPECTED_TYPE = "Organization"


def first_jsonld_block(document: Document) -> str | None:
    """Raw text of the first JSON-LD script, or None if there is none."""
    tag = document.select_one(JSONLD_SELECTOR)
    if tag is None:
        return None
    return tag.string or ""


def load_jsonld(document: Document):
    """Parse the first JSON-LD block. Raises json.JSONDecodeError on bad JSON."""
    raw = first_jsonld_block(document)
    if raw is None:
        return None
    return json.loads(raw)


def _declares_type(node: dict, expected_type: str) -> bool:
    declared = node.get("@type")
    if isinstance(declared, list):
        return expected_type in declared
    return declared == expected_type


def find_entity(data, expected_type: str) -> dict | None:
    """Return the first object of `expected_type` in a JSON-LD payload.

    Handles a single object, a top-level list, and an ``@graph`` container.
    """
    if isinstance(data, list):
        candidates = data
    elif isinstance(data, dict):
        candidates = [data] + list(data.get("@graph", []))
    else:
        return None

    for node in candidates:
        if isinstance(node, dict) and _declares_type(node, expected_type):
            return node
    return None


def declared_types(data) -> list[str]:
    nodes = data if isinstance(data, list) else [data]
    if isinstance(data, dict):
        nodes += list(data.get("@graph", []))

    types: list[str] = []
    for node in nodes:
        if not isinstance(node, dict) or "@type" not in node:
            continue
        declared = node["@type"]
        types.extend(declared if isinstance(declared, list) else [str(declared)])
    return types
