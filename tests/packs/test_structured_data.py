"""Tests for structured data pack rules."""
from __future__ import annotations

import json

import pytest

from pagelint.document import Document
from pagelint.models import RuleContext
from pagelint.packs.structured_data.jsonld_name import JsonLdName
from pagelint.packs.structured_data.jsonld_parseable import JsonLdParseable
from pagelint.packs.structured_data.jsonld_present import JsonLdPresent
from pagelint.packs.structured_data.jsonld_type import JsonLdType


def _ctx(head: str, config: dict | None = None) -> RuleContext:
    html = f"<!DOCTYPE html><html lang='en'><head>{head}</head><body></body></html>"
    return RuleContext(document=Document.from_string(html), config=config or {})


def _jsonld(data) -> str:
    payload = data if isinstance(data, str) else json.dumps(data)
    return f'<script type="application/ld+json">{payload}</script>'


_ORG = {"@context": "https://schema.org", "@type": "Organization", "name": "Acme"}


class TestJsonLdPresent:
    rule = JsonLdPresent()

    def test_allows_jsonld_script(self):
        assert self.rule.evaluate(_ctx(_jsonld(_ORG))).passed is True

    def test_detects_missing_script(self):
        result = self.rule.evaluate(_ctx('<script src="app.js"></script>'))
        assert result.passed is False
        assert "application/ld+json" in result.message


class TestJsonLdParseable:
    rule = JsonLdParseable()

    def test_allows_valid_json(self):
        assert self.rule.evaluate(_ctx(_jsonld(_ORG))).passed is True

    def test_malformed_json_raises(self):
        # The engine converts this into a failed result.
        with pytest.raises(json.JSONDecodeError):
            self.rule.evaluate(_ctx(_jsonld('{"@type": "Organization",}')))

    def test_empty_script_raises(self):
        with pytest.raises(json.JSONDecodeError):
            self.rule.evaluate(_ctx(_jsonld("")))

    def test_missing_script_fails(self):
        assert self.rule.evaluate(_ctx("")).passed is False


class TestJsonLdType:
    rule = JsonLdType()

    def test_allows_organization(self):
        assert self.rule.evaluate(_ctx(_jsonld(_ORG))).passed is True

    def test_detects_other_type(self):
        result = self.rule.evaluate(_ctx(_jsonld({"@type": "WebSite", "name": "Acme"})))
        assert result.passed is False
        assert "Organization" in result.message
        assert result.details == ["WebSite"]

    def test_finds_type_in_graph(self):
        data = {
            "@context": "https://schema.org",
            "@graph": [{"@type": "WebSite"}, {"@type": "Organization", "name": "Acme"}],
        }
        assert self.rule.evaluate(_ctx(_jsonld(data))).passed is True

    def test_finds_type_in_top_level_list(self):
        data = [{"@type": "WebPage"}, {"@type": ["Organization", "Brand"], "name": "Acme"}]
        assert self.rule.evaluate(_ctx(_jsonld(data))).passed is True

    def test_configured_expected_type(self):
        data = {"@type": "LocalBusiness", "name": "Acme"}
        config = {"expected_type": "LocalBusiness"}
        assert self.rule.evaluate(_ctx(_jsonld(data), config)).passed is True

    def test_only_first_block_is_checked(self):
        head = _jsonld({"@type": "WebSite"}) + _jsonld(_ORG)
        assert self.rule.evaluate(_ctx(head)).passed is False


class TestJsonLdName:
    rule = JsonLdName()

    def test_allows_name(self):
        result = self.rule.evaluate(_ctx(_jsonld(_ORG)))
        assert result.passed is True
        assert "Acme" in result.message

    def test_detects_missing_name(self):
        result = self.rule.evaluate(_ctx(_jsonld({"@type": "Organization"})))
        assert result.passed is False
        assert "name" in result.message

    def test_detects_blank_name(self):
        data = {"@type": "Organization", "name": "   "}
        assert self.rule.evaluate(_ctx(_jsonld(data))).passed is False

    def test_detects_wrong_type(self):
        data = {"@type": "WebSite", "name": "Acme"}
        assert self.rule.evaluate(_ctx(_jsonld(data))).passed is False
