"""Tests for security pack rules."""
from __future__ import annotations

from pagelint.document import Document
from pagelint.models import RuleContext
from pagelint.packs.security.favicon import Favicon
from pagelint.packs.security.safe_external_links import SafeExternalLinks


def _ctx(head: str = "", body: str = "") -> RuleContext:
    html = f"<!DOCTYPE html><html lang='en'><head>{head}</head><body>{body}</body></html>"
    return RuleContext(document=Document.from_string(html))


class TestSafeExternalLinks:
    rule = SafeExternalLinks()

    def test_allows_noopener_noreferrer(self):
        body = '<a href="https://x.com" target="_blank" rel="noopener noreferrer">x</a>'
        assert self.rule.evaluate(_ctx(body=body)).passed is True

    def test_token_order_and_extra_tokens_do_not_matter(self):
        body = '<a href="https://x.com" target="_blank" rel="external NoReferrer noopener">x</a>'
        assert self.rule.evaluate(_ctx(body=body)).passed is True

    def test_detects_noopener_only(self):
        body = '<a href="https://x.com" target="_blank" rel="noopener">x</a>'
        result = self.rule.evaluate(_ctx(body=body))
        assert result.passed is False
        assert result.details == ["https://x.com"]

    def test_detects_missing_rel(self):
        body = '<a href="https://x.com" target="_blank">x</a>'
        assert self.rule.evaluate(_ctx(body=body)).passed is False

    def test_identifies_link_without_href_by_position(self):
        body = (
            '<a href="https://ok.com" target="_blank" rel="noopener noreferrer">ok</a>'
            '<a target="_blank">bad</a>'
        )
        result = self.rule.evaluate(_ctx(body=body))
        assert result.details == ["link #2"]

    def test_ignores_links_without_target_blank(self):
        body = '<a href="https://x.com">x</a><a href="/y" target="_self">y</a>'
        assert self.rule.evaluate(_ctx(body=body)).passed is True


class TestFavicon:
    rule = Favicon()

    def test_allows_icon(self):
        assert self.rule.evaluate(_ctx(head='<link rel="icon" href="/favicon.ico">')).passed is True

    def test_allows_shortcut_icon(self):
        head = '<link rel="shortcut icon" href="/favicon.ico">'
        assert self.rule.evaluate(_ctx(head=head)).passed is True

    def test_detects_missing_icon(self):
        result = self.rule.evaluate(_ctx())
        assert result.passed is False
        assert "icon" in result.message

    def test_detects_empty_href(self):
        assert self.rule.evaluate(_ctx(head='<link rel="icon" href="">')).passed is False
