"""End-to-end integration tests for PageLint."""
from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

from pagelint.config import PageLintConfig
from pagelint.document import Document, load_document
from pagelint.engine import Engine
from pagelint.packs import PACK_MODULES, load_rules

FIXTURE = Path(__file__).parent / "fixtures" / "landing.html"

_COMPANY_CONFIG = {"footer-company-name": {"company_name": "Conecta Horizontal"}}


def _evaluate(html: str):
    config = PageLintConfig(rules=_COMPANY_CONFIG)
    engine = Engine(config=config, rules=load_rules(config.packs))
    return engine.evaluate(Document.from_string(html))


@pytest.fixture(scope="module")
def landing_html() -> str:
    return FIXTURE.read_text(encoding="utf-8")


class TestLandingPage:
    def test_every_rule_passes(self):
        config = PageLintConfig(rules=_COMPANY_CONFIG)
        engine = Engine(config=config, rules=load_rules(list(PACK_MODULES)))
        report = engine.evaluate(load_document(FIXTURE))

        assert report.rules_evaluated == 28
        assert [r.rule_id for r in report.failures] == []

    def test_report_follows_pack_order(self):
        report = _evaluate(FIXTURE.read_text(encoding="utf-8"))
        categories = list(report.by_category())
        assert categories == list(PACK_MODULES)

    def test_removing_title_fails_title_rules(self, landing_html):
        html = landing_html.replace(
            "<title>Conecta Horizontal | Ascensores y plataformas</title>", ""
        )
        report = _evaluate(html)

        assert [r.rule_id for r in report.failures] == ["title-present", "title-length"]
        assert "<title>" in report.get("title-present").message

    def test_image_without_alt_is_reported(self, landing_html):
        html = landing_html.replace('<img src="/divider.svg" alt="">', '<img src="/divider.svg">')
        report = _evaluate(html)

        assert [r.rule_id for r in report.failures] == ["image-alt"]
        assert report.get("image-alt").details == ["/divider.svg"]

    def test_unsafe_link_is_reported(self, landing_html):
        html = landing_html.replace('rel="noopener noreferrer"', 'rel="noopener"')
        report = _evaluate(html)

        assert [r.rule_id for r in report.failures] == ["safe-external-links"]
        assert report.get("safe-external-links").details == ["https://wa.me/34600000000"]

    def test_broken_jsonld_keeps_evaluating(self, landing_html):
        html = landing_html.replace('"name": "Conecta Horizontal",', '"name": "Conecta Horizontal",,')
        report = _evaluate(html)

        assert report.rules_evaluated == 28
        assert [r.rule_id for r in report.failures] == ["jsonld-parseable", "jsonld-type", "jsonld-name"]


class TestEndToEnd:
    def _run_pagelint(self, args: list[str]):
        cmd = [sys.executable, "-m", "pagelint"] + args
        return subprocess.run(cmd, capture_output=True, text=True, timeout=10)

    def test_json_report_end_to_end(self, tmp_path):
        (tmp_path / "pagelint.yml").write_text(
            "rules:\n  footer-company-name:\n    company_name: Conecta Horizontal\n"
        )
        result = self._run_pagelint(
            ["check", str(FIXTURE), "--project-dir", str(tmp_path), "--format", "json"]
        )

        assert result.returncode == 0, result.stderr
        output = json.loads(result.stdout)
        assert output["passed"] is True
        assert output["summary"]["rules_evaluated"] == 28

    def test_failing_page_end_to_end(self, tmp_path):
        page = tmp_path / "index.html"
        page.write_text("<html><title>Hi</title></html>", encoding="utf-8")
        result = self._run_pagelint(["check", str(page), "--project-dir", str(tmp_path)])

        assert result.returncode == 1
        assert "FAIL  [title-length]" in result.stdout
