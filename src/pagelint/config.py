"""Configuration loading and parsing for PageLint."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from pagelint.document import DEFAULT_PARSER
from pagelint.models import Severity
from pagelint.packs import PACK_MODULES

logger = logging.getLogger("pagelint")

CONFIG_FILENAMES = ["pagelint.yml", "pagelint.yaml", ".pagelint.yml"]

VALID_SEVERITY_MODES = {"strict", "standard", "relaxed"}


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


@dataclass
class PageLintConfig:
    """Parsed PageLint configuration."""
    severity: str = "standard"
    packs: list[str] = field(default_factory=lambda: list(PACK_MODULES))
    rules: dict[str, dict] = field(default_factory=dict)
    parser: str = DEFAULT_PARSER
    custom_rules_dir: str | None = None

    def is_rule_enabled(self, rule_id: str) -> bool:
        rule_cfg = self.rules.get(rule_id, {})
        return rule_cfg.get("enabled", True)

    def get_rule_config(self, rule_id: str) -> dict:
        return self.rules.get(rule_id, {})

    def effective_severity(self, base: Severity) -> Severity:
        if self.severity == "strict":
            if base == Severity.WARNING:
                return Severity.ERROR
            if base == Severity.INFO:
                return Severity.WARNING
        elif self.severity == "relaxed":
            if base == Severity.WARNING:
                return Severity.INFO
        return base


def _read_yaml(config_path: Path) -> dict:
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {config_path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(raw).__name__}")
    return raw


def load_config(project_dir: str, config_path: str | None = None) -> PageLintConfig:
    """Load config from pagelint.yml (or an explicit file), else defaults."""
    raw = {}
    if config_path:
        raw = _read_yaml(Path(config_path))
    else:
        root = Path(project_dir)
        for filename in CONFIG_FILENAMES:
            candidate = root / filename
            if candidate.exists():
                raw = _read_yaml(candidate)
                break

    # Validate severity
    severity = raw.get("severity", "standard")
    if severity not in VALID_SEVERITY_MODES:
        logger.warning("Invalid severity '%s', falling back to 'standard'", severity)
        severity = "standard"

    packs = raw.get("packs") or list(PACK_MODULES)
    if not isinstance(packs, list):
        raise ConfigError(f"'packs' must be a list of pack names, got {type(packs).__name__}")
    for p in packs:
        if p not in PACK_MODULES:
            logger.warning("Unknown pack '%s' in config (not registered)", p)

    rules = raw.get("rules") or {}
    if not isinstance(rules, dict):
        raise ConfigError("'rules' must be a mapping of rule id to options")

    # A bare "rule-id:" key loads as None
    rules = {rule_id: {} if options is None else options for rule_id, options in rules.items()}
    for rule_id, options in rules.items():
        if not isinstance(options, dict):
            raise ConfigError(f"Options for rule '{rule_id}' must be a mapping, got {type(options).__name__}")

    return PageLintConfig(
        severity=severity,
        packs=packs,
        rules=rules,
        parser=raw.get("parser", DEFAULT_PARSER),
        custom_rules_dir=raw.get("custom_rules_dir"),
    )
