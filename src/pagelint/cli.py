"""PageLint CLI entry point."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from pagelint.config import ConfigError, load_config
from pagelint.document import ParseError, load_document
from pagelint.engine import Engine
from pagelint.packs import PACK_MODULES, load_custom_rules, load_rules
from pagelint.reporter import Reporter

logger = logging.getLogger("pagelint")

# Exit code for failures to load config or document, distinct from rule failures.
EXIT_FATAL = 2


def _configure_logging() -> None:
    level = os.environ.get("PAGELINT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
def main():
    """PageLint - SEO, accessibility and structure checks for static HTML pages."""
    _configure_logging()


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--project-dir", default=None, help="Directory to search for pagelint.yml")
@click.option("--config", "config_path", default=None, help="Explicit config file")
@click.option("--pack", "packs", multiple=True, help="Only run these packs (repeatable)")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]), default="text", show_default=True,
    help="Report format",
)
def check(path: str, project_dir: str | None, config_path: str | None, packs: tuple[str, ...], output_format: str):
    """Evaluate rules against the HTML file at PATH."""
    project_dir = project_dir or os.getcwd()

    try:
        config = load_config(project_dir, config_path)
    except ConfigError as exc:
        click.echo(f"pagelint: {exc}", err=True)
        sys.exit(EXIT_FATAL)

    if packs:
        config.packs = list(packs)

    rules = load_rules(config.packs)
    if config.custom_rules_dir:
        custom = load_custom_rules(config.custom_rules_dir, project_dir)
        # Custom rules always run under their own pack
        for rule in custom:
            if rule.pack not in config.packs:
                config.packs.append(rule.pack)
        rules.extend(custom)

    try:
        document = load_document(Path(path), parser=config.parser)
    except ParseError as exc:
        click.echo(f"pagelint: {exc}", err=True)
        sys.exit(EXIT_FATAL)

    engine = Engine(config=config, rules=rules)
    report = engine.evaluate(document)
    logger.info("Evaluated %d rules against %s", report.rules_evaluated, path)

    reporter = Reporter(report)
    if output_format == "json":
        click.echo(reporter.format_json(source=path))
    else:
        click.echo(reporter.format_text(source=path))

    sys.exit(reporter.exit_code())


@main.command("list-rules")
@click.option("--pack", default=None, help="Filter rules by pack name")
def list_rules(pack: str | None):
    """List all available rules."""
    all_packs = list(PACK_MODULES) if pack is None else [pack]
    rules = load_rules(all_packs)

    if not rules:
        if pack:
            click.echo(f"No rules found for pack '{pack}'.")
        else:
            click.echo("No rules found.")
        return

    # Table header.
    click.echo(f"{'Rule ID':<28} {'Pack':<16} {'Severity':<10} Description")
    click.echo("-" * 100)

    for rule in rules:
        click.echo(
            f"{rule.id:<28} {rule.pack:<16} {rule.severity.value:<10} {rule.description}"
        )

    click.echo(f"\n{len(rules)} rules total.")
