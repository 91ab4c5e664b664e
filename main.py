#!/usr/bin/env python3
"""iorules - CLI entry point for evaluating diagnostic rules over recorded events."""
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from __version__ import __version__

console = Console()

SEVERITY_COLORS = {"WARNING": "red", "INFO": "yellow", "OK": "green", "NA": "dim"}


def _init_components(config_path=None, verbose=False):
    """Lazy initialization of all components."""
    from utils.logger import setup_logging
    from config import load_config
    from models.preferences import PreferenceProvider
    from rules.registry import RulesManager
    from rules.runner import RuleRunner

    config = load_config(config_path)
    setup_logging("DEBUG" if verbose else config["logging"]["level"], config["logging"].get("file"))

    rules = RulesManager.from_config(config)
    runner = RuleRunner(rules.get_enabled_rules(), max_workers=config["runner"]["max_workers"])

    return {
        "config": config,
        "rules": rules,
        "runner": runner,
        "preferences": PreferenceProvider.from_config(config),
    }


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config YAML")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="iorules")
@click.pass_context
def cli(ctx, config_path, verbose):
    """iorules - Diagnostic rules for recorded file I/O events."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


def _get_components(ctx):
    if "_components" not in ctx.obj:
        try:
            ctx.obj["_components"] = _init_components(ctx.obj.get("config_path"), ctx.obj.get("verbose"))
        except ValueError as e:
            raise click.ClickException(str(e))
    return ctx.obj["_components"]


# ──────────────────────────────────────────────────────
# RULES
# ──────────────────────────────────────────────────────
@cli.command("rules")
@click.pass_context
def list_rules(ctx):
    """List known rules and their configuration options."""
    c = _get_components(ctx)
    enabled = {r.rule_id for r in c["rules"].get_enabled_rules()}

    table = Table(title="Rules", show_header=True)
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Topic", style="dim")
    table.add_column("Enabled")
    table.add_column("Options")
    for rule in c["rules"].get_all_rules():
        options = []
        for pref in rule.configuration_attributes:
            value = c["preferences"].get_preference_value(pref)
            options.append(f"{pref.identifier} = {pref.display(value)}")
        table.add_row(
            rule.rule_id, rule.name, rule.topic,
            "yes" if rule.rule_id in enabled else "no",
            "\n".join(options),
        )
    console.print(table)


# ──────────────────────────────────────────────────────
# EVALUATE
# ──────────────────────────────────────────────────────
@cli.command()
@click.argument("events_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--warning-limit", default=None, help="Override the file write warning limit (e.g. '2 s')")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def evaluate(ctx, events_file, warning_limit, as_json):
    """Evaluate enabled rules against an event dump (JSON or YAML)."""
    c = _get_components(ctx)
    from models.loader import load_events
    from rules.file_write import WRITE_WARNING_LIMIT

    try:
        items = load_events(events_file)
    except (ValueError, TypeError) as e:
        raise click.ClickException(f"Could not load events from {events_file}: {e}")

    preferences = c["preferences"]
    if warning_limit is not None:
        preferences = preferences.with_values({WRITE_WARNING_LIMIT.identifier: warning_limit})

    results, failures = c["runner"].run(items, preferences)
    results.sort(key=lambda r: r.score, reverse=True)

    if as_json:
        click.echo(json.dumps({
            "results": [r.to_dict() for r in results],
            "failures": [{"rule_id": rule_id, "error": str(e)} for rule_id, e in failures],
        }, indent=2))
    else:
        _print_results(results, failures)

    if failures:
        ctx.exit(1)


def _print_results(results, failures):
    from utils.formatters import format_score

    table = Table(title="Rule Results", show_header=True)
    table.add_column("Rule")
    table.add_column("Severity")
    table.add_column("Score", justify="right")
    table.add_column("Summary")
    for r in results:
        color = SEVERITY_COLORS.get(r.severity.value, "white")
        table.add_row(r.rule_name, f"[{color}]{r.severity.value}[/{color}]", format_score(r.score), escape(r.short_message))
    console.print(table)

    for r in results:
        if r.long_message:
            console.print(f"\n[bold]{r.rule_name}[/bold]")
            console.print(r.long_message, markup=False)

    for rule_id, e in failures:
        console.print(f"[red]✗[/red] {escape(rule_id)}: {escape(str(e))}")


if __name__ == "__main__":
    cli()
