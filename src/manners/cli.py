"""Root CLI group for manners with global flags and the check command."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from manners import __version__
from manners.config.settings import MannersSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Configures logging once and owns the coach cache for the invocation.
    """

    def __init__(self, settings: MannersSettings) -> None:
        self.settings = settings

        from manners.cache import CoachCache
        from manners.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        self.cache = CoachCache.from_settings(settings)


def _parse_value(raw: str, *, as_string: bool) -> object:
    if as_string:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Not valid JSON: {raw!r} ({exc.msg}). Use --raw for plain strings."
        raise click.BadParameter(msg, param_hint="VALUES") from exc


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="manners")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """manners — compose predicates into validators and run them."""
    from manners.errors import ConfigError

    try:
        settings = MannersSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("rule_set")
@click.argument("values", nargs=-1, required=True)
@click.option("--raw", is_flag=True, help="Treat each value as a plain string, not JSON.")
@click.option(
    "--app-dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory prepended to sys.path before importing RULE_SET.",
)
@click.pass_obj
def check(
    app: AppContext,
    rule_set: str,
    values: tuple[str, ...],
    raw: bool,
    app_dir: Path,
) -> None:
    """Validate VALUES against the rule set at RULE_SET (module:attribute).

    Exits with status 1 when any value produces a message.
    """
    from manners.errors import RuleSetImportError
    from manners.loader import load_rule_set
    from manners.output.formatters import format_reports
    from manners.result import ValidationReport

    search_path = str(app_dir.resolve())
    inserted = search_path not in sys.path
    if inserted:
        sys.path.insert(0, search_path)
    try:
        loaded = load_rule_set(rule_set)
    except RuleSetImportError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        if inserted:
            sys.path.remove(search_path)

    coach = app.cache.get_or_compile(loaded)
    reports = []
    for raw_value in values:
        value = _parse_value(raw_value, as_string=raw)
        reports.append(ValidationReport.from_messages(value, coach(value)))

    click.echo(format_reports(reports, json_output=app.settings.json_output))
    if not all(r.ok for r in reports):
        raise SystemExit(1)
