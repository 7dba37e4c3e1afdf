"""Command line entry point for the query template runner."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Optional

import click

from .config.environment import EnvironmentProvider
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .engine import QueryTemplateRunner
from .errors import ConfigurationError
from .logging.config import configure_logging
from .output.formatters import FORMATS, format_results

EPILOG = """\b
Environment Variables:
  LINEAR_API_KEY        Linear API key
  GITHUB_TOKEN          GitHub personal access token
  MAESTROVERSE_API_KEY  Maestroverse API key
  WORKSPACE_ID          Maestroverse workspace
  DEFAULT_OWNER         Default GitHub owner
  DEFAULT_REPO          Default GitHub repository

\b
Examples:
  metaquery all_open_items
  metaquery my_assignments --format markdown
  metaquery search --query "authentication bug"
  metaquery recent_activity --days 14
"""


def param_key(name: str) -> str:
    """Normalize an option name into a placeholder name (``foo-bar`` -> ``FOO_BAR``)."""
    return name.strip().upper().replace("-", "_")


def build_params(
    search_query: Optional[str] = None,
    days: Optional[int] = None,
    owner: Optional[str] = None,
    repo: Optional[str] = None,
    extra: tuple[str, ...] = (),
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Translate command line options into template parameters."""
    params: dict[str, Any] = {}

    for item in extra:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got '{item}'", param_hint="--param")
        params[param_key(key)] = value

    if search_query is not None:
        params["SEARCH_QUERY"] = search_query
    if days is not None:
        now = now or datetime.now(timezone.utc)
        params["DAYS_AGO"] = (now - timedelta(days=days)).isoformat()
    if owner is not None:
        params["OWNER"] = owner
    if repo is not None:
        params["REPO"] = repo

    return params


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.argument("template", required=False)
@click.option("--format", "output_format", type=click.Choice(FORMATS), default="json",
              show_default=True, help="Output format.")
@click.option("--query", "search_query", help="Search query (for the search template).")
@click.option("--days", type=click.IntRange(min=0), help="Number of days to look back.")
@click.option("--owner", help="GitHub owner/org.")
@click.option("--repo", help="GitHub repository.")
@click.option("--param", "-p", "extra", multiple=True, metavar="KEY=VALUE",
              help="Extra template parameter; may be repeated.")
@click.option("--config-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding query-config and schema files.")
@click.option("--workers", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of entries to run concurrently.")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True),
              help="Per-request timeout in seconds.")
@click.option("--log-level", default="WARNING", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.option("--list", "list_templates", is_flag=True, help="List available templates and exit.")
@click.option("--validate", is_flag=True, help="Validate configuration and exit.")
def main(template, output_format, search_query, days, owner, repo, extra,
         config_dir, workers, timeout, log_level, list_templates, validate):
    """Run a query TEMPLATE across all configured services."""
    configure_logging(level=log_level)

    try:
        config = ConfigLoader.create(config_dir).load()
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    runner = QueryTemplateRunner(
        config,
        environment=EnvironmentProvider.from_os(),
        max_workers=workers,
        timeout_seconds=timeout,
    )

    if list_templates:
        for info in runner.list_templates():
            description = info["description"] or ""
            click.echo(f"  {info['name']:<18}{description}".rstrip())
        return

    if validate:
        errors = ConfigValidator.validate_config(config)
        for error in errors:
            click.echo(f"  • {error.field}: {error.message} (value: {error.value})", err=True)
        if errors:
            sys.exit(1)
        click.echo("Configuration is valid")
        return

    if not template:
        click.echo("Error: No template specified", err=True)
        click.echo(click.get_current_context().get_help())
        sys.exit(1)

    params = build_params(search_query, days, owner, repo, extra)

    try:
        click.echo(f"Running template: {template}...", err=True)
        results = runner.run(template, params)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(format_results(results, output_format))


if __name__ == "__main__":
    main()
