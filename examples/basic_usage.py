#!/usr/bin/env python3
"""
Basic Usage Example - MetaQuery Template Runner

This script demonstrates running a query template from Python:
- Load the sample configuration next to this file
- Build a runner over the process environment
- Run a template and print a Markdown report

Credentials are read from LINEAR_API_KEY, GITHUB_TOKEN and
MAESTROVERSE_API_KEY; backends without one show up as failed entries.

Run: python examples/basic_usage.py [template]
"""

import sys
from pathlib import Path

from metaquery.config.environment import EnvironmentProvider
from metaquery.config.loader import ConfigLoader
from metaquery.config.validation import ConfigValidator
from metaquery.engine import QueryTemplateRunner
from metaquery.logging import configure_logging
from metaquery.output import format_markdown


def main() -> int:
    configure_logging(level="INFO")

    config = ConfigLoader.create(Path(__file__).parent / ".meta-templates").load()

    errors = ConfigValidator.validate_config(config)
    for error in errors:
        print(f"  • {error.field}: {error.message} (value: {error.value})", file=sys.stderr)
    if errors:
        return 1

    runner = QueryTemplateRunner(config, environment=EnvironmentProvider.from_os(), max_workers=3)

    print("Available templates:", file=sys.stderr)
    for info in runner.list_templates():
        print(f"  {info['name']:<18}{info['description'] or ''}", file=sys.stderr)

    template = sys.argv[1] if len(sys.argv) > 1 else "all_open_items"
    results = runner.run(template, {"OWNER": "octocat", "REPO": "hello-world", "LIMIT": 10})

    print(format_markdown(results))
    print(f"{len(results.successes())} succeeded, {len(results.failures())} failed", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
