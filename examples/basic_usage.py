#!/usr/bin/env python3
"""Programmatic catalog usage example.

This demonstrates using the marketplace components directly, without the
interactive menu:

* load the built-in catalog
* search it or filter it by category
* render the results and catalog statistics

Query and category are passed as arguments.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from rich.console import Console

from agentflow_cli.marketplace.catalog import default_catalog
from agentflow_cli.marketplace.query import compute_statistics, filter_by_category, search
from agentflow_cli.marketplace.render import (
    render_no_results,
    render_statistics,
    render_workflow_list,
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the workflow catalog (programmatic example).")
    parser.add_argument("--query", default="", help='Search term, e.g. "automation" (optional)')
    parser.add_argument(
        "--category",
        default="All Categories",
        help='Category to list when no query is given, e.g. "Testing"',
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    console = Console()
    catalog = default_catalog()

    if args.query:
        records = search(catalog, args.query)
    else:
        records = filter_by_category(catalog, args.category)

    if records:
        render_workflow_list(console, records)
    else:
        render_no_results(console, "No workflows found.")

    render_statistics(console, compute_statistics(catalog))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
