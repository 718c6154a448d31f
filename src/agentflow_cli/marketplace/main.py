"""CLI entrypoint for the AgentFlow workflow marketplace."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console

from agentflow_cli import __version__
from agentflow_cli.marketplace.catalog import Catalog, default_catalog
from agentflow_cli.marketplace.config import AgentFlowSettings
from agentflow_cli.marketplace.install import InstallSimulator
from agentflow_cli.marketplace.logging import configure_logging
from agentflow_cli.marketplace.menu import MenuLoop
from agentflow_cli.marketplace.prompts import Prompter, RichPrompter
from agentflow_cli.marketplace.render import render_error

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentflow",
        description="Browse and install workflows from the AgentFlow marketplace",
    )
    parser.add_argument("--version", action="version", version=f"agentflow-cli {__version__}")
    return parser


def _warn_uncategorized(catalog: Catalog) -> None:
    for record in catalog.uncategorized():
        logger.warning(
            "Workflow category is not browsable",
            extra={"workflow_id": record.id, "category": record.category},
        )


def main(
    argv: list[str] | None = None,
    *,
    console: Console | None = None,
    prompter: Prompter | None = None,
    catalog: Catalog | None = None,
) -> int:
    parser = build_parser()
    parser.parse_args(argv)

    try:
        settings = AgentFlowSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    if console is None:
        console = Console()
    if prompter is None:
        prompter = RichPrompter(console)
    if catalog is None:
        catalog = default_catalog()
    _warn_uncategorized(catalog)

    installer = InstallSimulator(
        console,
        delay_seconds=settings.install_delay_seconds,
        background=settings.background_install,
    )
    menu = MenuLoop(
        catalog=catalog,
        console=console,
        prompter=prompter,
        installer=installer,
        clear_screen=settings.clear_screen,
    )

    try:
        return menu.run()
    except KeyboardInterrupt:
        logger.warning("Menu interrupted", extra={"state": menu.state.value})
        render_error(console, "Interrupted")
        return 1
    except Exception as e:
        logger.exception("Menu failed", extra={"state": menu.state.value})
        render_error(console, str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
