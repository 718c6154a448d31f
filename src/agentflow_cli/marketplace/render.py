"""Rendering helpers for the marketplace menu.

``format_*`` helpers return plain strings; ``render_*`` helpers print to a
:class:`rich.console.Console`. Styling is applied through :class:`rich.text.Text`
so catalog content is never parsed as console markup.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from agentflow_cli import __version__
from agentflow_cli.marketplace.catalog import WorkflowRecord
from agentflow_cli.marketplace.query import CatalogStatistics

FILLED_STAR = "★"
EMPTY_STAR = "☆"
_RULE = "─" * 50
_MUTED = "bright_black"


def format_price(price: int) -> str:
    return "FREE" if price == 0 else f"${price}"


def format_stars(rating: float) -> str:
    if not 0 <= rating <= 5:
        raise ValueError(f"rating must be in [0, 5], got {rating}")
    filled = math.floor(rating)
    return FILLED_STAR * filled + EMPTY_STAR * (5 - filled)


def format_installs(installs: int) -> str:
    return f"{installs:,}"


def format_selection_label(record: WorkflowRecord) -> str:
    """Label shown when picking a workflow, e.g. ``Deploy Master ($49)``."""

    price = "Free" if record.is_free else f"${record.price}"
    return f"{record.title} ({price})"


def _price_text(price: int) -> Text:
    return Text(format_price(price), style="green" if price == 0 else "yellow")


def render_banner(console: Console) -> None:
    body = Text.assemble(
        (f"⚡ AgentFlow CLI v{__version__}\n", "bold cyan"),
        ("Workflow Marketplace in your Terminal", "cyan"),
    )
    console.print(Panel.fit(body, border_style="cyan", padding=(0, 4)))


def render_workflow_list(console: Console, records: Sequence[WorkflowRecord]) -> None:
    console.print()
    console.print(Text("📦 Available Workflows:", style="bold white"))
    console.print()

    for index, record in enumerate(records, start=1):
        console.print(
            Text.assemble(
                f"{index}. ",
                (record.title, "bold"),
                (" | ", _MUTED),
                _price_text(record.price),
            )
        )
        console.print(Text(f"   {record.description}", style=_MUTED))
        console.print(
            Text.assemble(
                (f"   {format_stars(record.rating)} ", "yellow"),
                (f"{record.rating:g}", _MUTED),
                (" | ", "yellow"),
                (f"{format_installs(record.installs)} installs", "cyan"),
            )
        )
        console.print(Text(f"   Category: {record.category}", style="blue"))
        console.print()


def render_workflow_details(console: Console, record: WorkflowRecord) -> None:
    console.print()
    console.print(Text(f"📋 {record.title}", style="bold white"))
    console.print()
    console.print(Text(_RULE, style=_MUTED))
    console.print(Text(record.description))
    console.print(Text(_RULE, style=_MUTED))
    console.print(Text(f"   ★ Rating: {record.rating:g}/5", style="yellow"))
    console.print(Text(f"   📥 Installs: {format_installs(record.installs)}", style="cyan"))
    console.print(Text(f"   📁 Category: {record.category}", style="blue"))
    console.print(Text(f"   🏷️  Tags: {', '.join(record.tags)}"))
    console.print(Text(f"   💰 Price: {format_price(record.price)}", style="green"))
    console.print()


def render_statistics(console: Console, stats: CatalogStatistics) -> None:
    average = "n/a" if stats.average_rating is None else f"{stats.average_rating:.1f}"

    console.print()
    console.print(Text("📊 AgentFlow Statistics:", style="bold white"))
    console.print()
    rows = (
        ("📦 Total Workflows", str(stats.count), "white"),
        ("📥 Total Installs", format_installs(stats.total_installs), "white"),
        ("⭐ Average Rating", average, "white"),
        ("🎁 Free Workflows", str(stats.free_count), "green"),
    )
    for label, value, value_style in rows:
        console.print(Text.assemble((f"   {label}: ", "cyan"), (value, value_style)))
    console.print()


def render_no_results(console: Console, message: str) -> None:
    console.print()
    console.print(Text(f"⚠️  {message}", style="yellow"))
    console.print()


def render_farewell(console: Console) -> None:
    console.print()
    console.print(Text("👋 Thanks for using AgentFlow CLI!", style=_MUTED))
    console.print()


def render_error(console: Console, message: str) -> None:
    console.print()
    console.print(Text.assemble(("❌ Error:", "red"), f" {message}"))


__all__ = [
    "format_installs",
    "format_price",
    "format_selection_label",
    "format_stars",
    "render_banner",
    "render_error",
    "render_farewell",
    "render_no_results",
    "render_statistics",
    "render_workflow_details",
    "render_workflow_list",
]
