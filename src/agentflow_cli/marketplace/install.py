"""Simulated workflow installation.

Nothing is written to disk: an install is a delay followed by a success
message telling the user how to run the workflow.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from rich.console import Console
from rich.text import Text

from agentflow_cli.marketplace.catalog import WorkflowRecord

logger = logging.getLogger(__name__)

INSTALL_TARGET_DIR = ".github/workflows/"


class InstallSimulator:
    """Run the simulated install either inline or on a background timer.

    In background mode the caller gets control back immediately, so the next
    prompt can be shown before the success message is printed. The timer is a
    daemon thread: exiting the process drops a pending message.
    """

    def __init__(
        self,
        console: Console,
        *,
        delay_seconds: float = 1.5,
        background: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self._console = console
        self._delay_seconds = delay_seconds
        self._background = background
        self._sleep = sleep

    def install(self, record: WorkflowRecord) -> threading.Timer | None:
        """Start installing ``record``.

        Returns the pending timer in background mode, otherwise ``None`` once
        the install has completed.
        """

        self._console.print()
        self._console.print(Text("⏳ Installing workflow...", style="cyan"))
        self._console.print()
        logger.debug(
            "Install started",
            extra={"workflow_id": record.id, "background": self._background},
        )

        if self._background:
            timer = threading.Timer(self._delay_seconds, self._complete, args=(record,))
            timer.daemon = True
            timer.start()
            return timer

        self._sleep(self._delay_seconds)
        self._complete(record)
        return None

    def _complete(self, record: WorkflowRecord) -> None:
        self._console.print(Text(f'✅ Successfully installed "{record.title}"!', style="green"))
        self._console.print(Text(f"   Files copied to: {INSTALL_TARGET_DIR}", style="bright_black"))
        self._console.print(Text(f"   Run: agentflow run {record.id}", style="bright_black"))
        self._console.print()
        logger.info("Workflow installed", extra={"workflow_id": record.id, "title": record.title})


__all__ = ["INSTALL_TARGET_DIR", "InstallSimulator"]
