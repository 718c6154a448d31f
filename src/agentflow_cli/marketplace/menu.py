"""The interactive marketplace menu.

The menu is an explicit state machine. Every action state runs once and then
moves to the continue prompt; illegal transitions fail loudly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from rich.console import Console

from agentflow_cli.marketplace.catalog import Catalog, WorkflowRecord
from agentflow_cli.marketplace.install import InstallSimulator
from agentflow_cli.marketplace.prompts import Choice, Prompter, require_non_empty
from agentflow_cli.marketplace.query import (
    compute_statistics,
    filter_by_category,
    find_by_id,
    search,
)
from agentflow_cli.marketplace.render import (
    format_selection_label,
    render_banner,
    render_farewell,
    render_no_results,
    render_statistics,
    render_workflow_details,
    render_workflow_list,
)

logger = logging.getLogger(__name__)


class MenuState(str, Enum):
    MAIN_MENU = "main_menu"
    SEARCH = "search"
    BROWSE_CATEGORY = "browse_category"
    LIST_ALL = "list_all"
    STATISTICS = "statistics"
    DETAILS = "details"
    INSTALL = "install"
    CONTINUE_PROMPT = "continue_prompt"
    EXIT = "exit"


ACTION_STATES: frozenset[MenuState] = frozenset(
    {
        MenuState.SEARCH,
        MenuState.BROWSE_CATEGORY,
        MenuState.LIST_ALL,
        MenuState.STATISTICS,
        MenuState.DETAILS,
        MenuState.INSTALL,
    }
)

ALLOWED_TRANSITIONS: dict[MenuState, set[MenuState]] = {
    MenuState.MAIN_MENU: set(ACTION_STATES) | {MenuState.EXIT},
    **{state: {MenuState.CONTINUE_PROMPT} for state in ACTION_STATES},
    MenuState.CONTINUE_PROMPT: {MenuState.MAIN_MENU, MenuState.EXIT},
    MenuState.EXIT: set(),
}

MAIN_MENU_CHOICES: tuple[Choice[MenuState], ...] = (
    Choice("🔍 Search Workflows", MenuState.SEARCH),
    Choice("📂 Browse by Category", MenuState.BROWSE_CATEGORY),
    Choice("📋 View All Workflows", MenuState.LIST_ALL),
    Choice("📊 View Statistics", MenuState.STATISTICS),
    Choice("📄 View Workflow Details", MenuState.DETAILS),
    Choice("📥 Install Workflow", MenuState.INSTALL),
    Choice("❌ Exit", MenuState.EXIT),
)

SEARCH_NO_RESULTS = "No workflows found matching your search."
CATEGORY_NO_RESULTS = "No workflows found in this category."


class IllegalTransitionError(ValueError):
    pass


def transition(*, current: MenuState, to: MenuState) -> MenuState:
    allowed = ALLOWED_TRANSITIONS.get(current, set())
    if to not in allowed:
        raise IllegalTransitionError(f"Illegal transition: {current.value} -> {to.value}")
    return to


class MenuLoop:
    """Drive the marketplace menu until the user exits.

    The catalog is read-only; all terminal input goes through ``prompter`` and
    all output through ``console``.
    """

    def __init__(
        self,
        *,
        catalog: Catalog,
        console: Console,
        prompter: Prompter,
        installer: InstallSimulator,
        clear_screen: bool = True,
    ) -> None:
        self._catalog = catalog
        self._console = console
        self._prompter = prompter
        self._installer = installer
        self._clear_screen = clear_screen
        self._state = MenuState.MAIN_MENU
        self._actions: dict[MenuState, Callable[[], None]] = {
            MenuState.SEARCH: self._search,
            MenuState.BROWSE_CATEGORY: self._browse_category,
            MenuState.LIST_ALL: self._list_all,
            MenuState.STATISTICS: self._statistics,
            MenuState.DETAILS: self._details,
            MenuState.INSTALL: self._install,
        }

    @property
    def state(self) -> MenuState:
        return self._state

    def run(self) -> int:
        """Run until the user exits; returns the process exit status."""

        while self._state is not MenuState.EXIT:
            self.step()

        render_farewell(self._console)
        return 0

    def step(self) -> MenuState:
        """Handle the current state once and move to the next one."""

        if self._state is MenuState.MAIN_MENU:
            render_banner(self._console)
            chosen = self._prompter.select("What would you like to do?", MAIN_MENU_CHOICES)
            return self._advance(chosen)

        if self._state is MenuState.CONTINUE_PROMPT:
            if not self._prompter.confirm("Continue?", default=True):
                return self._advance(MenuState.EXIT)
            if self._clear_screen:
                self._console.clear()
            return self._advance(MenuState.MAIN_MENU)

        action = self._actions.get(self._state)
        if action is None:
            raise IllegalTransitionError(f"No handler for state: {self._state.value}")
        action()
        return self._advance(MenuState.CONTINUE_PROMPT)

    def _advance(self, to: MenuState) -> MenuState:
        previous = self._state
        self._state = transition(current=previous, to=to)
        logger.debug("Menu transition", extra={"from_state": previous.value, "to_state": to.value})
        return self._state

    def _search(self) -> None:
        query = self._prompter.text(
            "🔍 Search workflows:", validate=require_non_empty("Please enter a search term")
        )
        results = search(self._catalog, query)
        logger.debug("Search", extra={"query": query, "results": len(results)})
        if not results:
            render_no_results(self._console, SEARCH_NO_RESULTS)
            return
        render_workflow_list(self._console, results)

    def _browse_category(self) -> None:
        choices = [Choice(label, label) for label in self._catalog.all_categories()]
        category = self._prompter.select("📂 Select a category:", choices)
        results = filter_by_category(self._catalog, category)
        logger.debug("Browse category", extra={"category": category, "results": len(results)})
        if not results:
            render_no_results(self._console, CATEGORY_NO_RESULTS)
            return
        render_workflow_list(self._console, results)

    def _list_all(self) -> None:
        render_workflow_list(self._console, self._catalog.all_workflows())

    def _statistics(self) -> None:
        render_statistics(self._console, compute_statistics(self._catalog))

    def _details(self) -> None:
        record = self._pick_workflow("📄 Select a workflow to view details:")
        render_workflow_details(self._console, record)

    def _install(self) -> None:
        record = self._pick_workflow("📥 Select a workflow to install:")
        self._installer.install(record)

    def _pick_workflow(self, message: str) -> WorkflowRecord:
        choices = [
            Choice(format_selection_label(record), record.id)
            for record in self._catalog.all_workflows()
        ]
        workflow_id = self._prompter.select(message, choices)
        record = find_by_id(self._catalog, workflow_id)
        if record is None:
            raise LookupError(f"Unknown workflow id: {workflow_id}")
        logger.debug("Workflow selected", extra={"workflow_id": record.id})
        return record


__all__ = [
    "ALLOWED_TRANSITIONS",
    "IllegalTransitionError",
    "MAIN_MENU_CHOICES",
    "MenuLoop",
    "MenuState",
    "transition",
]
