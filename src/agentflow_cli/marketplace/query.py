"""Read-only queries over a :class:`Catalog`."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from agentflow_cli.marketplace.catalog import Catalog, WorkflowRecord


@dataclass(frozen=True, slots=True)
class CatalogStatistics:
    count: int
    total_installs: int
    average_rating: float | None
    free_count: int


def _matches(record: WorkflowRecord, needle: str) -> bool:
    if needle in record.title.lower() or needle in record.description.lower():
        return True
    return any(needle in tag.lower() for tag in record.tags)


def search(catalog: Catalog, query: str) -> list[WorkflowRecord]:
    """Case-insensitive substring search over title, description and tags.

    Results keep catalog order. An empty query is rejected; callers are
    expected to validate input before searching.
    """

    if not query:
        raise ValueError("Search query must not be empty")

    needle = query.lower()
    return [record for record in catalog.all_workflows() if _matches(record, needle)]


def filter_by_category(catalog: Catalog, label: str) -> list[WorkflowRecord]:
    """Return records in ``label``; the wildcard returns the whole catalog."""

    if label == catalog.wildcard:
        return list(catalog.all_workflows())
    return [record for record in catalog.all_workflows() if record.category == label]


def find_by_id(catalog: Catalog, workflow_id: str) -> WorkflowRecord | None:
    for record in catalog.all_workflows():
        if record.id == workflow_id:
            return record
    return None


def find_by_title_prefix(catalog: Catalog, selection_label: str) -> WorkflowRecord | None:
    """Resolve a composite selection label back to its record.

    Returns the first record whose title is a prefix of ``selection_label``.
    A title that is itself a prefix of another title resolves to whichever
    comes first in the catalog, so interactive selection goes through
    :func:`find_by_id` instead.
    """

    for record in catalog.all_workflows():
        if selection_label.startswith(record.title):
            return record
    return None


def compute_statistics(catalog: Catalog) -> CatalogStatistics:
    workflows = catalog.all_workflows()
    count = len(workflows)
    total_installs = sum(record.installs for record in workflows)
    free_count = sum(1 for record in workflows if record.is_free)

    average_rating: float | None = None
    if count:
        mean = sum(record.rating for record in workflows) / count
        # Half-up on the exact binary value of the mean.
        average_rating = float(Decimal(mean).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    return CatalogStatistics(
        count=count,
        total_installs=total_installs,
        average_rating=average_rating,
        free_count=free_count,
    )


__all__ = [
    "CatalogStatistics",
    "compute_statistics",
    "filter_by_category",
    "find_by_id",
    "find_by_title_prefix",
    "search",
]
