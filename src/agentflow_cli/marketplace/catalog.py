"""The workflow catalog.

The catalog is a fixed, in-memory set of workflow records plus the ordered
category labels used for browsing. It is built once at startup and never
mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

WILDCARD_CATEGORY = "All Categories"


@dataclass(frozen=True, slots=True)
class WorkflowRecord:
    """A single marketplace listing."""

    id: str
    title: str
    description: str
    price: int
    rating: float
    installs: int
    category: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Workflow {self.id}: price must be >= 0, got {self.price}")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"Workflow {self.id}: rating must be in [0, 5], got {self.rating}")
        if self.installs < 0:
            raise ValueError(f"Workflow {self.id}: installs must be >= 0, got {self.installs}")

    @property
    def is_free(self) -> bool:
        return self.price == 0


@dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered workflow records and category labels.

    The first category is the wildcard meaning "no filter".
    """

    workflows: tuple[WorkflowRecord, ...]
    categories: tuple[str, ...] = (WILDCARD_CATEGORY,)

    def __post_init__(self) -> None:
        if not self.categories:
            raise ValueError("A catalog needs at least the wildcard category")

        seen: set[str] = set()
        for record in self.workflows:
            if record.id in seen:
                raise ValueError(f"Duplicate workflow id: {record.id}")
            seen.add(record.id)

    @property
    def wildcard(self) -> str:
        return self.categories[0]

    def all_workflows(self) -> tuple[WorkflowRecord, ...]:
        return self.workflows

    def all_categories(self) -> tuple[str, ...]:
        return self.categories

    def uncategorized(self) -> tuple[WorkflowRecord, ...]:
        """Records whose category is not a browsable label.

        Such records still show up in search and in the wildcard listing, but
        browsing by category can never reach them.
        """

        known = set(self.categories[1:])
        return tuple(record for record in self.workflows if record.category not in known)


_SAMPLE_WORKFLOWS: tuple[WorkflowRecord, ...] = (
    WorkflowRecord(
        id="1",
        title="Auto PR Reviewer",
        description="Automatically review pull requests with AI-powered insights",
        price=29,
        rating=4.8,
        installs=2341,
        category="Code Review",
        tags=("AI", "Code Review", "Automation"),
    ),
    WorkflowRecord(
        id="2",
        title="Deploy Master",
        description="One-click deployment to multiple cloud providers",
        price=49,
        rating=4.9,
        installs=892,
        category="CI/CD",
        tags=("Deployment", "DevOps", "Cloud"),
    ),
    WorkflowRecord(
        id="3",
        title="Test Suite Pro",
        description="Comprehensive testing workflow with coverage reports",
        price=0,
        rating=4.7,
        installs=5678,
        category="Testing",
        tags=("Testing", "Coverage", "Quality"),
    ),
    WorkflowRecord(
        id="4",
        title="Security Scanner",
        description="Multi-layer security scanning for your repositories",
        price=29,
        rating=4.6,
        installs=543,
        category="Security",
        tags=("Security", "Vulnerability"),
    ),
    WorkflowRecord(
        id="5",
        title="Auto Docs Generator",
        description="Automatically generate documentation from code",
        price=15,
        rating=4.5,
        installs=321,
        category="Documentation",
        tags=("Docs", "API", "Automation"),
    ),
    WorkflowRecord(
        id="6",
        title="ML Pipeline Runner",
        description="End-to-end ML pipeline with training and deployment",
        price=49,
        rating=4.9,
        installs=654,
        category="AI & ML",
        tags=("Machine Learning", "ML", "Pipeline"),
    ),
)

_SAMPLE_CATEGORIES: tuple[str, ...] = (
    WILDCARD_CATEGORY,
    "CI/CD",
    "Code Review",
    "Testing",
    "Security",
    "Documentation",
    "AI & ML",
)


def default_catalog() -> Catalog:
    """Return the built-in marketplace catalog."""

    return Catalog(workflows=_SAMPLE_WORKFLOWS, categories=_SAMPLE_CATEGORIES)


__all__ = ["WILDCARD_CATEGORY", "Catalog", "WorkflowRecord", "default_catalog"]
