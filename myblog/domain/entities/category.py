"""Domain entity for blog categories."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from myblog.domain.validation import require_text

# Seeded into an empty database at startup.
DEFAULT_CATEGORY_NAMES: tuple[str, ...] = (
    "ASP.NET Core",
    "Blazor Server",
    "Blazor WebAssembly",
    "C# Programming",
    "Entity Framework Core (EF Core)",
    ".NET MAUI",
    "General Programming",
    "Web Development",
    "Other .NET Topics",
)


@dataclass
class Category:
    """A category that articles are filed under."""

    category_name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    is_archived: bool = False
    created_on: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    modified_on: datetime | None = None

    def __post_init__(self) -> None:
        require_text(self.category_name, "category_name")

    def update(self, category_name: str, is_archived: bool) -> None:
        """Rename the category and set its archival flag."""
        require_text(category_name, "category_name")
        self.category_name = category_name
        self.is_archived = is_archived
        self.modified_on = datetime.now(timezone.utc)
