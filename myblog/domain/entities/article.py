"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from myblog.domain.validation import require_text


@dataclass
class Article:
    """Core domain entity representing a blog article.

    Title and content are required at construction and on every update.
    The archival flag only changes when the caller passes it to ``update``.
    """

    title: str
    introduction: str
    content: str
    cover_image_url: str | None
    slug: str
    author_id: str
    category_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    is_published: bool = False
    published_on: datetime | None = None
    is_archived: bool = False
    created_on: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    modified_on: datetime | None = None

    def __post_init__(self) -> None:
        self.validate(self.title, self.content)

    @staticmethod
    def validate(title: str, content: str) -> None:
        """Raise InvalidArgumentError when title or content is blank."""
        require_text(title, "title")
        require_text(content, "content")

    def update(
        self,
        title: str,
        introduction: str,
        content: str,
        cover_image_url: str | None,
        slug: str,
        category_id: str,
        is_archived: bool,
        published_on: datetime | None = None,
        is_published: bool | None = None,
    ) -> None:
        """Replace every mutable field and refresh modified_on.

        Nothing is changed when validation fails. Publication follows
        ``is_published`` when given: True keeps or sets a publication date,
        False clears it. A lone ``published_on`` only moves the date of an
        already published article.
        """
        self.validate(title, content)

        self.title = title
        self.introduction = introduction
        self.content = content
        self.cover_image_url = cover_image_url
        self.slug = slug
        self.category_id = category_id
        self.is_archived = is_archived
        if is_published is not None:
            self.is_published = is_published
        if not self.is_published:
            self.published_on = None
        elif published_on is not None:
            self.published_on = published_on
        elif self.published_on is None:
            self.published_on = datetime.now(timezone.utc)
        self.modified_on = datetime.now(timezone.utc)

    def publish(self, published_on: datetime | None = None) -> None:
        self.is_published = True
        self.published_on = published_on or datetime.now(timezone.utc)
        self.modified_on = datetime.now(timezone.utc)

    def unpublish(self) -> None:
        self.is_published = False
        self.published_on = None
        self.modified_on = datetime.now(timezone.utc)
