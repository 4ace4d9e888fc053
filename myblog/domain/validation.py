"""Field guards shared by the domain entities."""

from myblog.domain.exceptions import InvalidArgumentError


def require_text(value: str | None, field: str) -> None:
    """Raise InvalidArgumentError unless ``value`` has non-whitespace content."""
    if value is None or not value.strip():
        raise InvalidArgumentError(field)
