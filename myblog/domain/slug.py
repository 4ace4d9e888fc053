"""URL slug generation for article titles."""

import re
from urllib.parse import quote_plus

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def get_slug(text: str) -> str:
    """Build a URL-safe slug: lower-case, runs of non ``[a-z0-9]`` become ``_``.

    >>> get_slug("Hello, World!")
    'hello_world'
    """
    slug = _NON_ALNUM.sub("_", text.lower()).strip("_")
    return quote_plus(slug)
