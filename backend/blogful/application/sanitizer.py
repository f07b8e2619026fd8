"""Output sanitization against stored XSS.

``title`` is plain text: angle brackets are escaped so any markup renders
literally. ``content`` is a restricted HTML subset cleaned with nh3 (ammonia):
script-capable elements are removed with their bodies, event-handler
attributes and unsafe URL schemes are dropped, and benign inline markup such
as ``<img>`` or ``<strong>`` is kept.

Every transform here is idempotent, so already-sanitized data passes through
unchanged.
"""

from dataclasses import replace

import nh3

from blogful.domain.entities import Article

# Elements removed together with everything inside them.
_STRIPPED_CONTENT_TAGS = {"script", "style"}

_TITLE_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;"})


def sanitize_title(text: str) -> str:
    """Escape ``<`` and ``>``; existing entities and quotes are left alone."""
    return text.translate(_TITLE_ESCAPES)


def sanitize_content(html: str) -> str:
    """Strip executable markup from ``html`` while preserving benign tags."""
    return nh3.clean(
        html,
        clean_content_tags=_STRIPPED_CONTENT_TAGS,
        link_rel=None,
    )


def sanitize(article: Article) -> Article:
    """Return a copy of ``article`` safe for JSON transport and browser rendering."""
    return replace(
        article,
        title=sanitize_title(article.title),
        content=sanitize_content(article.content),
    )
