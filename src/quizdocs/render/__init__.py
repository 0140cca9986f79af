"""HTML fragment rendering and marker-region rewriting."""
from .badges import (
    author_info,
    badge,
    badge_link,
    badge_url,
    difficulty_badge,
    difficulty_badge_inverted,
    escape_html,
)
from .markers import CHALLENGES, INFO_FOOTER, INFO_HEADER, MarkerRegion

__all__ = [
    "CHALLENGES",
    "INFO_FOOTER",
    "INFO_HEADER",
    "MarkerRegion",
    "author_info",
    "badge",
    "badge_link",
    "badge_url",
    "difficulty_badge",
    "difficulty_badge_inverted",
    "escape_html",
]
