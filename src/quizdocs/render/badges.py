"""shields.io badge fragments.

Badges are emitted as raw HTML so they render inline inside headings and
GitHub markdown alike.
"""

from __future__ import annotations

from urllib.parse import quote

from ..locales import Locales
from ..model import Author, difficulty_color

SHIELDS_BADGE_ROOT = "https://img.shields.io/badge"

# encodeURIComponent leaves these unescaped besides alphanumerics and "_.-~"
_URI_COMPONENT_SAFE = "!*'()"

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(unsafe: str) -> str:
    out = unsafe
    for raw, entity in _HTML_ESCAPES:
        out = out.replace(raw, entity)
    return out


def _badge_part(value: str) -> str:
    # shields.io treats a single dash as a field separator
    return quote(value.replace("-", "--"), safe=_URI_COMPONENT_SAFE)


def badge_url(label: str, text: str, color: str, args: str = "") -> str:
    return f"{SHIELDS_BADGE_ROOT}/{_badge_part(label)}-{_badge_part(text)}-{color}{args}"


def badge(label: str, text: str, color: str, args: str = "") -> str:
    return f'<img src="{badge_url(label, text, color, args)}" alt="{text}"/>'


def badge_link(url: str, label: str, text: str, color: str, args: str = "") -> str:
    return f'<a href="{url}" target="_blank">{badge(label, text, color, args)}</a> '


def author_info(author: Author | None) -> str:
    author = author or Author()
    out = f"by {author.name or ''}"
    if author.github:
        out += f' <a href="https://github.com/{author.github}" target="_blank">@{author.github}</a>'
    return out


def difficulty_badge(locales: Locales, difficulty: str, locale: str) -> str:
    return badge("", locales.t(locale, f"difficulty.{difficulty}"), difficulty_color(difficulty))


def difficulty_badge_inverted(locales: Locales, difficulty: str, locale: str) -> str:
    return badge(locales.t(locale, f"difficulty.{difficulty}"), " ", difficulty_color(difficulty))
