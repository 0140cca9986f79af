"""Quiz catalog: build quizzes from the manifest and resolve per-locale metadata."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping

from .model import Author, Quiz, QuizInfo, sort_quizzes

_KNOWN_INFO_KEYS = ("title", "author", "tags")


def _info_from_row(row: Mapping[str, Any]) -> QuizInfo:
    author_raw = row.get("author")
    author = Author(name=author_raw.get("name"), github=author_raw.get("github")) if author_raw else None
    tags = row.get("tags")
    return QuizInfo(
        title=row.get("title"),
        author=author,
        tags=tuple(tags) if isinstance(tags, list) else tags,
        extra={k: v for k, v in row.items() if k not in _KNOWN_INFO_KEYS},
    )


def quiz_from_row(row: Mapping[str, Any]) -> Quiz:
    info = {str(locale): _info_from_row(meta or {}) for locale, meta in (row.get("info") or {}).items()}
    return Quiz(no=int(row["number"]), path=str(row["path"]), difficulty=str(row["difficulty"]), info=info)


def load_catalog(rows: Iterable[Mapping[str, Any]]) -> list[Quiz]:
    """Build quizzes from validated manifest rows, sorted by difficulty."""
    return sort_quizzes(quiz_from_row(row) for row in rows)


def split_tags(tags: tuple[str, ...] | str | None) -> list[str]:
    if not tags:
        return []
    items = tags.split(",") if isinstance(tags, str) else tags
    return [item.strip() for item in items if item and item.strip()]


def resolve_info(quiz: Quiz, locale: str, default_locale: str) -> QuizInfo:
    base = quiz.info.get(default_locale) or QuizInfo()
    local = quiz.info.get(locale)
    if local is None or locale == default_locale:
        merged = base
    else:
        merged = QuizInfo(
            title=local.title if local.title is not None else base.title,
            author=local.author if local.author is not None else base.author,
            tags=local.tags,
            extra={**base.extra, **local.extra},
        )
    # an explicit empty list keeps the locale untagged; a missing or blank value falls back
    tags = local.tags if local is not None else None
    if tags is None or tags == "":
        tags = base.tags
    return replace(merged, tags=tuple(split_tags(tags)))


def get_tags(quiz: Quiz, locale: str, default_locale: str) -> list[str]:
    return list(resolve_info(quiz, locale, default_locale).tags or ())


def title_for(quiz: Quiz, locale: str, default_locale: str) -> str:
    local = quiz.info.get(locale)
    if local is not None and local.title:
        return local.title
    base = quiz.info.get(default_locale)
    return (base.title if base is not None else None) or ""
