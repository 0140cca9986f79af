"""Locale strings and locale-aware file naming."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

DEFAULT_LOCALE = "en"

DEFAULT_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "difficulty.warm": "warm-up",
        "difficulty.easy": "easy",
        "difficulty.medium": "medium",
        "difficulty.hard": "hard",
        "difficulty.extreme": "extreme",
        "badge.take-the-challenge": "Take the Challenge",
        "badge.back": "Back",
        "badge.checkout-solutions": "Check out Solutions",
        "badge.share-your-solutions": "Share your Solutions",
    },
}


@dataclass(frozen=True)
class Locales:
    default: str = DEFAULT_LOCALE
    supported: tuple[str, ...] = (DEFAULT_LOCALE,)
    messages: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: DEFAULT_MESSAGES)

    def t(self, locale: str, key: str) -> str:
        for candidate in (locale, self.default):
            value = self.messages.get(candidate, {}).get(key)
            if value:
                return value
        return key

    def f(self, name: str, locale: str, ext: str) -> str:
        if locale == self.default:
            return f"{name}.{ext}"
        return f"{name}.{locale}.{ext}"

    @classmethod
    def from_config(
        cls,
        default: str,
        supported: list[str],
        messages: Mapping[str, Mapping[str, str]] | None = None,
    ) -> "Locales":
        merged: dict[str, dict[str, str]] = {locale: dict(table) for locale, table in DEFAULT_MESSAGES.items()}
        for locale, table in (messages or {}).items():
            merged.setdefault(locale, {}).update(table)
        ordered = list(dict.fromkeys(supported if default in supported else [default, *supported]))
        return cls(default=default, supported=tuple(ordered), messages=merged)
