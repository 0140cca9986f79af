from __future__ import annotations

from dataclasses import dataclass

from .locales import Locales
from .model import Quiz

DEFAULT_URL_TEMPLATES: dict[str, str] = {
    "play": "https://tsch.js.org/{no}/play{locale_path}",
    "readme": "./questions/{path}/{readme}",
    "solutions": "https://tsch.js.org/{no}/solutions",
    "share": "https://tsch.js.org/{no}/answer{locale_path}",
}

TEMPLATE_FIELDS = ("no", "path", "locale", "locale_path", "readme")


@dataclass(frozen=True)
class UrlBuilder:
    locales: Locales
    play: str = DEFAULT_URL_TEMPLATES["play"]
    readme: str = DEFAULT_URL_TEMPLATES["readme"]
    solutions: str = DEFAULT_URL_TEMPLATES["solutions"]
    share: str = DEFAULT_URL_TEMPLATES["share"]

    def _fields(self, no: int, locale: str, path: str = "") -> dict[str, object]:
        return {
            "no": no,
            "path": path,
            "locale": locale,
            "locale_path": "" if locale == self.locales.default else f"/{locale}",
            "readme": self.locales.f("README", locale, "md"),
        }

    def to_play(self, no: int, locale: str) -> str:
        return self.play.format(**self._fields(no, locale))

    def to_quiz_readme(self, quiz: Quiz, locale: str) -> str:
        return self.readme.format(**self._fields(quiz.no, locale, quiz.path))

    def to_solutions_short(self, no: int) -> str:
        return self.solutions.format(**self._fields(no, self.locales.default))

    def to_share_answer(self, no: int, locale: str) -> str:
        return self.share.format(**self._fields(no, locale))
