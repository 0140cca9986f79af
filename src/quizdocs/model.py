from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

DIFFICULTY_RANK: tuple[str, ...] = ("warm", "easy", "medium", "hard", "extreme")

DIFFICULTY_COLORS: dict[str, str] = {
    "warm": "teal",
    "easy": "90bb12",
    "medium": "eaa648",
    "hard": "red",
    "extreme": "b11b8d",
}


@dataclass(frozen=True)
class Author:
    name: str | None = None
    github: str | None = None


@dataclass(frozen=True)
class QuizInfo:
    title: str | None = None
    author: Author | None = None
    tags: tuple[str, ...] | str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Quiz:
    no: int
    path: str
    difficulty: str
    info: dict[str, QuizInfo] = field(default_factory=dict)

    @property
    def rank(self) -> int:
        return difficulty_rank(self.difficulty)


def difficulty_rank(difficulty: str) -> int:
    try:
        return DIFFICULTY_RANK.index(difficulty)
    except ValueError:
        raise ValueError(f"unknown difficulty: {difficulty}") from None


def difficulty_color(difficulty: str) -> str:
    try:
        return DIFFICULTY_COLORS[difficulty]
    except KeyError:
        raise ValueError(f"unknown difficulty: {difficulty}") from None


def sort_quizzes(quizzes: Iterable[Quiz]) -> list[Quiz]:
    # sorted() is stable: quizzes of equal difficulty keep their input order
    return sorted(quizzes, key=lambda quiz: quiz.rank)
