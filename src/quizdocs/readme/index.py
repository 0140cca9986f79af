from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..catalog import title_for
from ..config import DocsConfig
from ..core.context import RunContext
from ..core.fs import read_text
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_IO
from ..model import Quiz, difficulty_color
from ..render import CHALLENGES, badge_link, difficulty_badge_inverted
from .outcome import FileOutcome, commit


def index_readme_path(ctx: RunContext, config: DocsConfig, locale: str) -> Path:
    return ctx.repo_root / config.index_dir / config.locales.f("README", locale, "md")


def render_challenges(config: DocsConfig, quizzes: Sequence[Quiz], locale: str) -> str:
    """Render the badge list for the index, one group per difficulty.

    ``quizzes`` must already be sorted; a new group heading is emitted each
    time the difficulty changes.
    """
    default = config.locales.default
    parts: list[str] = []
    prev = ""
    for quiz in quizzes:
        if prev != quiz.difficulty:
            lead = "<br><br>" if prev else ""
            parts.append(f"{lead}{difficulty_badge_inverted(config.locales, quiz.difficulty, locale)}<br>")
        parts.append(
            badge_link(
                config.urls.to_quiz_readme(quiz, locale),
                "",
                f"#{quiz.no}・{title_for(quiz, locale, default)}",
                difficulty_color(quiz.difficulty),
            )
        )
        prev = quiz.difficulty
    return "".join(parts)


def apply_challenges(text: str, body: str) -> str:
    return CHALLENGES.replace(text, body, padded=True)


def update_index_readme(
    ctx: RunContext,
    config: DocsConfig,
    quizzes: Sequence[Quiz],
    locale: str,
    dry_run: bool = False,
) -> FileOutcome:
    path = index_readme_path(ctx, config, locale)
    if not path.is_file():
        raise ScriptError(f"index README not found: {ctx.rel(path)}", ERR_IO, kind="missing_index")
    before = read_text(path)
    if not CHALLENGES.has_region(before):
        log_event(ctx, "warning", "index", "missing-markers", path=ctx.rel(path), marker=CHALLENGES.start)
        return FileOutcome(path, "unchanged", locale, reason="missing-markers")
    after = apply_challenges(before, render_challenges(config, quizzes, locale))
    outcome = commit(ctx, path, locale, before, after, dry_run)
    log_event(ctx, "debug", "index", outcome.status, path=ctx.rel(path), locale=locale, quizzes=len(quizzes))
    return outcome
