from __future__ import annotations

from pathlib import Path

from ..catalog import get_tags, resolve_info
from ..config import DocsConfig
from ..core.context import RunContext
from ..core.fs import read_text
from ..core.logging import log_event
from ..model import Quiz
from ..render import INFO_FOOTER, INFO_HEADER, author_info, badge, badge_link, difficulty_badge, escape_html
from .outcome import FileOutcome, commit

PLAY_COLOR = "3178c6"
BACK_COLOR = "grey"
SOLUTIONS_COLOR = "de5a77"
SHARE_COLOR = "green"
TAG_COLOR = "999"


def quiz_readme_path(ctx: RunContext, config: DocsConfig, quiz: Quiz, locale: str) -> Path:
    return ctx.repo_root / config.questions_dir / quiz.path / config.locales.f("README", locale, "md")


def render_info_header(config: DocsConfig, quiz: Quiz, locale: str) -> str:
    locales = config.locales
    info = resolve_info(quiz, locale, locales.default)
    tags = " ".join(badge("", f"#{tag}", TAG_COLOR) for tag in get_tags(quiz, locale, locales.default))
    return (
        f"<h1>{escape_html(info.title or '')} {difficulty_badge(locales, quiz.difficulty, locale)} {tags}</h1>"
        f"<blockquote><p>{author_info(info.author)}</p></blockquote>"
        + badge_link(
            config.urls.to_play(quiz.no, locale),
            "",
            locales.t(locale, "badge.take-the-challenge"),
            PLAY_COLOR,
            "?logo=typescript",
        )
        + "<br><br>"
    )


def render_info_footer(config: DocsConfig, quiz: Quiz, locale: str) -> str:
    locales = config.locales
    return (
        badge_link(f"../../{locales.f('README', locale, 'md')}", "", locales.t(locale, "badge.back"), BACK_COLOR)
        + badge_link(
            config.urls.to_solutions_short(quiz.no),
            "",
            locales.t(locale, "badge.checkout-solutions"),
            SOLUTIONS_COLOR,
            "?logo=awesome-lists&logoColor=white",
        )
        + badge_link(
            config.urls.to_share_answer(quiz.no, locale),
            "",
            locales.t(locale, "badge.share-your-solutions"),
            SHARE_COLOR,
        )
    )


def apply_info(text: str, header: str, footer: str) -> str:
    text = INFO_FOOTER.ensure_footer(INFO_HEADER.ensure_header(text))
    return INFO_FOOTER.replace(INFO_HEADER.replace(text, header), footer)


def insert_info_readme(
    ctx: RunContext,
    config: DocsConfig,
    quiz: Quiz,
    locale: str,
    dry_run: bool = False,
) -> FileOutcome:
    path = quiz_readme_path(ctx, config, quiz, locale)
    if not path.is_file():
        log_event(ctx, "debug", "info", "skipped", path=ctx.rel(path), reason="missing")
        return FileOutcome(path, "skipped", locale, reason="missing")
    before = read_text(path)
    after = apply_info(before, render_info_header(config, quiz, locale), render_info_footer(config, quiz, locale))
    outcome = commit(ctx, path, locale, before, after, dry_run)
    log_event(ctx, "debug", "info", outcome.status, path=ctx.rel(path), quiz=quiz.no, locale=locale)
    return outcome
