from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..catalog import load_catalog
from ..config import DocsConfig
from ..core.context import RunContext
from ..core.logging import log_event
from .index import update_index_readme
from .info import insert_info_readme
from .outcome import FileOutcome

Scope = Literal["all", "index", "info"]


@dataclass
class BuildReport:
    scope: Scope
    dry_run: bool
    quizzes: int = 0
    locales: tuple[str, ...] = ()
    files: list[FileOutcome] = field(default_factory=list)

    def _with(self, status: str) -> list[FileOutcome]:
        return [row for row in self.files if row.status == status]

    @property
    def written(self) -> list[FileOutcome]:
        return self._with("written")

    @property
    def unchanged(self) -> list[FileOutcome]:
        return self._with("unchanged")

    @property
    def skipped(self) -> list[FileOutcome]:
        return self._with("skipped")

    @property
    def drift(self) -> list[FileOutcome]:
        return self._with("drift")

    def counts(self) -> dict[str, int]:
        return {
            "written": len(self.written),
            "unchanged": len(self.unchanged),
            "skipped": len(self.skipped),
            "drift": len(self.drift),
        }

    def as_payload(self, ctx: RunContext) -> dict[str, object]:
        return {
            "scope": self.scope,
            "dry_run": self.dry_run,
            "quizzes": self.quizzes,
            "locales": list(self.locales),
            "counts": self.counts(),
            "files": [row.as_dict(ctx) for row in self.files],
        }


def build(ctx: RunContext, config: DocsConfig, scope: Scope = "all", dry_run: bool = False) -> BuildReport:
    """Regenerate the index READMEs and the per-quiz README header/footer blocks.

    Index files are processed first, one per supported locale; then every quiz
    README in every locale. With ``dry_run`` nothing is written and files that
    would change are reported with status ``drift``.
    """
    quizzes = load_catalog(config.quizzes)
    locales = config.locales.supported
    report = BuildReport(scope=scope, dry_run=dry_run, quizzes=len(quizzes), locales=locales)
    log_event(ctx, "info", "build", "start", scope=scope, dry_run=dry_run, quizzes=len(quizzes), locales=",".join(locales))

    if scope in ("all", "index"):
        for locale in locales:
            report.files.append(update_index_readme(ctx, config, quizzes, locale, dry_run=dry_run))

    if scope in ("all", "info"):
        for quiz in quizzes:
            for locale in locales:
                report.files.append(insert_info_readme(ctx, config, quiz, locale, dry_run=dry_run))

    log_event(ctx, "info", "build", "done", **report.counts())
    return report
