from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..core.context import RunContext
from ..core.fs import ensure_managed_write_path, write_text_if_changed

Status = Literal["written", "unchanged", "skipped", "drift"]


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    status: Status
    locale: str
    reason: str = ""

    def as_dict(self, ctx: RunContext) -> dict[str, str]:
        row = {"path": ctx.rel(self.path), "status": self.status, "locale": self.locale}
        if self.reason:
            row["reason"] = self.reason
        return row


def commit(ctx: RunContext, path: Path, locale: str, before: str, after: str, dry_run: bool) -> FileOutcome:
    if before == after:
        return FileOutcome(path, "unchanged", locale)
    if dry_run:
        ensure_managed_write_path(ctx, path)
        return FileOutcome(path, "drift", locale)
    write_text_if_changed(ctx, path, after, previous=before)
    return FileOutcome(path, "written", locale)
