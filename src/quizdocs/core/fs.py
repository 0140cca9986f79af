from __future__ import annotations

from pathlib import Path

from ..errors import ScriptError
from ..exit_codes import ERR_IO
from .context import RunContext


def ensure_managed_write_path(ctx: RunContext, path: Path) -> Path:
    resolved = path.resolve() if path.is_absolute() else (ctx.repo_root / path).resolve()
    root = ctx.repo_root.resolve()
    if resolved == root or root not in resolved.parents:
        raise ScriptError(f"forbidden write path outside repository root: {resolved}", ERR_IO, kind="forbidden_write_path")
    if (root / ".git") in (resolved, *resolved.parents):
        raise ScriptError(f"forbidden write path under .git/: {resolved}", ERR_IO, kind="forbidden_write_path")
    return resolved


def read_text(path: Path) -> str:
    # newline="" keeps the document's own line endings byte-for-byte
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise ScriptError(f"unable to read {path}: {exc.strerror or exc}", ERR_IO, kind="read_failed") from exc


def write_text_if_changed(ctx: RunContext, path: Path, content: str, previous: str | None = None) -> bool:
    """Write ``content`` to ``path`` when it differs from what is on disk.

    ``previous`` may carry the text already read by the caller so the file is
    not read twice. Returns True when the file was rewritten.
    """
    out = ensure_managed_write_path(ctx, path)
    if previous is None and out.exists():
        previous = read_text(out)
    if previous == content:
        return False
    try:
        with out.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise ScriptError(f"unable to write {out}: {exc.strerror or exc}", ERR_IO, kind="write_failed") from exc
    return True
