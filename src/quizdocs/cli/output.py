"""CLI payload output helpers."""

from __future__ import annotations

from ..core.context import RunContext
from ..core.serialize import dumps_json
from ..errors import ScriptError

TOOL = "quizdocs"


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def build_base_payload(ctx: RunContext, status: str = "ok") -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": TOOL,
        "status": status,
        "run_id": ctx.run_id,
        "repo_root": str(ctx.repo_root),
        "config": ctx.rel(ctx.config_path),
    }


def resolve_output_format(*, cli_json: bool, cli_format: str | None, ci_present: bool) -> str:
    if cli_json:
        return "json"
    if cli_format:
        return cli_format
    return "json" if ci_present else "text"


def render_error(error: ScriptError, *, as_json: bool) -> str:
    if as_json:
        return dumps_json(
            {"schema_version": 1, "tool": TOOL, "status": "error", "errors": [error.as_row()]},
            pretty=False,
        )
    return str(error)
