from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..catalog import load_catalog, title_for
from ..config import load_config
from ..core.context import RunContext
from ..core.env import getenv
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_DRIFT, ERR_USAGE, OK
from ..readme import BuildReport, build
from .output import TOOL, build_base_payload, emit, render_error, resolve_output_format

BUILD_SCOPES = {"build": "all", "index": "index", "info": "info"}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=TOOL, description="generate index and per-quiz README badges")
    p.add_argument("--version", action="version", version=f"{TOOL} {__version__}")
    p.add_argument("--repo-root", help="repository root (default: nearest parent holding quizdocs.yaml)")
    p.add_argument("--config", help="config file path, relative to the repository root")
    p.add_argument("--run-id", help="run identifier used in log events")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable per-file diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version", help="print tool version")
    build_p = sub.add_parser("build", help="update index READMEs and per-quiz README blocks")
    build_p.add_argument("--dry-run", action="store_true", help="report files that would change without writing")
    index_p = sub.add_parser("index", help="update the challenges block of every index README")
    index_p.add_argument("--dry-run", action="store_true", help="report files that would change without writing")
    info_p = sub.add_parser("info", help="update header/footer blocks of every quiz README")
    info_p.add_argument("--dry-run", action="store_true", help="report files that would change without writing")
    sub.add_parser("check", help="fail when generated README blocks are out of date")
    list_p = sub.add_parser("list", help="print the quiz catalog in index order")
    list_p.add_argument("--locale", help="locale used for titles (default: default locale)")
    return p


def _render_report_text(ctx: RunContext, report: BuildReport) -> str:
    counts = report.counts()
    lines = [" ".join(f"{key}={value}" for key, value in counts.items())]
    for row in report.files:
        if row.status in {"written", "drift"}:
            lines.append(f"{row.status}: {ctx.rel(row.path)}")
    return "\n".join(lines)


def _run_build(ctx: RunContext, scope: str, dry_run: bool, check: bool) -> int:
    config = load_config(ctx.config_path)
    report = build(ctx, config, scope=scope, dry_run=dry_run or check)  # type: ignore[arg-type]
    status = "fail" if check and report.drift else "ok"
    if ctx.as_json:
        emit({**build_base_payload(ctx, status), **report.as_payload(ctx)}, as_json=True)
    else:
        print(_render_report_text(ctx, report))
    if check and report.drift:
        log_event(ctx, "error", "check", "drift", files=len(report.drift))
        return ERR_DRIFT
    return OK


def _run_list(ctx: RunContext, locale: str | None) -> int:
    config = load_config(ctx.config_path)
    chosen = locale or config.locales.default
    quizzes = load_catalog(config.quizzes)
    rows = [
        {
            "no": quiz.no,
            "path": quiz.path,
            "difficulty": quiz.difficulty,
            "title": title_for(quiz, chosen, config.locales.default),
        }
        for quiz in quizzes
    ]
    if ctx.as_json:
        emit({**build_base_payload(ctx), "locale": chosen, "quizzes": rows}, as_json=True)
        return OK
    for row in rows:
        print(f"{row['no']:>5}  {row['difficulty']:<8} {row['path']}  {row['title']}")
    return OK


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    fmt = resolve_output_format(cli_json=ns.json, cli_format=ns.format, ci_present=getenv("CI") is not None)
    as_json = fmt == "json"
    if ns.cmd == "version":
        if as_json:
            emit({"schema_version": 1, "tool": TOOL, "status": "ok", "version": __version__}, as_json=True)
        else:
            print(f"{TOOL} {__version__}")
        return OK
    try:
        ctx = RunContext.from_args(
            ns.run_id,
            ns.repo_root,
            ns.config,
            fmt,  # type: ignore[arg-type]
            ns.verbose,
            ns.quiet,
            ns.log_json,
        )
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=fmt)
        if ns.cmd in BUILD_SCOPES:
            return _run_build(ctx, BUILD_SCOPES[ns.cmd], ns.dry_run, check=False)
        if ns.cmd == "check":
            return _run_build(ctx, "all", dry_run=True, check=True)
        if ns.cmd == "list":
            return _run_list(ctx, ns.locale)
        return ERR_USAGE
    except ScriptError as exc:
        print(render_error(exc, as_json=as_json), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        internal = ScriptError.internal(exc)
        print(render_error(internal, as_json=as_json), file=sys.stderr)
        return internal.code


if __name__ == "__main__":
    raise SystemExit(main())
