from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG
from .clock import utc_now
from .env import getenv, getenv_flag
from .repo_root import CONFIG_FILENAME, find_repo_root

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    config_path: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    def rel(self, path: Path) -> str:
        try:
            return path.resolve().relative_to(self.repo_root).as_posix()
        except ValueError:
            return path.as_posix()

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        repo_root: str | None,
        config: str | None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        if repo_root:
            root = Path(repo_root).resolve()
            if not root.is_dir():
                raise ScriptError(f"repository root does not exist: {root}", ERR_CONFIG, kind="missing_repo_root")
        else:
            try:
                root = find_repo_root()
            except RuntimeError as exc:
                raise ScriptError(str(exc), ERR_CONFIG, kind="missing_repo_root") from exc
        config_raw = config or getenv("QUIZDOCS_CONFIG")
        if config_raw:
            config_path = Path(config_raw)
            config_path = (config_path if config_path.is_absolute() else root / config_path).resolve()
        else:
            config_path = root / CONFIG_FILENAME
        default_run = f"quizdocs-{utc_now().strftime('%Y%m%d-%H%M%S')}"
        return cls(
            run_id=run_id or getenv("QUIZDOCS_RUN_ID") or default_run,
            repo_root=root,
            config_path=config_path,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json or getenv_flag("QUIZDOCS_LOG_JSON"),
        )
