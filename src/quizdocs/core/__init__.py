"""Quizdocs core package."""
from .context import RunContext
from .fs import ensure_managed_write_path, write_text_if_changed
from .logging import log_event
from .repo_root import find_repo_root
from .serialize import dumps_json

__all__ = [
    "RunContext",
    "find_repo_root",
    "dumps_json",
    "ensure_managed_write_path",
    "write_text_if_changed",
    "log_event",
]
