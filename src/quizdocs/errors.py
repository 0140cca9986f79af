from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_INTERNAL


@dataclass
class ScriptError(Exception):
    """User-facing failure carrying the process exit code and a stable ``kind`` slug."""

    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message

    def as_row(self) -> dict[str, object]:
        return {"code": self.code, "kind": self.kind, "message": self.message}

    @classmethod
    def internal(cls, exc: BaseException) -> "ScriptError":
        return cls(f"internal error: {exc}", ERR_INTERNAL, kind="internal_error")
