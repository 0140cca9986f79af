from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MarkerRegion:
    """A generated block delimited by ``<!--{name}-start-->`` / ``<!--{name}-end-->``.

    The region spans from the first start marker to the last end marker, so
    stray markers inside generated content are swallowed on the next run.
    """

    name: str
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", re.compile(re.escape(self.start) + r".*" + re.escape(self.end), re.S))

    @property
    def start(self) -> str:
        return f"<!--{self.name}-start-->"

    @property
    def end(self) -> str:
        return f"<!--{self.name}-end-->"

    @property
    def empty(self) -> str:
        return self.start + self.end

    def has_region(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def wrap(self, inner: str, padded: bool = False) -> str:
        if padded:
            return f"{self.start}\n{inner}\n{self.end}"
        return f"{self.start}{inner}{self.end}"

    def replace(self, text: str, inner: str, padded: bool = False) -> str:
        block = self.wrap(inner, padded)
        # callable replacement: generated HTML is inserted literally
        return self.pattern.sub(lambda _m: block, text, count=1)

    def ensure_header(self, text: str) -> str:
        if self.has_region(text):
            return text
        return f"{self.empty}\n\n{text}"

    def ensure_footer(self, text: str) -> str:
        if self.has_region(text):
            return text
        return f"{text}\n\n{self.empty}"


CHALLENGES = MarkerRegion("challenges")
INFO_HEADER = MarkerRegion("info-header")
INFO_FOOTER = MarkerRegion("info-footer")
