"""Index and per-quiz README generation."""
from .build import BuildReport, build
from .index import render_challenges, update_index_readme
from .info import insert_info_readme, render_info_footer, render_info_header
from .outcome import FileOutcome

__all__ = [
    "BuildReport",
    "FileOutcome",
    "build",
    "insert_info_readme",
    "render_challenges",
    "render_info_footer",
    "render_info_header",
    "update_index_readme",
]
