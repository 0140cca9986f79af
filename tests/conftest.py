from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from quizdocs.config import DocsConfig, load_config
from quizdocs.core.context import RunContext

from helpers import make_quiz_repo

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / "artifacts/quizdocs/.hypothesis/examples"
settings.register_profile("quizdocs", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("quizdocs")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def quiz_repo(tmp_path: Path) -> Path:
    return make_quiz_repo(tmp_path / "repo")


@pytest.fixture
def ctx(quiz_repo: Path) -> RunContext:
    return RunContext.from_args("pytest-run", str(quiz_repo), None, quiet=True)


@pytest.fixture
def config(ctx: RunContext) -> DocsConfig:
    return load_config(ctx.config_path)
