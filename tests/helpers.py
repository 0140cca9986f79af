from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import yaml

ROOT = Path(__file__).resolve().parents[1]

SAMPLE_CONFIG: dict[str, object] = {
    "schema_version": 1,
    "locales": {"default": "en", "supported": ["en", "zh-CN"]},
    "messages": {
        "zh-CN": {
            "difficulty.warm": "热身",
            "badge.back": "返回",
        },
    },
    "quizzes": [
        {
            "number": 2,
            "path": "00002-medium-return-type",
            "difficulty": "medium",
            "info": {
                "en": {
                    "title": "Get Return Type",
                    "author": {"name": "Anthony Fu", "github": "antfu"},
                    "tags": ["infer", "built-in"],
                },
            },
        },
        {
            "number": 13,
            "path": "00013-warm-hello-world",
            "difficulty": "warm",
            "info": {
                "en": {"title": "Hello World", "author": {"name": "Anthony Fu", "github": "antfu"}, "tags": []},
                "zh-CN": {"title": "你好世界"},
            },
        },
        {
            "number": 3,
            "path": "00003-medium-omit",
            "difficulty": "medium",
            "info": {"en": {"title": "Omit", "tags": "union, built-in"}},
        },
        {
            "number": 4,
            "path": "00004-easy-pick",
            "difficulty": "easy",
            "info": {
                "en": {"title": "Pick", "author": {"name": "Anthony Fu", "github": "antfu"}, "tags": "union, built-in"},
            },
        },
    ],
}

INDEX_TEMPLATE = "# Challenges\n\nIntro text.\n\n<!--challenges-start-->\nstale\n<!--challenges-end-->\n\n## Footer\n"


def write_config(repo: Path, payload: dict[str, object] | None = None) -> Path:
    path = repo / "quizdocs.yaml"
    path.write_text(yaml.safe_dump(payload or SAMPLE_CONFIG, allow_unicode=True, sort_keys=False), encoding="utf-8")
    return path


def make_quiz_repo(repo: Path, payload: dict[str, object] | None = None) -> Path:
    payload = payload or SAMPLE_CONFIG
    repo.mkdir(parents=True, exist_ok=True)
    write_config(repo, payload)
    (repo / "README.md").write_text(INDEX_TEMPLATE, encoding="utf-8")
    (repo / "README.zh-CN.md").write_text(INDEX_TEMPLATE, encoding="utf-8")
    for row in payload["quizzes"]:  # type: ignore[union-attr]
        qdir = repo / "questions" / row["path"]
        qdir.mkdir(parents=True, exist_ok=True)
        (qdir / "README.md").write_text(f"Implement `{row['path']}`.\n", encoding="utf-8")
    # only one quiz is translated
    (repo / "questions/00013-warm-hello-world/README.zh-CN.md").write_text("实现它。\n", encoding="utf-8")
    return repo


def run_quizdocs(*args: str, cwd: Path) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    env.pop("CI", None)
    env.pop("QUIZDOCS_CONFIG", None)
    env.setdefault("QUIZDOCS_RUN_ID", "pytest-run")
    return subprocess.run(
        [sys.executable, "-m", "quizdocs", *args],
        cwd=cwd,
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )
