from __future__ import annotations

import copy
from pathlib import Path

import pytest

from quizdocs.config import load_config
from quizdocs.config.loader import parse_config
from quizdocs.errors import ScriptError
from quizdocs.exit_codes import ERR_CONFIG

from helpers import SAMPLE_CONFIG, write_config


def _payload(**overrides: object) -> dict[str, object]:
    payload = copy.deepcopy(SAMPLE_CONFIG)
    payload.update(overrides)
    return payload


def test_load_sample_config(tmp_path: Path) -> None:
    config = load_config(write_config(tmp_path))
    assert config.source == tmp_path / "quizdocs.yaml"
    assert config.locales.default == "en"
    assert config.locales.supported == ("en", "zh-CN")
    assert config.locales.t("zh-CN", "badge.back") == "返回"
    assert config.index_dir == "."
    assert config.questions_dir == "questions"
    assert [row["number"] for row in config.quizzes] == [2, 13, 3, 4]


def test_minimal_config_uses_defaults() -> None:
    config = parse_config({"quizzes": []})
    assert config.locales.supported == ("en",)
    assert config.urls.to_play(1, "en") == "https://tsch.js.org/1/play"


def test_unknown_difficulty_is_rejected_with_location() -> None:
    payload = _payload(quizzes=[{"number": 1, "path": "00001-x", "difficulty": "impossible"}])
    with pytest.raises(ScriptError) as err:
        parse_config(payload, source="quizdocs.yaml")
    assert err.value.code == ERR_CONFIG
    assert "quizzes/0/difficulty" in str(err.value)


def test_unknown_top_level_key_is_rejected() -> None:
    with pytest.raises(ScriptError, match="config validation failed"):
        parse_config(_payload(extras=True))


def test_unknown_url_template_field_is_rejected() -> None:
    with pytest.raises(ScriptError, match="unknown fields: slug"):
        parse_config(_payload(urls={"play": "https://example.com/{slug}"}))


def test_malformed_url_template_is_rejected() -> None:
    with pytest.raises(ScriptError, match="malformed url template `share`"):
        parse_config(_payload(urls={"share": "https://example.com/{no"}))


def test_duplicate_quiz_numbers_are_rejected() -> None:
    rows = [
        {"number": 1, "path": "00001-a", "difficulty": "easy"},
        {"number": 1, "path": "00001-b", "difficulty": "hard"},
    ]
    with pytest.raises(ScriptError, match="duplicate quiz number 1"):
        parse_config(_payload(quizzes=rows))


@pytest.mark.parametrize("bad", ["../outside", "/abs/path"])
def test_paths_must_stay_inside_repository(bad: str) -> None:
    with pytest.raises(ScriptError, match="repository-relative"):
        parse_config(_payload(paths={"questions_dir": bad}))
    with pytest.raises(ScriptError, match="repository-relative"):
        parse_config(_payload(quizzes=[{"number": 1, "path": bad, "difficulty": "easy"}]))


def test_missing_and_malformed_files(tmp_path: Path) -> None:
    with pytest.raises(ScriptError, match="config file not found") as err:
        load_config(tmp_path / "nope.yaml")
    assert err.value.kind == "missing_config"
    bad = tmp_path / "quizdocs.yaml"
    bad.write_text("quizzes: [\n", encoding="utf-8")
    with pytest.raises(ScriptError, match="invalid YAML"):
        load_config(bad)


def test_empty_file_fails_on_required_quizzes(tmp_path: Path) -> None:
    empty = tmp_path / "quizdocs.yaml"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(ScriptError, match="'quizzes' is a required property"):
        load_config(empty)


@pytest.mark.parametrize("root", [["quizzes"], "quizzes: []", 3])
def test_non_mapping_root_is_rejected(root: object) -> None:
    with pytest.raises(ScriptError, match="config root must be a mapping") as err:
        parse_config(root, source="quizdocs.yaml")
    assert err.value.kind == "invalid_config"
