from __future__ import annotations

import string
from dataclasses import dataclass, field, replace
from pathlib import Path, PurePosixPath
from typing import Any

import jsonschema
import yaml

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG
from ..locales import DEFAULT_LOCALE, Locales
from ..urls import DEFAULT_URL_TEMPLATES, TEMPLATE_FIELDS, UrlBuilder
from .schema import CONFIG_SCHEMA


@dataclass(frozen=True)
class DocsConfig:
    locales: Locales
    urls: UrlBuilder
    index_dir: str = "."
    questions_dir: str = "questions"
    quizzes: list[dict[str, Any]] = field(default_factory=list)
    source: Path | None = None


def _validate(payload: object, source: str) -> None:
    try:
        jsonschema.validate(payload, CONFIG_SCHEMA)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError(f"{source}: config validation failed at {loc}: {exc.message}", ERR_CONFIG, kind="invalid_config") from exc


def _check_template(name: str, template: str, source: str) -> None:
    try:
        fields = [parsed[1] for parsed in string.Formatter().parse(template) if parsed[1] is not None]
    except ValueError as exc:
        raise ScriptError(f"{source}: malformed url template `{name}`: {exc}", ERR_CONFIG, kind="invalid_config") from exc
    unknown = sorted({f for f in fields if f.split(".")[0].split("[")[0] not in TEMPLATE_FIELDS})
    if unknown:
        raise ScriptError(
            f"{source}: url template `{name}` uses unknown fields: {', '.join(unknown)} "
            f"(allowed: {', '.join(TEMPLATE_FIELDS)})",
            ERR_CONFIG,
            kind="invalid_config",
        )


def _check_relative(label: str, value: str, source: str) -> None:
    p = PurePosixPath(value)
    if p.is_absolute() or ".." in p.parts:
        raise ScriptError(f"{source}: {label} must be a repository-relative path: {value}", ERR_CONFIG, kind="invalid_config")


def parse_config(payload: object, source: str = "<config>") -> DocsConfig:
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ScriptError(f"{source}: config root must be a mapping", ERR_CONFIG, kind="invalid_config")
    _validate(payload, source)

    locales_raw = payload.get("locales", {})
    default = locales_raw.get("default", DEFAULT_LOCALE)
    locales = Locales.from_config(default, locales_raw.get("supported", [default]), payload.get("messages"))

    templates = {**DEFAULT_URL_TEMPLATES, **payload.get("urls", {})}
    for name, template in sorted(templates.items()):
        _check_template(name, template, source)
    urls = UrlBuilder(locales=locales, **templates)

    paths = payload.get("paths", {})
    index_dir = paths.get("index_dir", ".")
    questions_dir = paths.get("questions_dir", "questions")
    _check_relative("paths.index_dir", index_dir, source)
    _check_relative("paths.questions_dir", questions_dir, source)

    quizzes = list(payload.get("quizzes", []))
    seen: dict[int, str] = {}
    for row in quizzes:
        _check_relative(f"quiz #{row['number']} path", row["path"], source)
        if row["number"] in seen:
            raise ScriptError(
                f"{source}: duplicate quiz number {row['number']} ({seen[row['number']]}, {row['path']})",
                ERR_CONFIG,
                kind="invalid_config",
            )
        seen[row["number"]] = row["path"]

    return DocsConfig(
        locales=locales,
        urls=urls,
        index_dir=index_dir,
        questions_dir=questions_dir,
        quizzes=quizzes,
    )


def load_config(path: Path) -> DocsConfig:
    if not path.is_file():
        raise ScriptError(f"config file not found: {path}", ERR_CONFIG, kind="missing_config")
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ScriptError(f"{path}: invalid YAML: {exc}", ERR_CONFIG, kind="invalid_config") from exc
    return replace(parse_config(payload, source=str(path)), source=path)
