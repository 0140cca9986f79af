from __future__ import annotations

from ..model import DIFFICULTY_RANK

_LOCALE = {"type": "string", "pattern": r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$"}

_AUTHOR = {
    "type": "object",
    "properties": {
        "name": {"type": ["string", "null"]},
        "github": {"type": ["string", "null"]},
    },
}

_INFO = {
    "type": "object",
    "properties": {
        "title": {"type": ["string", "null"]},
        "author": _AUTHOR,
        "tags": {
            "oneOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
                {"type": "null"},
            ]
        },
    },
}

CONFIG_SCHEMA: dict[str, object] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "quizdocs project configuration",
    "type": "object",
    "additionalProperties": False,
    "required": ["quizzes"],
    "properties": {
        "schema_version": {"const": 1},
        "locales": {
            "type": "object",
            "additionalProperties": False,
            "required": ["default"],
            "properties": {
                "default": _LOCALE,
                "supported": {"type": "array", "items": _LOCALE, "minItems": 1, "uniqueItems": True},
            },
        },
        "messages": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "additionalProperties": {"type": "string"},
            },
        },
        "urls": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "play": {"type": "string", "minLength": 1},
                "readme": {"type": "string", "minLength": 1},
                "solutions": {"type": "string", "minLength": 1},
                "share": {"type": "string", "minLength": 1},
            },
        },
        "paths": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "index_dir": {"type": "string", "minLength": 1},
                "questions_dir": {"type": "string", "minLength": 1},
            },
        },
        "quizzes": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["number", "path", "difficulty"],
                "additionalProperties": False,
                "properties": {
                    "number": {"type": "integer", "minimum": 0},
                    "path": {"type": "string", "minLength": 1},
                    "difficulty": {"enum": list(DIFFICULTY_RANK)},
                    "info": {"type": "object", "additionalProperties": _INFO},
                },
            },
        },
    },
}
