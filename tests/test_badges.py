from __future__ import annotations

import html

import pytest
from hypothesis import given
from hypothesis import strategies as st

from quizdocs.locales import Locales
from quizdocs.model import Author
from quizdocs.render import (
    author_info,
    badge,
    badge_link,
    badge_url,
    difficulty_badge,
    difficulty_badge_inverted,
    escape_html,
)


def test_escape_html_replaces_ampersand_first() -> None:
    assert escape_html("a & <b> \"c\" 'd'") == "a &amp; &lt;b&gt; &quot;c&quot; &#039;d&#039;"
    assert escape_html("&lt;") == "&amp;lt;"


@given(st.text())
def test_escape_html_output_is_attribute_safe(raw: str) -> None:
    escaped = escape_html(raw)
    assert not set("<>\"'").intersection(escaped)
    assert html.unescape(escaped) == raw


def test_badge_url_doubles_dashes_and_encodes_components() -> None:
    assert badge_url("", "warm-up", "teal") == "https://img.shields.io/badge/-warm--up-teal"
    assert badge_url("warm-up", " ", "teal") == "https://img.shields.io/badge/warm--up-%20-teal"
    assert (
        badge_url("", "#13・Hello World", "teal")
        == "https://img.shields.io/badge/-%2313%E3%83%BBHello%20World-teal"
    )


def test_badge_url_keeps_uri_component_unreserved_characters() -> None:
    assert badge_url("", "a_b.c!d~e*f'g(h)", "999") == "https://img.shields.io/badge/-a_b.c!d~e*f'g(h)-999"
    assert badge_url("", "a/b?c", "999") == "https://img.shields.io/badge/-a%2Fb%3Fc-999"


def test_badge_url_appends_args_verbatim() -> None:
    url = badge_url("", "Take the Challenge", "3178c6", "?logo=typescript")
    assert url == "https://img.shields.io/badge/-Take%20the%20Challenge-3178c6?logo=typescript"


def test_badge_and_badge_link_markup() -> None:
    assert badge("", "Back", "grey") == '<img src="https://img.shields.io/badge/-Back-grey" alt="Back"/>'
    assert badge_link("../../README.md", "", "Back", "grey") == (
        '<a href="../../README.md" target="_blank">'
        '<img src="https://img.shields.io/badge/-Back-grey" alt="Back"/></a> '
    )


def test_badge_alt_text_is_emitted_verbatim() -> None:
    assert "alt=\"#9・Don't <T>\"" in badge("", "#9・Don't <T>", "999")


@pytest.mark.parametrize(
    ("author", "expected"),
    [
        (Author("Anthony Fu", "antfu"), 'by Anthony Fu <a href="https://github.com/antfu" target="_blank">@antfu</a>'),
        (Author("Anthony Fu", None), "by Anthony Fu"),
        (Author(None, None), "by "),
        (None, "by "),
        (Author("A & B", None), "by A & B"),
        (Author("<T>", "t"), 'by <T> <a href="https://github.com/t" target="_blank">@t</a>'),
    ],
)
def test_author_info(author: Author | None, expected: str) -> None:
    assert author_info(author) == expected


def test_difficulty_badges_use_locale_strings_and_colors() -> None:
    locales = Locales.from_config("en", ["en", "zh-CN"], {"zh-CN": {"difficulty.warm": "热身"}})
    assert difficulty_badge(locales, "easy", "en") == '<img src="https://img.shields.io/badge/-easy-90bb12" alt="easy"/>'
    assert difficulty_badge_inverted(locales, "extreme", "en") == (
        '<img src="https://img.shields.io/badge/extreme-%20-b11b8d" alt=" "/>'
    )
    assert "badge/-%E7%83%AD%E8%BA%AB-teal" in difficulty_badge(locales, "warm", "zh-CN")
    # untranslated keys fall back to the default locale
    assert "badge/-medium-eaa648" in difficulty_badge(locales, "medium", "zh-CN")


def test_difficulty_badge_rejects_unknown_difficulty() -> None:
    with pytest.raises(ValueError, match="unknown difficulty"):
        difficulty_badge(Locales(), "impossible", "en")
