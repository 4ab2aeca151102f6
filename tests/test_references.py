from __future__ import annotations

import pytest

from core.models import Category, ParsedReference
from core.references import build_url, find_reference_tokens, parse_reference


def test_parse_ref_token() -> None:
    assert parse_reference("ref:type") == ParsedReference(category=Category.REF, key="type")


def test_parse_guide_aliases_share_category() -> None:
    expected = ParsedReference(category=Category.GUIDE, key="introduction")
    assert parse_reference("guide:introduction") == expected
    assert parse_reference("guides:introduction") == expected


def test_parse_keeps_anchor_in_key() -> None:
    parsed = parse_reference("ref:type#file")
    assert parsed is not None
    assert parsed.key == "type#file"


@pytest.mark.parametrize(
    "token, expected",
    [
        ("ref:type?", ParsedReference(category=Category.REF, key="type")),
        ("ref:type.", ParsedReference(category=Category.REF, key="type")),
        ("guide:introduction)", ParsedReference(category=Category.GUIDE, key="introduction")),
        ("ref:type#file!", ParsedReference(category=Category.REF, key="type#file")),
    ],
)
def test_parse_drops_trailing_punctuation(token: str, expected: ParsedReference) -> None:
    assert parse_reference(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "",
        "type",
        "refs:type",
        "xref:type",
        "Ref:type",
        "guidez:intro",
        " ref:type",
        "ref:",
        "guide:",
        "ref:type#",
        "ref:#anchor",
        "ref:type#a#b",
        "ref:ty-pe",
        "ref:.type",
    ],
)
def test_parse_rejects_malformed_tokens(token: str) -> None:
    assert parse_reference(token) is None


def test_find_tokens_strips_boundaries() -> None:
    text = "see (ref:type), and guide:introduction."
    assert find_reference_tokens(text) == ["ref:type", "guide:introduction"]


def test_find_tokens_requires_word_boundaries() -> None:
    assert find_reference_tokens("xref:type prefref:file") == []
    assert find_reference_tokens("ref:type") == ["ref:type"]


def test_find_tokens_adjacent_and_repeated() -> None:
    text = "ref:type ref:file ref:type guides:intro#setup"
    assert find_reference_tokens(text) == ["ref:type", "ref:file", "guides:intro#setup"]


def test_found_tokens_always_parse() -> None:
    text = "alice: ref:exec, guide:intro#x and guides:faq!"
    tokens = find_reference_tokens(text)
    assert tokens
    assert all(parse_reference(token) is not None for token in tokens)


def test_build_ref_url() -> None:
    url = build_url("http://docs.example", Category.REF, "type")
    assert url == "http://docs.example/references/latest/type.html"


def test_build_guide_url() -> None:
    url = build_url("http://docs.example", Category.GUIDE, "intro")
    assert url == "http://docs.example/guides/intro.html"


def test_build_url_does_not_escape_anchor() -> None:
    url = build_url("http://docs.example", Category.REF, "type#file")
    assert url == "http://docs.example/references/latest/type#file.html"
