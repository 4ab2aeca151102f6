from __future__ import annotations

from typing import Optional

import pytest

from adapters.html_selector import SoupSelector
from core.models import Category
from core.titles import TitleExtractor, normalize_title


class FakeSelector:
    def __init__(self, text: Optional[str]) -> None:
        self._text = text
        self.queries: list[str] = []

    def select_first(self, html: str, selector: str) -> Optional[str]:
        self.queries.append(selector)
        return self._text


def test_normalize_title_flattens_whitespace() -> None:
    assert normalize_title("A\nB   C") == "A B C"
    assert normalize_title("  \n Resource Type:\n\tfile \n") == "Resource Type: file"


def test_normalize_title_only_collapses_ascii_whitespace() -> None:
    assert normalize_title("Type\xa0Reference") == "Type\xa0Reference"
    assert normalize_title(" \xa0Type \n Reference ") == "\xa0Type Reference"


@pytest.mark.parametrize(
    "text",
    ["", "   ", "A\nB   C", "\t\tx\r\n y ", "already clean", "a  b", "\xa0 x \xa0", "a\xa0\xa0b"],
)
def test_normalize_title_is_idempotent(text: str) -> None:
    once = normalize_title(text)
    assert normalize_title(once) == once


def test_extract_uses_h1_for_both_categories() -> None:
    selector = FakeSelector("Title")
    extractor = TitleExtractor(selector)
    assert extractor.extract("<html></html>", Category.REF) == "Title"
    assert extractor.extract("<html></html>", Category.GUIDE) == "Title"
    assert selector.queries == ["h1", "h1"]


def test_extract_missing_element_returns_none() -> None:
    extractor = TitleExtractor(FakeSelector(None))
    assert extractor.extract("<html></html>", Category.REF) is None


def test_extract_blank_element_returns_none() -> None:
    extractor = TitleExtractor(FakeSelector(" \n "))
    assert extractor.extract("<h1> </h1>", Category.GUIDE) is None


def test_soup_selector_picks_first_match_in_document_order() -> None:
    html = "<html><body><h1>Type\n  Reference</h1><h1>Second</h1></body></html>"
    extractor = TitleExtractor(SoupSelector())
    assert extractor.extract(html, Category.REF) == "Type Reference"


def test_soup_selector_returns_nested_text() -> None:
    html = "<h1><a name='x'></a>File <code>resource</code></h1>"
    assert SoupSelector().select_first(html, "h1") == "File resource"


def test_soup_selector_no_match() -> None:
    assert SoupSelector().select_first("<p>nothing here</p>", "h1") is None
