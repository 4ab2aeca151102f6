"""BeautifulSoup adapter for the core HtmlSelectorPort."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup


class SoupSelector:
    """Select the first element matching a CSS query and return its text."""

    def __init__(self, parser: str = "html.parser") -> None:
        self._parser = parser

    def select_first(self, html: str, selector: str) -> Optional[str]:
        soup = BeautifulSoup(html, self._parser)
        element = soup.select_one(selector)
        if element is None:
            return None
        return element.get_text()
