"""Title extraction from fetched documentation pages (core domain)."""

from __future__ import annotations

import logging
import re
from typing import Optional

from core.models import Category
from core.ports import HtmlSelectorPort

LOGGER = logging.getLogger(__name__)

_ASCII_WHITESPACE = " \t\n\r\f\v"

TITLE_SELECTORS = {
    Category.REF: "h1",
    Category.GUIDE: "h1",
}


def normalize_title(text: str) -> str:
    """Flatten element text onto one line with single spaces."""

    flattened = text.replace("\n", " ")
    # ASCII whitespace only; a non-breaking space in a heading stays as typed.
    return re.sub(r"\s+", " ", flattened, flags=re.ASCII).strip(_ASCII_WHITESPACE)


class TitleExtractor:
    """Pick a short human-readable title out of a page body."""

    def __init__(self, selector: HtmlSelectorPort) -> None:
        self._selector = selector

    def extract(self, html: str, category: Category) -> Optional[str]:
        css_query = TITLE_SELECTORS[category]
        text = self._selector.select_first(html, css_query)
        if text is None:
            LOGGER.warning("Didn't find '%s' in page", css_query)
            return None
        title = normalize_title(text)
        if not title:
            LOGGER.warning("'%s' matched but has no text", css_query)
            return None
        LOGGER.debug("Found '%s' with '%s'", title, css_query)
        return title
