"""Reference token parsing and URL construction (core domain)."""

from __future__ import annotations

import re
from typing import List, Optional

from core.models import Category, ParsedReference

# Keys are plain word characters with an optional in-page anchor.
_KEY_PATTERN = r"\w+(?:#\w+)?"

_PREFIXES = {
    "ref": Category.REF,
    "guide": Category.GUIDE,
    "guides": Category.GUIDE,
}

# Keep URLs ASCII; keys are concatenated into the path without escaping.
# Trailing punctuation ("ref:type?") is allowed after the key but not kept.
_REFERENCE_RE = re.compile(rf"(?P<prefix>ref|guides?):(?P<key>{_KEY_PATTERN})(?![\w#])\W*", re.ASCII)

# Tokens inside free text must be bounded by the text edges or a non-word
# character; the boundary itself is not part of the token.
_TOKEN_SCAN_RE = re.compile(rf"(?<!\w)((?:ref|guides?):{_KEY_PATTERN})(?!\w)", re.ASCII)

PATH_TEMPLATES = {
    Category.REF: "/references/latest/{key}.html",
    Category.GUIDE: "/guides/{key}.html",
}


def parse_reference(token: str) -> Optional[ParsedReference]:
    """Parse a reference token such as ``ref:type`` or ``guide:introduction``.

    Punctuation trailing the key is dropped, so ``ref:type?`` parses like
    ``ref:type``. Returns ``None`` for anything that does not start with a
    known prefix followed by a valid key.
    """

    match = _REFERENCE_RE.fullmatch(token)
    if not match:
        return None
    return ParsedReference(category=_PREFIXES[match.group("prefix")], key=match.group("key"))


def find_reference_tokens(text: str) -> List[str]:
    """Return reference-looking tokens in ``text`` in order, without repeats."""

    tokens: List[str] = []
    for token in _TOKEN_SCAN_RE.findall(text):
        if token not in tokens:
            tokens.append(token)
    return tokens


def build_url(base_url: str, category: Category, key: str) -> str:
    return base_url + PATH_TEMPLATES[category].format(key=key)
