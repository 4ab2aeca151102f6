"""Shared reply formatting helpers.

Keeping formatting here prevents drift between the passive listener and the
docsinfo command, whatever chat delivers the text.
"""

from __future__ import annotations

from core.models import ExpansionResult


def format_reply(addressee: str, token: str, result: ExpansionResult) -> str:
    """Render an expansion result as a one-line chat reply."""

    if not result.ok:
        return f"{addressee}: {result.error_message}"

    line = f"{addressee}: {token} is {result.url}"
    if result.title:
        line += f' "{result.title}"'
    return line
