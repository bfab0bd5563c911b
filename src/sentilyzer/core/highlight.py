"""Keyword highlighting for the result detail view."""

import re
from typing import List, NamedTuple, Sequence


class HighlightSpan(NamedTuple):
    text: str
    is_keyword: bool


def _keyword_pattern(keywords: Sequence[str]):
    """Alternation of escaped keywords, longest first so short ones can't split a longer match."""
    unique = {k for k in keywords if k}
    if not unique:
        return None
    ordered = sorted(unique, key=lambda k: (-len(k), k))
    return re.compile("|".join(re.escape(k) for k in ordered), re.IGNORECASE)


def highlight_keywords(text: str, keywords: Sequence[str]) -> List[HighlightSpan]:
    """Split text into matched/unmatched spans.

    Matching is case-insensitive and literal; matched spans keep the casing
    found in ``text``. Joining every span's text gives back ``text``.
    """
    pattern = _keyword_pattern(keywords or [])
    if pattern is None:
        return [HighlightSpan(text, False)]

    spans = []
    pos = 0
    for match in pattern.finditer(text):
        if match.start() > pos:
            spans.append(HighlightSpan(text[pos:match.start()], False))
        spans.append(HighlightSpan(match.group(0), True))
        pos = match.end()
    if pos < len(text) or not spans:
        spans.append(HighlightSpan(text[pos:], False))
    return spans
