"""Turn raw user input into the list of texts sent for classification."""

import re
from typing import List

from ..core.constants import AnalysisConstants

_LINE_BREAK = re.compile(r"\r?\n")


def normalize_text_input(text: str) -> List[str]:
    """Single text box: one trimmed item, or nothing when blank."""
    stripped = (text or "").strip()
    return [stripped] if stripped else []


def normalize_file_content(content: str, max_items: int = AnalysisConstants.MAX_BATCH_ITEMS) -> List[str]:
    """Uploaded file: one item per non-blank line, first ``max_items`` only.

    Every accepted file type (.txt, .csv, .json) is read as plain lines;
    extra lines past the cap are dropped silently.
    """
    lines = (line.strip() for line in _LINE_BREAK.split(content or ""))
    return [line for line in lines if line][:max_items]


def decode_upload(data: bytes) -> str:
    """Decode uploaded bytes as UTF-8, dropping a BOM and replacing bad bytes."""
    return data.decode("utf-8-sig", errors="replace")
