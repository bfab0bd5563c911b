"""Data preparation for export."""

import json
import time
from typing import List, Optional

from ..core.constants import ExportConstants
from ..core.models import AnalysisResult
from ..core.scoring import round_half_up


def _quote(value: str) -> str:
    """Quote a CSV field, doubling embedded quotes."""
    return '"' + value.replace('"', '""') + '"'


def results_to_csv(results: List[AnalysisResult]) -> str:
    """Render results as CSV text, header row first."""
    lines = [",".join(ExportConstants.CSV_HEADERS)]
    for result in results:
        lines.append(",".join([
            _quote(result.original_text),
            result.sentiment.value,
            str(round_half_up(result.confidence, 2)),
            _quote(", ".join(result.keywords)),
        ]))
    return "\n".join(lines)


def results_to_json(results: List[AnalysisResult]) -> str:
    """Render the full result list, ids and timestamps included, as pretty JSON."""
    return json.dumps([result.to_dict() for result in results], indent=2, ensure_ascii=False)


def export_filename(extension: str, now_ms: Optional[int] = None) -> str:
    """Download name such as ``sentiment_analysis_1700000000000.csv``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{ExportConstants.FILENAME_PREFIX}_{now_ms}.{extension}"


def write_export(content: str, filename: str) -> None:
    """Write an export blob to disk."""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(content)
