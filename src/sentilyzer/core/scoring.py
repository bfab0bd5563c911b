"""Aggregate statistics over a batch of analysis results."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Dict, Any, Iterable

from .models import AnalysisResult, BatchStats, SentimentType
from .constants import UIConstants

logger = logging.getLogger(__name__)

# Chart order: positive first, negative last
DISTRIBUTION_ORDER = [SentimentType.POSITIVE, SentimentType.NEUTRAL, SentimentType.NEGATIVE]


def round_half_up(value: float, places: int) -> Decimal:
    """Round the exact binary value of a float, ties away from zero (JS toFixed)."""
    return Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _dominant(counts: Dict[SentimentType, int]) -> SentimentType:
    """Positive only when it strictly outnumbers Negative; Neutral never wins."""
    if counts[SentimentType.POSITIVE] > counts[SentimentType.NEGATIVE]:
        return SentimentType.POSITIVE
    return SentimentType.NEGATIVE


def compute_batch_stats(results: Iterable[AnalysisResult]) -> BatchStats:
    """Compute per-sentiment counts, average confidence and dominant sentiment."""
    counts = {sentiment: 0 for sentiment in SentimentType}
    total_confidence = 0.0
    total = 0

    for result in results:
        counts[result.sentiment] += 1
        total_confidence += result.confidence
        total += 1

    avg_confidence = float(round_half_up(total_confidence / total * 100, 1)) if total else 0.0
    logger.debug(f"Aggregated {total} results, avg confidence {avg_confidence}%")

    return BatchStats(
        counts=counts,
        avg_confidence=avg_confidence,
        total=total,
        dominant=_dominant(counts),
    )


def sentiment_distribution(stats: BatchStats) -> List[Dict[str, Any]]:
    """Rows for the distribution chart, skipping sentiments with no items."""
    rows = []
    for sentiment in DISTRIBUTION_ORDER:
        value = stats.counts.get(sentiment, 0)
        if value > 0:
            rows.append({
                "name": sentiment.value,
                "value": value,
                "color": UIConstants.SENTIMENT_COLORS[sentiment.value],
            })
    return rows
