"""Data models for Sentilyzer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Any


class SentimentType(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class AnalysisResult:
    """One classified text item."""
    id: str
    original_text: str
    sentiment: SentimentType
    confidence: float  # 0.0 to 1.0
    keywords: Tuple[str, ...] = ()
    timestamp: int = 0  # ms since epoch

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")
        # accept any iterable of keywords but store a tuple
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def to_dict(self) -> Dict[str, Any]:
        """Export shape, keyed the way downloaded JSON files are."""
        return {
            "id": self.id,
            "originalText": self.original_text,
            "sentiment": self.sentiment.value,
            "confidence": self.confidence,
            "keywords": list(self.keywords),
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class AnalysisRequestItem:
    """Outbound item: batch position plus text truncated for the request."""
    index: int
    text: str


@dataclass(frozen=True)
class BatchStats:
    """Summary of a result set."""
    counts: Dict[SentimentType, int] = field(default_factory=dict)
    avg_confidence: float = 0.0  # percentage, one decimal
    total: int = 0
    dominant: SentimentType = SentimentType.NEGATIVE
