"""Core modules for Sentilyzer."""

from .models import *
from .config import settings
from .exceptions import *
from .scoring import *
from .highlight import *

__all__ = [
    "settings",
    "SentimentType",
    "AnalysisResult",
    "AnalysisRequestItem",
    "BatchStats",
    "SentilyzerError",
    "ClassificationError",
    "AnalysisInProgressError",
    "compute_batch_stats",
    "sentiment_distribution",
    "HighlightSpan",
    "highlight_keywords",
]
