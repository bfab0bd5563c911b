"""Sentilyzer - batch LLM sentiment analysis."""

__version__ = "1.0.0"
__author__ = "Sentilyzer Team"

from .core.models import *
from .core.config import settings
from .core.session import AnalysisSession
from .services.llm import LLMServiceFactory, SentimentClassifier

__all__ = [
    "settings",
    "AnalysisSession",
    "LLMServiceFactory",
    "SentimentClassifier",
]
