"""Services for Sentilyzer."""

from .llm import LLMServiceFactory, SentimentClassifier

__all__ = [
    "LLMServiceFactory",
    "SentimentClassifier",
]
