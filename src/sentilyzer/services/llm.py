"""LLM service for OpenAI sentiment classification."""

import json
import logging
import time
import uuid
from textwrap import dedent
from typing import Any, Dict, List, Optional

import openai
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tenacity import retry, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import AnalysisConstants, PromptConstants
from ..core.exceptions import ClassificationError
from ..core.models import AnalysisRequestItem, AnalysisResult, SentimentType

logger = logging.getLogger(__name__)

CLASSIFY_PROMPT = dedent("""
Analyze the sentiment of the following texts.
For each text, determine if it is Positive, Negative, or Neutral.
Provide a confidence score (0.0 to 1.0).
Extract key words or phrases that strongly influence the sentiment.

Input Texts:
{items}
""").strip()

# Strict structured-output schema sent with every request
SENTIMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "index": {
                        "type": "integer",
                        "description": "The index of the text in the input array",
                    },
                    "sentiment": {
                        "type": "string",
                        "enum": [s.value for s in SentimentType],
                        "description": "The classified sentiment of the text",
                    },
                    "confidence": {
                        "type": "number",
                        "description": "A score between 0.0 and 1.0 indicating confidence in the prediction",
                    },
                    "keywords": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": (
                            f"List of {AnalysisConstants.MIN_KEYWORDS}-{AnalysisConstants.MAX_KEYWORDS} "
                            "specific words or short phrases from the text that drove the sentiment decision"
                        ),
                    },
                },
                "required": ["index", "sentiment", "confidence", "keywords"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["items"],
    "additionalProperties": False,
}


class SentimentItem(BaseModel):
    """One classified item as returned by the model."""
    model_config = ConfigDict(strict=True)

    index: int
    sentiment: SentimentType
    confidence: float = Field(ge=0.0, le=1.0)
    keywords: List[str]


class SentimentBatch(BaseModel):
    """Top-level structured response."""
    model_config = ConfigDict(strict=True)

    items: List[SentimentItem]


def build_request_items(texts: List[str]) -> List[AnalysisRequestItem]:
    """Pair each text with its batch index, truncated for the request only."""
    limit = AnalysisConstants.MAX_REQUEST_TEXT_LENGTH
    return [AnalysisRequestItem(index=i, text=text[:limit]) for i, text in enumerate(texts)]


def build_prompt(items: List[AnalysisRequestItem]) -> str:
    payload = json.dumps([{"index": item.index, "text": item.text} for item in items], ensure_ascii=False)
    return CLASSIFY_PROMPT.format(items=payload)


def parse_sentiment_response(content: Optional[str]) -> SentimentBatch:
    """Validate the raw response text; any schema violation rejects the batch."""
    if not content:
        raise ClassificationError("No response from AI")
    try:
        return SentimentBatch.model_validate_json(content)
    except ValidationError as e:
        raise ClassificationError(f"Malformed classification response: {e}") from e


def to_results(batch: SentimentBatch, texts: List[str], timestamp: Optional[int] = None) -> List[AnalysisResult]:
    """Map validated items back onto the untruncated input texts."""
    if timestamp is None:
        timestamp = int(time.time() * 1000)

    results = []
    for item in batch.items:
        if 0 <= item.index < len(texts):
            original_text = texts[item.index]
        else:
            logger.warning(f"Response index {item.index} out of range for {len(texts)} inputs")
            original_text = ""
        results.append(AnalysisResult(
            id=str(uuid.uuid4()),
            original_text=original_text,
            sentiment=item.sentiment,
            confidence=item.confidence,
            keywords=item.keywords,
            timestamp=timestamp,
        ))
    return results


class SentimentClassifier:
    """Batch sentiment classifier backed by an injected OpenAI client."""

    def __init__(self, client, model: Optional[str] = None, request_timeout: Optional[float] = None):
        self.client = client
        self.model = model or settings.openai_model
        self.request_timeout = request_timeout
        logger.info(f"Sentiment classifier initialized with model {self.model}")

    @retry(
        stop=stop_after_attempt(max(1, settings.max_retries)),
        wait=wait_exponential(multiplier=1, max=10),
        reraise=True
    )
    def _complete(self, prompt: str) -> Optional[str]:
        """Single structured-output chat completion."""
        kwargs = {}
        if self.request_timeout is not None:
            kwargs["timeout"] = self.request_timeout

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": PromptConstants.SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt}
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": PromptConstants.SCHEMA_NAME,
                    "strict": True,
                    "schema": SENTIMENT_SCHEMA,
                },
            },
            temperature=AnalysisConstants.LLM_TEMPERATURE,
            max_completion_tokens=AnalysisConstants.LLM_MAX_TOKENS,
            **kwargs
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    def classify(self, texts: List[str]) -> List[AnalysisResult]:
        """Classify a batch of texts in one request.

        Raises ClassificationError when the call fails or the response does
        not validate; no partial results are returned.
        """
        if not texts:
            return []

        items = build_request_items(texts)
        logger.info(f"Classifying {len(items)} texts with {self.model}")

        try:
            content = self._complete(build_prompt(items))
        except Exception as e:
            logger.error(f"Sentiment classification request failed: {e}")
            raise ClassificationError(f"Classification request failed: {e}") from e

        try:
            batch = parse_sentiment_response(content)
        except ClassificationError as e:
            logger.error(f"Sentiment classification response rejected: {e}")
            raise

        if len(batch.items) != len(texts):
            logger.warning(f"Expected {len(texts)} classified items, got {len(batch.items)}")

        return to_results(batch, texts)


class LLMServiceFactory:
    """Factory for creating LLM services."""

    @staticmethod
    def create(client=None) -> SentimentClassifier:
        """Create a classifier, building an OpenAI client from settings when none is given."""
        if client is None:
            if not settings.effective_openai_key:
                logger.warning("No OpenAI API key configured; classification requests will fail")
            client = openai.OpenAI(api_key=settings.effective_openai_key)
        return SentimentClassifier(
            client,
            model=settings.openai_model,
            request_timeout=settings.request_timeout
        )
