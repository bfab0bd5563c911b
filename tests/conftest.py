"""Shared fixtures: a stand-in for the OpenAI client."""

import json
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from sentilyzer.core.models import AnalysisResult, SentimentType


def make_completion(content):
    """Shape of an OpenAI chat completion with a single choice."""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(items=None, content=None, error=None):
    """Mock client whose chat.completions.create returns ``items`` (or raw ``content``)."""
    client = Mock()
    if error is not None:
        client.chat.completions.create.side_effect = error
    else:
        if content is None:
            content = json.dumps({"items": items or []})
        client.chat.completions.create.return_value = make_completion(content)
    return client


@pytest.fixture
def sample_results():
    return [
        AnalysisResult(id="a1", original_text="I love this!", sentiment=SentimentType.POSITIVE,
                       confidence=0.95, keywords=("love",), timestamp=1700000000000),
        AnalysisResult(id="a2", original_text="This is terrible.", sentiment=SentimentType.NEGATIVE,
                       confidence=0.90, keywords=("terrible",), timestamp=1700000000000),
        AnalysisResult(id="a3", original_text="It's fine.", sentiment=SentimentType.NEUTRAL,
                       confidence=0.60, keywords=("fine",), timestamp=1700000000000),
    ]
