"""Tests for the Streamlit input flow."""

from pathlib import Path
from unittest.mock import patch

from streamlit.testing.v1 import AppTest

import sentilyzer.ui
from conftest import fake_client
from sentilyzer.services.llm import LLMServiceFactory, SentimentClassifier

APP_PATH = str(Path(sentilyzer.ui.__file__).parent / "streamlit_app.py")


class TestAnalyzeTextButton:
    """The text tab submits on the first click."""

    def setup_method(self):
        self.classifier = SentimentClassifier(
            fake_client([{"index": 0, "sentiment": "Positive", "confidence": 0.95, "keywords": ["love"]}]),
            model="m"
        )

    def _app(self):
        return AppTest.from_file(APP_PATH, default_timeout=30)

    def test_button_enabled_before_text_is_committed(self):
        with patch.object(LLMServiceFactory, "create", return_value=self.classifier):
            at = self._app().run()

        assert not at.exception
        assert at.button(key="analyze_text").disabled is False

    def test_single_click_analyzes_typed_text(self):
        with patch.object(LLMServiceFactory, "create", return_value=self.classifier):
            at = self._app().run()
            at.text_area(key="input_text").input("I love this!")
            at.button(key="analyze_text").click().run()

        assert not at.exception
        results = at.session_state["analysis"].results
        assert [r.original_text for r in results] == ["I love this!"]
        assert self.classifier.client.chat.completions.create.call_count == 1

    def test_click_with_blank_text_is_noop(self):
        with patch.object(LLMServiceFactory, "create", return_value=self.classifier):
            at = self._app().run()
            at.button(key="analyze_text").click().run()

        assert not at.exception
        assert len(at.error) == 0
        assert at.session_state["analysis"].results == []
        self.classifier.client.chat.completions.create.assert_not_called()
