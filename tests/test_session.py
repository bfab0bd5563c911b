"""Tests for the analysis session."""

from unittest.mock import Mock

import pytest

from conftest import fake_client
from sentilyzer.core.constants import ErrorConstants
from sentilyzer.core.exceptions import AnalysisInProgressError, ClassificationError
from sentilyzer.core.session import AnalysisSession
from sentilyzer.services.llm import SentimentClassifier


class TestAnalysisSession:
    """Single-flight runs with wholesale replacement."""

    def setup_method(self):
        self.session = AnalysisSession()

    def test_success_replaces_results(self, sample_results):
        self.session.results = sample_results
        classifier = SentimentClassifier(
            fake_client([{"index": 0, "sentiment": "Negative", "confidence": 0.8, "keywords": ["awful"]}]),
            model="m"
        )

        results = self.session.run(["awful"], classifier)

        assert len(results) == 1
        assert self.session.results == results
        assert self.session.results[0].original_text == "awful"
        assert self.session.error is None
        assert self.session.in_flight is False

    def test_failure_keeps_previous_results(self, sample_results):
        self.session.results = sample_results
        classifier = SentimentClassifier(fake_client(error=ConnectionError("offline")), model="m")

        results = self.session.run(["hello"], classifier)

        assert results == sample_results
        assert self.session.error == ErrorConstants.GENERIC_FAILURE_MESSAGE
        assert self.session.in_flight is False

    def test_success_clears_previous_error(self, sample_results):
        self.session.error = ErrorConstants.GENERIC_FAILURE_MESSAGE
        classifier = Mock()
        classifier.classify.return_value = sample_results

        self.session.run(["a", "b", "c"], classifier)

        assert self.session.error is None
        assert self.session.results == sample_results

    def test_empty_input_is_noop(self, sample_results):
        self.session.results = sample_results
        classifier = Mock()

        assert self.session.run([], classifier) == sample_results
        classifier.classify.assert_not_called()

    def test_rejects_second_submission_while_in_flight(self):
        classifier = Mock()
        self.session.in_flight = True

        with pytest.raises(AnalysisInProgressError):
            self.session.run(["hello"], classifier)
        classifier.classify.assert_not_called()

    def test_reentrant_call_from_inside_classify(self, sample_results):
        """A submission made while the request is outstanding is refused."""
        session = self.session
        seen = []

        def classify(texts):
            with pytest.raises(AnalysisInProgressError):
                session.run(["again"], classifier)
            seen.append(texts)
            return sample_results

        classifier = Mock()
        classifier.classify.side_effect = classify

        session.run(["first"], classifier)

        assert seen == [["first"]]
        assert session.results == sample_results
        assert session.in_flight is False

    def test_unexpected_errors_propagate_and_release_guard(self):
        classifier = Mock()
        classifier.classify.side_effect = KeyError("bug")

        with pytest.raises(KeyError):
            self.session.run(["hello"], classifier)
        assert self.session.in_flight is False

    def test_classification_error_is_not_raised(self):
        classifier = Mock()
        classifier.classify.side_effect = ClassificationError("No response from AI")

        assert self.session.run(["hello"], classifier) == []
        assert self.session.error == ErrorConstants.GENERIC_FAILURE_MESSAGE
