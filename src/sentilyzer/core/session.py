"""In-memory analysis session shared by the UI and CLI."""

import logging
from typing import List, Optional

from .constants import ErrorConstants
from .exceptions import AnalysisInProgressError, ClassificationError
from .models import AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisSession:
    """Holds the current result set and allows one classification at a time.

    A successful run replaces the results wholesale. A failed run keeps the
    previous results and records a generic error message for display.
    """

    def __init__(self):
        self.results: List[AnalysisResult] = []
        self.error: Optional[str] = None
        self.in_flight = False

    def run(self, texts: List[str], classifier) -> List[AnalysisResult]:
        """Classify ``texts`` and swap them in as the current results."""
        if not texts:
            logger.debug("Empty input, nothing to analyze")
            return self.results

        if self.in_flight:
            raise AnalysisInProgressError("An analysis is already in progress")

        self.in_flight = True
        self.error = None
        try:
            results = classifier.classify(texts)
        except ClassificationError as e:
            logger.error(f"Analysis failed: {e}")
            self.error = ErrorConstants.GENERIC_FAILURE_MESSAGE
            return self.results
        finally:
            self.in_flight = False

        self.results = results
        logger.info(f"Analysis complete: {len(results)} results")
        return self.results
