"""Exceptions raised by Sentilyzer."""


class SentilyzerError(Exception):
    """Base class for Sentilyzer errors."""


class ClassificationError(SentilyzerError):
    """The external classification call failed or returned an unusable payload.

    Always fails the whole batch; callers never receive partial results.
    """


class AnalysisInProgressError(SentilyzerError):
    """A second analysis was submitted while one is still outstanding."""
