# insights/errors.py


class InsightError(Exception):
    """
    Base class for errors raised while verifying an insight.
    """


class InsufficientDataError(InsightError):
    """
    Raised when a stock lacks the data an insight needs, e.g. a history
    shorter than the inspected window.
    """
