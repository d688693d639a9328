"""
Data quality error classifications for calculation inputs.

These exceptions categorize bad inputs handed to the engine by its
callers: amounts that cannot be read as numbers and dates that cannot be
parsed.
"""

from typing import Any, Dict, Optional


class DataQualityError(Exception):
    """Base class for input issues that callers can handle gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Date or timestamp input that cannot be interpreted."""

    def __init__(self, message: str, raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
