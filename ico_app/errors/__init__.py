"""
Error classification system for the calculation engine.

Input problems (malformed numbers, unparseable dates) are data quality
errors raised by the core; configuration problems are system failures
raised by the config layer. Display helpers catch data quality errors
and degrade to placeholders.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
