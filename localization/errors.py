"""
Error taxonomy for the localization pipeline.

Only ValidationError reaches the caller. ProviderError is captured per
locale and QualityCheckError degrades a single sub-check to 0.
"""

from typing import List, Optional

from translators.base import ProviderError, ErrorKind


class LocalizationError(Exception):
    """Base class for pipeline errors"""


class ValidationError(LocalizationError):
    """Malformed request; raised before any provider work starts"""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems = problems or [message]
        super().__init__(message)


class QualityCheckError(LocalizationError):
    """A quality sub-check could not produce a score"""

    def __init__(self, check_name: str, reason: str):
        self.check_name = check_name
        self.reason = reason
        super().__init__(f"Quality check '{check_name}' failed: {reason}")


__all__ = [
    "LocalizationError",
    "ValidationError",
    "QualityCheckError",
    "ProviderError",
    "ErrorKind",
]
