"""
Request validation - runs before any provider work.
"""

from typing import Iterable, List

from .errors import ValidationError
from .models import TranslationRequest


def validate_request(request: TranslationRequest, supported_locales: Iterable[str]) -> None:
    """
    Reject malformed requests as a whole.

    Raises:
        ValidationError: listing every problem found
    """
    supported = set(supported_locales)
    problems: List[str] = []

    if not isinstance(request.source_text, str) or not request.source_text.strip():
        problems.append("source_text is empty")

    if not request.source_locale:
        problems.append("source_locale is empty")
    elif request.source_locale not in supported:
        problems.append(f"unsupported source locale: {request.source_locale}")

    if not request.target_locales:
        problems.append("target_locales is empty")
    else:
        unsupported = sorted(loc for loc in request.target_locales if loc not in supported)
        if unsupported:
            problems.append("unsupported target locale(s): " + ", ".join(unsupported))

    if problems:
        raise ValidationError("; ".join(problems), problems=problems)
