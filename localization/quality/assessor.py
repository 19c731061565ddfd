"""
QualityAssessor - weighted combination of concurrent quality sub-checks.

Usage:
    assessor = QualityAssessor.default(glossary, market_table)
    score = await assessor.assess("Hello", "Hallo", "en", "de")

A sub-check that raises, times out or returns a non-finite value counts
as 0 for its weight; the assessment itself never fails.
"""

import asyncio
import math
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from config.constants import QUALITY_CHECK_TIMEOUT
from config.logging_config import get_logger
from ..errors import QualityCheckError
from ..glossary import GlossaryStore
from ..market import MarketConfigTable
from .checks import (
    QualityCheck,
    GrammarCheck,
    TerminologyCheck,
    CulturalCheck,
    AccuracyCheck,
)

logger = get_logger(__name__)


# Fixed weights, must sum to 1.0
CHECK_WEIGHTS: Dict[str, float] = {
    "grammar": 0.30,
    "terminology": 0.30,
    "cultural": 0.20,
    "accuracy": 0.20,
}

assert math.isclose(sum(CHECK_WEIGHTS.values()), 1.0)


@dataclass(frozen=True)
class QualityAssessment:
    """Combined score plus per-check detail"""
    score: float
    sub_scores: Mapping[str, float] = field(default_factory=dict)
    failed_checks: Tuple[str, ...] = ()


class QualityAssessor:
    """Runs the four sub-checks concurrently and combines their scores"""

    def __init__(
        self,
        checks: Mapping[str, QualityCheck],
        check_timeout: Optional[float] = QUALITY_CHECK_TIMEOUT
    ):
        """
        Args:
            checks: One check per CHECK_WEIGHTS key
            check_timeout: Seconds before a sub-check counts as failed (None = no limit)
        """
        if set(checks) != set(CHECK_WEIGHTS):
            raise ValueError(
                f"Expected checks {sorted(CHECK_WEIGHTS)}, got {sorted(checks)}"
            )
        self.checks = dict(checks)
        self.check_timeout = check_timeout

    @classmethod
    def default(
        cls,
        glossary: GlossaryStore,
        market_table: MarketConfigTable,
        check_timeout: Optional[float] = QUALITY_CHECK_TIMEOUT
    ) -> "QualityAssessor":
        """Rule-based checks backed by the glossary and market table"""
        return cls(
            {
                "grammar": GrammarCheck(),
                "terminology": TerminologyCheck(glossary),
                "cultural": CulturalCheck(market_table),
                "accuracy": AccuracyCheck(),
            },
            check_timeout=check_timeout,
        )

    async def _run_check(
        self,
        name: str,
        original: str,
        translated: str,
        source_locale: str,
        target_locale: str
    ) -> Optional[float]:
        """Score from one check, or None when it could not complete"""
        try:
            value = await asyncio.wait_for(
                self.checks[name].run(original, translated, source_locale, target_locale),
                timeout=self.check_timeout
            )
            value = float(value)
            if not math.isfinite(value):
                raise QualityCheckError(name, f"non-finite score {value!r}")
            return min(1.0, max(0.0, value))

        except asyncio.TimeoutError:
            logger.warning(str(QualityCheckError(name, f"timed out after {self.check_timeout}s")))
        except QualityCheckError as e:
            logger.warning(str(e))
        except Exception as e:
            logger.warning(str(QualityCheckError(name, f"{type(e).__name__}: {e}")))
        return None

    async def evaluate(
        self,
        original: str,
        translated: str,
        source_locale: str,
        target_locale: str
    ) -> QualityAssessment:
        """Run all checks concurrently and combine them"""
        names = list(CHECK_WEIGHTS)
        outcomes = await asyncio.gather(*[
            self._run_check(name, original, translated, source_locale, target_locale)
            for name in names
        ])

        sub_scores = {}
        failed = []
        for name, outcome in zip(names, outcomes):
            if outcome is None:
                failed.append(name)
                sub_scores[name] = 0.0
            else:
                sub_scores[name] = outcome

        total = sum(CHECK_WEIGHTS[name] * sub_scores[name] for name in names)
        return QualityAssessment(
            score=min(1.0, max(0.0, total)),
            sub_scores=sub_scores,
            failed_checks=tuple(failed),
        )

    async def assess(
        self,
        original: str,
        translated: str,
        source_locale: str,
        target_locale: str
    ) -> float:
        """Combined score in [0, 1]"""
        assessment = await self.evaluate(original, translated, source_locale, target_locale)
        return assessment.score
