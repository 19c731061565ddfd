"""
Translation Quality Module

Scores a translation on four independent dimensions and combines them:
  - grammar (0.30)
  - terminology (0.30)
  - cultural appropriateness (0.20)
  - technical/semantic accuracy (0.20)

Results below the review threshold are escalated to human review by the
orchestrator.
"""

from localization.quality.assessor import (
    QualityAssessor,
    QualityAssessment,
    CHECK_WEIGHTS,
)
from localization.quality.checks import (
    QualityCheck,
    GrammarCheck,
    TerminologyCheck,
    CulturalCheck,
    AccuracyCheck,
)

__all__ = [
    'QualityAssessor',
    'QualityAssessment',
    'CHECK_WEIGHTS',
    'QualityCheck',
    'GrammarCheck',
    'TerminologyCheck',
    'CulturalCheck',
    'AccuracyCheck',
]
