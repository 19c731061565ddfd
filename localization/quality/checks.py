"""
Quality sub-checks

Each check scores one dimension of a translation in [0, 1]:
- GrammarCheck: translation artefacts in the target text
- TerminologyCheck: glossary adherence
- CulturalCheck: terms the target market avoids
- AccuracyCheck: length ratio, numbers and placeholders vs. the original

Checks are rule-based and cheap; the async signature lets remote
(LLM-backed) reviewers be dropped in behind the same interface.
"""

import re
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List

from config.constants import (
    ACCURACY_MIN_LENGTH_RATIO,
    ACCURACY_MAX_LENGTH_RATIO,
    GRAMMAR_ISSUE_PENALTY,
    CULTURAL_TERM_PENALTY,
)
from ..glossary import GlossaryStore
from ..market import MarketConfigTable


# Scripts that need far fewer characters than Latin text
COMPACT_SCRIPT_LOCALES = {"ja", "ko", "zh"}

# French typography puts a space before these
SPACED_PUNCT_LOCALES = {"fr"}

PLACEHOLDER_PATTERN = re.compile(r'\{\{\s*\w+\s*\}\}|\{\w+\}|%[sd]|%\(\w+\)[sd]')
NUMBER_PATTERN = re.compile(r'\d+')


class QualityCheck(ABC):
    """One independent scoring dimension"""

    name: str = ""

    @abstractmethod
    async def run(
        self,
        original: str,
        translated: str,
        source_locale: str,
        target_locale: str
    ) -> float:
        """Return a score in [0, 1]"""
        pass


class GrammarCheck(QualityCheck):
    """Penalise common translation artefacts"""

    name = "grammar"

    def __init__(self, penalty: float = GRAMMAR_ISSUE_PENALTY):
        self.penalty = penalty
        self.patterns = {
            'multiple_spaces': re.compile(r'[^\S\n]{2,}'),
            'space_before_punct': re.compile(r' +[,.]'),
            'no_space_after_punct': re.compile(r'[a-z][.!?][A-Z][a-z]'),
            'repeated_word': re.compile(r'\b(\w+)\s+\1\b', re.IGNORECASE),
        }
        self.spaced_punct = re.compile(r' +[!?;:]')

    def find_issues(self, translated: str, target_locale: str) -> Dict[str, int]:
        issues = {}
        for issue_name, pattern in self.patterns.items():
            matches = pattern.findall(translated)
            if matches:
                issues[issue_name] = len(matches)

        if target_locale not in SPACED_PUNCT_LOCALES:
            matches = self.spaced_punct.findall(translated)
            if matches:
                issues['space_before_punct'] = issues.get('space_before_punct', 0) + len(matches)

        for opening, closing in (("(", ")"), ("[", "]"), ("{", "}")):
            if translated.count(opening) != translated.count(closing):
                issues['unbalanced_brackets'] = issues.get('unbalanced_brackets', 0) + 1

        if translated.count('"') % 2:
            issues['unbalanced_quotes'] = 1

        return issues

    async def run(self, original, translated, source_locale, target_locale) -> float:
        if not translated.strip():
            return 0.0
        issues = self.find_issues(translated, target_locale)
        return max(0.0, 1.0 - self.penalty * sum(issues.values()))


class TerminologyCheck(QualityCheck):
    """Preferred glossary terms must appear in the translation"""

    name = "terminology"

    def __init__(self, glossary: GlossaryStore):
        self.glossary = glossary

    async def run(self, original, translated, source_locale, target_locale) -> float:
        score, _ = self.glossary.validate_translation(
            original, translated, source_locale, target_locale
        )
        return score


class CulturalCheck(QualityCheck):
    """Penalise terms the target market avoids"""

    name = "cultural"

    def __init__(self, market_table: MarketConfigTable, penalty: float = CULTURAL_TERM_PENALTY):
        self.market_table = market_table
        self.penalty = penalty

    def find_terms(self, translated: str, target_locale: str) -> List[str]:
        config = self.market_table.get(target_locale)
        if config is None:
            return []
        lowered = translated.lower()
        return [term for term in config.avoid_terms if term.lower() in lowered]

    async def run(self, original, translated, source_locale, target_locale) -> float:
        hits = self.find_terms(translated, target_locale)
        return max(0.0, 1.0 - self.penalty * len(hits))


class AccuracyCheck(QualityCheck):
    """Length ratio plus preservation of numbers and placeholders"""

    name = "accuracy"

    # Share of the score per component
    LENGTH_WEIGHT = 0.4
    NUMBERS_WEIGHT = 0.3
    PLACEHOLDERS_WEIGHT = 0.3

    def __init__(
        self,
        min_ratio: float = ACCURACY_MIN_LENGTH_RATIO,
        max_ratio: float = ACCURACY_MAX_LENGTH_RATIO
    ):
        self.min_ratio = min_ratio
        self.max_ratio = max_ratio

    def length_ok(self, original: str, translated: str, source_locale: str, target_locale: str) -> bool:
        if not original:
            return not translated
        ratio = len(translated) / len(original)

        min_ratio, max_ratio = self.min_ratio, self.max_ratio
        if target_locale in COMPACT_SCRIPT_LOCALES and source_locale not in COMPACT_SCRIPT_LOCALES:
            min_ratio = min_ratio / 3
        elif source_locale in COMPACT_SCRIPT_LOCALES and target_locale not in COMPACT_SCRIPT_LOCALES:
            max_ratio = max_ratio * 3
        return min_ratio <= ratio <= max_ratio

    @staticmethod
    def preserved_share(pattern: re.Pattern, original: str, translated: str) -> float:
        expected = Counter(pattern.findall(original))
        if not expected:
            return 1.0
        found = Counter(pattern.findall(translated))
        kept = sum(min(count, found[token]) for token, count in expected.items())
        return kept / sum(expected.values())

    async def run(self, original, translated, source_locale, target_locale) -> float:
        length = 1.0 if self.length_ok(original, translated, source_locale, target_locale) else 0.0
        numbers = self.preserved_share(NUMBER_PATTERN, original, translated)
        placeholders = self.preserved_share(PLACEHOLDER_PATTERN, original, translated)
        return (
            self.LENGTH_WEIGHT * length
            + self.NUMBERS_WEIGHT * numbers
            + self.PLACEHOLDERS_WEIGHT * placeholders
        )
