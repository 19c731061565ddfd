#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
GlossaryStore - Preferred terminology per locale pair
"""

import re
import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from config.logging_config import get_logger

logger = get_logger(__name__)


class GlossaryStore:
    """
    Read-only term mappings keyed by (source_locale, target_locale, term).

    Files live in glossary_dir as "<src>-<tgt>.json":
        {"domain": "...", "terms": {"term": "preferred translation"}}
    """

    def __init__(self, glossary_dir: Optional[Path] = None):
        self.glossary_dir = Path(glossary_dir) if glossary_dir else None
        self._terms: Dict[Tuple[str, str], Dict[str, str]] = {}

        if self.glossary_dir and self.glossary_dir.is_dir():
            for path in sorted(self.glossary_dir.glob("*-*.json")):
                self.load_glossary(path)

    @classmethod
    def from_dict(cls, data: Mapping[Tuple[str, str], Mapping[str, str]]) -> "GlossaryStore":
        """Build an in-memory store: {(src, tgt): {term: preferred}}"""
        store = cls()
        for (source_locale, target_locale), terms in data.items():
            for term, preferred in terms.items():
                store.add_term(source_locale, target_locale, term, preferred)
        return store

    def load_glossary(self, path: Path):
        """Load one locale-pair glossary from JSON"""
        source_locale, _, target_locale = Path(path).stem.partition("-")
        if not source_locale or not target_locale:
            logger.warning(f"Skipping glossary with unexpected name: {path}")
            return

        data = json.loads(Path(path).read_text(encoding="utf-8"))
        terms = data.get("terms", {})
        for term, preferred in terms.items():
            self.add_term(source_locale, target_locale, term, preferred)

        logger.info(f"Loaded {len(terms)} terms from {Path(path).name}")

    def add_term(self, source_locale: str, target_locale: str, term: str, preferred: str):
        """Add or update a term"""
        self._terms.setdefault((source_locale, target_locale), {})[term] = preferred

    def terms_for(self, source_locale: str, target_locale: str) -> Mapping[str, str]:
        """Read-only view of the terms for one locale pair"""
        return MappingProxyType(dict(self._terms.get((source_locale, target_locale), {})))

    def lookup(self, source_locale: str, target_locale: str, term: str) -> Optional[str]:
        return self._terms.get((source_locale, target_locale), {}).get(term)

    def applicable_terms(self, source: str, source_locale: str, target_locale: str) -> Dict[str, str]:
        """Terms that actually occur in the source text"""
        found = {}
        for term, preferred in self._terms.get((source_locale, target_locale), {}).items():
            if re.search(r'\b' + re.escape(term) + r'\b', source, re.IGNORECASE):
                found[term] = preferred
        return found

    def validate_translation(
        self,
        source: str,
        translated: str,
        source_locale: str,
        target_locale: str
    ) -> Tuple[float, List[str]]:
        """Share of applicable terms rendered with their preferred translation"""
        expected = self.applicable_terms(source, source_locale, target_locale)
        if not expected:
            return 1.0, []

        warnings = []
        for term, preferred in expected.items():
            if preferred.lower() not in translated.lower():
                warnings.append(f"Missing term: {term} → {preferred}")

        hits = len(expected) - len(warnings)
        return hits / len(expected), warnings

    def get_term_count(self) -> int:
        """Get number of terms across all locale pairs"""
        return sum(len(terms) for terms in self._terms.values())
