"""
Unit tests for Quality sub-checks

Tests the rule-based scoring dimensions:
- Grammar artefacts
- Terminology adherence
- Cultural appropriateness
- Accuracy (length ratio, numbers, placeholders)
"""

import pytest

from localization.quality.checks import (
    GrammarCheck,
    TerminologyCheck,
    CulturalCheck,
    AccuracyCheck,
)


class TestGrammarCheck:
    """Test translation artefact detection"""

    @pytest.mark.asyncio
    async def test_clean_text(self):
        score = await GrammarCheck().run("Hello world.", "Hallo Welt.", "en", "de")
        assert score == 1.0

    @pytest.mark.asyncio
    async def test_spacing_artefacts(self):
        score = await GrammarCheck().run("Hello world.", "Hallo  Welt .", "en", "de")
        assert score == pytest.approx(0.8)

    @pytest.mark.asyncio
    async def test_french_spaced_punctuation_allowed(self):
        check = GrammarCheck()
        assert await check.run("Hello!", "Bonjour !", "en", "fr") == 1.0
        assert await check.run("Hello!", "Hallo !", "en", "de") == pytest.approx(0.9)

    @pytest.mark.asyncio
    async def test_repeated_word(self):
        score = await GrammarCheck().run("the cat", "le le chat", "en", "fr")
        assert score == pytest.approx(0.9)

    def test_unbalanced_brackets(self):
        issues = GrammarCheck().find_issues("Siehe (Anhang", "de")
        assert issues == {"unbalanced_brackets": 1}

    @pytest.mark.asyncio
    async def test_empty_translation(self):
        assert await GrammarCheck().run("Hello", "   ", "en", "de") == 0.0


class TestTerminologyCheck:
    """Test glossary adherence scoring"""

    @pytest.mark.asyncio
    async def test_terms_respected(self, glossary):
        score = await TerminologyCheck(glossary).run(
            "Pay the invoice", "Zahlen Sie die Rechnung", "en", "de"
        )
        assert score == 1.0

    @pytest.mark.asyncio
    async def test_term_missing(self, glossary):
        score = await TerminologyCheck(glossary).run(
            "Pay the invoice", "Zahlen Sie die Faktura", "en", "de"
        )
        assert score == 0.0


class TestCulturalCheck:
    """Test avoided-term detection"""

    @pytest.mark.asyncio
    async def test_avoided_term(self, market_table):
        score = await CulturalCheck(market_table).run("It is cheap", "Das ist billig", "en", "de")
        assert score == pytest.approx(0.75)

    @pytest.mark.asyncio
    async def test_clean_text(self, market_table):
        score = await CulturalCheck(market_table).run("Affordable", "Preiswert", "en", "de")
        assert score == 1.0

    @pytest.mark.asyncio
    async def test_unknown_market(self, market_table):
        score = await CulturalCheck(market_table).run("cheap", "billig", "en", "vi")
        assert score == 1.0


class TestAccuracyCheck:
    """Test length ratio and preservation scoring"""

    @pytest.mark.asyncio
    async def test_everything_preserved(self):
        score = await AccuracyCheck().run(
            "Order 3 items for {name}", "Bestellen Sie 3 Artikel für {name}", "en", "de"
        )
        assert score == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_placeholder_dropped(self):
        score = await AccuracyCheck().run(
            "Order 3 items for {name}", "Bestellen Sie 3 Artikel für Kunden", "en", "de"
        )
        assert score == pytest.approx(0.7)

    @pytest.mark.asyncio
    async def test_number_changed(self):
        score = await AccuracyCheck().run(
            "Order 3 items today", "Bestellen Sie 4 Artikel heute", "en", "de"
        )
        assert score == pytest.approx(0.7)

    @pytest.mark.asyncio
    async def test_length_out_of_bounds(self):
        score = await AccuracyCheck().run(
            "Hi", "Hallo, wie geht es Ihnen heute, lieber Freund?", "en", "de"
        )
        assert score == pytest.approx(0.6)

    def test_compact_scripts_allow_short_output(self):
        check = AccuracyCheck()
        assert check.length_ok("Hello world, welcome", "你好世界，欢迎", "en", "zh")
        assert not check.length_ok("Hello world, welcome", "你好世界，欢迎", "en", "de")
