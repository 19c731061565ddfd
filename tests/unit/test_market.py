"""
Unit tests for localization/market.py - MarketLocalizer
"""
import json
import pytest

from localization.market import MarketConfigTable, MarketLocalizer


@pytest.fixture
def localizer(market_table):
    return MarketLocalizer(market_table)


class TestCurrencyFormatting:
    """Test currency amount layout per market."""

    def test_german_layout(self, localizer):
        localized = localizer.localize("Nur $1,299.00 diese Woche", "de")
        assert localized.content == "Nur 1.299,00 $ diese Woche"
        assert "currency:1 amount(s) formatted for EUR" in localized.adaptations

    def test_french_thousands_separator(self, localizer):
        localized = localizer.localize("Prix : €12,500", "fr")
        assert localized.content == "Prix : 12 500 €"

    def test_english_layout_unchanged(self, localizer):
        localized = localizer.localize("Only $1,299.00 today", "en")
        assert localized.content == "Only $1,299.00 today"
        assert not any(a.startswith("currency:") for a in localized.adaptations)

    def test_trailing_sentence_comma(self, localizer):
        localized = localizer.localize("Es kostet $5, nicht mehr", "de")
        assert localized.content == "Es kostet 5 $, nicht mehr"

    def test_plain_numbers_untouched(self, localizer):
        localized = localizer.localize("Version 2,000 wurde 1.5 mal geladen", "de")
        assert localized.content == "Version 2,000 wurde 1.5 mal geladen"

    def test_market_layout_amount_kept_whole(self, localizer):
        localized = localizer.localize("Nur €1.299,00 diese Woche", "de")
        assert localized.content == "Nur 1.299,00 € diese Woche"

    @pytest.mark.parametrize("text, expected", [
        ("Ab €1.299 im Monat", "Ab 1.299 € im Monat"),
        ("Nur $9.99 heute", "Nur 9,99 $ heute"),
        ("Total €1.299.000,50", "Total 1.299.000,50 €"),
        ("Kosten $1299.00", "Kosten 1.299,00 $"),
    ])
    def test_german_amount_layouts(self, localizer, text, expected):
        assert localizer.localize(text, "de").content == expected

    def test_french_spaced_groups(self, localizer):
        localized = localizer.localize("Prix : €12 500,50", "fr")
        assert localized.content == "Prix : 12 500,50 €"

    def test_spaced_groups_ignored_outside_spaced_markets(self, localizer):
        localized = localizer.localize("Only $20 100 times", "en")
        assert localized.content == "Only $20 100 times"

    def test_inconsistent_layout_left_alone(self, localizer):
        localized = localizer.localize("Preis €1,299,00", "de")
        assert localized.content == "Preis €1,299,00"
        assert not any(a.startswith("currency:") for a in localized.adaptations)

    def test_localizing_twice_is_stable(self, localizer):
        once = localizer.localize("Nur $1,299.00 diese Woche", "de").content
        assert localizer.localize(once, "de").content == once


class TestFormalityAndStyle:
    """Test register, style tag and holidays."""

    @pytest.mark.parametrize("text, locale", [
        ("Kannst du das sehen?", "de"),
        ("Du bist bereit.", "de"),
        ("Tu es prêt ?", "fr"),
    ])
    def test_register_never_rewrites_text(self, localizer, text, locale):
        localized = localizer.localize(text, locale)
        assert localized.content == text
        assert "formality:formal" in localized.adaptations

    def test_register_for(self, localizer):
        assert localizer.register_for("de") == "formal"
        assert localizer.register_for("es") == "informal"
        assert localizer.register_for("en") is None
        assert localizer.register_for("vi") is None

    def test_style_tag_recorded(self, localizer):
        localized = localizer.localize("Hola", "es")
        assert localized.adaptations == ("formality:informal", "style:warm")

    def test_neutral_market_records_no_register(self, localizer):
        localized = localizer.localize("Ciao", "it")
        assert localized.adaptations == ("style:expressive",)

    def test_holiday_reference_recorded(self, localizer):
        localized = localizer.localize("Angebote zu Weihnachten", "de")
        assert "holiday:Weihnachten" in localized.adaptations

    def test_unknown_market_passes_through(self, localizer):
        localized = localizer.localize("Xin chào $5", "vi")
        assert localized.content == "Xin chào $5"
        assert localized.adaptations == ()

    def test_deterministic(self, localizer):
        text = "Du zahlst $1,000.50 zu Weihnachten"
        assert localizer.localize(text, "de") == localizer.localize(text, "de")


class TestMarketConfigTable:
    """Test table construction."""

    def test_defaults_present(self, market_table):
        assert "de" in market_table
        assert market_table.get("ja").currency == "JPY"

    def test_overrides_file(self, tmp_path):
        overrides = tmp_path / "markets.json"
        overrides.write_text(json.dumps({
            "de": {"style_tag": "playful"},
            "vi": {"currency": "VND", "currency_symbol": "₫", "symbol_position": "after"},
        }), encoding="utf-8")

        table = MarketConfigTable.from_defaults(overrides)

        assert table.get("de").style_tag == "playful"
        assert table.get("de").currency == "EUR"
        assert table.get("vi").currency == "VND"
