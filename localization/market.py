#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Market adaptation - currency layout, formality register, style and holidays.

MarketConfigTable holds the read-only per-locale parameters. MarketLocalizer
applies them to translated text as a pure, deterministic transform.

Usage:
    table = MarketConfigTable.from_defaults()
    localizer = MarketLocalizer(table)
    localized = localizer.localize("Only $1,299.00 this week", "de")
    # localized.content == "Only 1.299,00 $ this week"
    # localized.adaptations includes "formality:formal" and "style:precise"
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from config.constants import DEFAULT_MARKET_CONFIGS
from config.logging_config import get_logger

logger = get_logger(__name__)


# Symbol-first amounts in either the source layout (1,299.00) or a market
# layout (1.299,00 / 12 500). Never stops inside a longer number.
CURRENCY_PATTERN = re.compile(
    r'(?P<symbol>R\$|US\$|[$€£¥])\s?'
    r'(?P<amount>\d{1,3}(?:[.,\u00a0 ]\d{3})+(?:[.,]\d+)?|\d+(?:[.,]\d+)?)'
    r'(?![.,]?\d)'
)

SPACE_SEPARATORS = {" ", "\u00a0"}


@dataclass(frozen=True)
class MarketConfig:
    """Market parameters for one locale"""
    locale: str
    currency: str
    currency_symbol: str
    symbol_position: str = "before"  # before | after
    decimal_separator: str = "."
    thousands_separator: str = ","
    formality: str = "neutral"  # formal | informal | neutral
    style_tag: str = "neutral"
    holidays: Tuple[str, ...] = ()
    avoid_terms: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, locale: str, data: Mapping) -> "MarketConfig":
        return cls(
            locale=locale,
            currency=data["currency"],
            currency_symbol=data.get("currency_symbol", data["currency"]),
            symbol_position=data.get("symbol_position", "before"),
            decimal_separator=data.get("decimal_separator", "."),
            thousands_separator=data.get("thousands_separator", ","),
            formality=data.get("formality", "neutral"),
            style_tag=data.get("style_tag", "neutral"),
            holidays=tuple(data.get("holidays", ())),
            avoid_terms=tuple(data.get("avoid_terms", ())),
        )


class MarketConfigTable:
    """Read-only lookup of MarketConfig by locale"""

    def __init__(self, configs: Mapping[str, MarketConfig]):
        self._configs = MappingProxyType(dict(configs))

    @classmethod
    def from_defaults(cls, overrides_file: Optional[Path] = None) -> "MarketConfigTable":
        """Built-in table, optionally merged with a JSON file keyed by locale"""
        raw: Dict[str, dict] = {locale: dict(data) for locale, data in DEFAULT_MARKET_CONFIGS.items()}

        if overrides_file:
            overrides = json.loads(Path(overrides_file).read_text(encoding="utf-8"))
            for locale, data in overrides.items():
                raw.setdefault(locale, {}).update(data)
            logger.info(f"Loaded market overrides for {len(overrides)} locales from {Path(overrides_file).name}")

        return cls({locale: MarketConfig.from_dict(locale, data) for locale, data in raw.items()})

    def get(self, locale: str) -> Optional[MarketConfig]:
        return self._configs.get(locale)

    def __contains__(self, locale: str) -> bool:
        return locale in self._configs


@dataclass(frozen=True)
class LocalizedContent:
    """Market-adapted content plus a record of what changed"""
    content: str
    adaptations: Tuple[str, ...] = ()


class MarketLocalizer:
    """Applies MarketConfig to translated content"""

    def __init__(self, table: MarketConfigTable):
        self.table = table

    def register_for(self, target_locale: str) -> Optional[str]:
        """
        Formality register the provider should write in.

        Pronoun and verb agreement can't be patched after translation, so the
        register is requested up front and only recorded here.
        """
        config = self.table.get(target_locale)
        if config is None or config.formality == "neutral":
            return None
        return config.formality

    def localize(self, content: str, target_locale: str) -> LocalizedContent:
        """
        Adapt translated content to the target market.

        Locales without a market entry pass through unchanged.
        """
        config = self.table.get(target_locale)
        if config is None:
            return LocalizedContent(content=content)

        adaptations: List[str] = []

        content, amounts = self._format_currency(content, config)
        if amounts:
            adaptations.append(f"currency:{amounts} amount(s) formatted for {config.currency}")

        register = self.register_for(target_locale)
        if register:
            adaptations.append(f"formality:{register}")

        adaptations.append(f"style:{config.style_tag}")

        for holiday in config.holidays:
            if holiday.lower() in content.lower():
                adaptations.append(f"holiday:{holiday}")

        return LocalizedContent(content=content, adaptations=tuple(adaptations))

    @staticmethod
    def parse_amount(amount: str, config: MarketConfig) -> Optional[Tuple[str, Optional[str]]]:
        """
        Split a matched amount into (integer digits, fraction digits).

        A lone separator followed by exactly three digits is read as a
        thousands separator. Returns None when the layout is inconsistent.
        """
        separators = [(i, ch) for i, ch in enumerate(amount) if not ch.isdigit()]
        if not separators:
            return amount, None

        chars = {ch for _, ch in separators}
        last_index, last_char = separators[-1]
        tail = amount[last_index + 1:]

        if len(chars) == 1 and separators[0][0] <= 3 and (len(tail) == 3 or last_char not in ".,"):
            grouping, decimal_index = last_char, None
        else:
            grouping = {ch for _, ch in separators[:-1]}
            if len(grouping) > 1 or last_char in grouping or last_char not in ".,":
                return None
            grouping, decimal_index = next(iter(grouping), None), last_index

        if grouping in SPACE_SEPARATORS and config.thousands_separator not in SPACE_SEPARATORS:
            return None

        if decimal_index is None:
            return amount.replace(grouping, ""), None
        int_part = amount[:decimal_index]
        if grouping:
            int_part = int_part.replace(grouping, "")
        return int_part, tail

    @staticmethod
    def _format_number(int_part: str, frac: Optional[str], config: MarketConfig) -> str:
        grouped = f"{int(int_part):,}".replace(",", config.thousands_separator)
        if frac is None:
            return grouped
        return f"{grouped}{config.decimal_separator}{frac}"

    def _format_currency(self, content: str, config: MarketConfig) -> Tuple[str, int]:
        changed = 0

        def replace(match: re.Match) -> str:
            nonlocal changed
            parsed = self.parse_amount(match.group("amount"), config)
            if parsed is None:
                return match.group(0)

            number = self._format_number(parsed[0], parsed[1], config)
            symbol = match.group("symbol")
            if config.symbol_position == "after":
                formatted = f"{number} {symbol}"
            else:
                formatted = f"{symbol}{number}"
            if formatted != match.group(0):
                changed += 1
            return formatted

        return CURRENCY_PATTERN.sub(replace, content), changed
