"""
Centralized constants for the localization orchestrator.
All magic numbers live here.
"""

# ===========================================
# QUALITY GATE
# ===========================================
REVIEW_THRESHOLD = 0.8                # results scoring below this go to human review
QUALITY_CHECK_TIMEOUT = 10.0          # seconds per sub-check
ACCURACY_MIN_LENGTH_RATIO = 0.5       # translated vs original
ACCURACY_MAX_LENGTH_RATIO = 3.0
GRAMMAR_ISSUE_PENALTY = 0.1           # per artefact found
CULTURAL_TERM_PENALTY = 0.25          # per avoided term found

# ===========================================
# PROVIDERS
# ===========================================
PROVIDER_TIMEOUT_SECONDS = 30.0       # per translate() call
PROVIDER_MAX_RETRIES = 2              # quota-exceeded retries only
PROVIDER_RETRY_BASE_DELAY = 1.0       # seconds, doubled per attempt
PROVIDER_RETRY_MAX_DELAY = 10.0
TRANSLATION_MAX_TOKENS = 4096
TRANSLATION_TEMPERATURE = 0.3

DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-20250514"
DEFAULT_OPENAI_MODEL = "gpt-4o"
DEFAULT_DEEPSEEK_MODEL = "deepseek-chat"
DEEPSEEK_BASE_URL = "https://api.deepseek.com/v1"

# ===========================================
# ROUTING / LOCALES
# ===========================================
HIGH_QUALITY_REGIONAL_LOCALES = ["de", "es", "fr", "it", "ja", "ko", "pt", "zh"]

SUPPORTED_LOCALES = [
    "ar", "de", "en", "es", "fr", "hi", "id", "it", "ja", "ko",
    "nl", "pl", "pt", "ru", "sv", "th", "tr", "vi", "zh",
]

# ===========================================
# FAN-OUT
# ===========================================
MAX_CONCURRENT_LOCALES = 8

# ===========================================
# MARKET CONFIG TABLE (built-in defaults)
# ===========================================
DEFAULT_MARKET_CONFIGS = {
    "en": {
        "currency": "USD", "currency_symbol": "$", "symbol_position": "before",
        "decimal_separator": ".", "thousands_separator": ",",
        "formality": "neutral", "style_tag": "direct",
        "holidays": ["Thanksgiving", "Independence Day"],
        "avoid_terms": ["cheap"],
    },
    "de": {
        "currency": "EUR", "currency_symbol": "€", "symbol_position": "after",
        "decimal_separator": ",", "thousands_separator": ".",
        "formality": "formal", "style_tag": "precise",
        "holidays": ["Tag der Deutschen Einheit", "Weihnachten"],
        "avoid_terms": ["billig"],
    },
    "es": {
        "currency": "EUR", "currency_symbol": "€", "symbol_position": "after",
        "decimal_separator": ",", "thousands_separator": ".",
        "formality": "informal", "style_tag": "warm",
        "holidays": ["Día de Reyes", "Navidad"],
    },
    "fr": {
        "currency": "EUR", "currency_symbol": "€", "symbol_position": "after",
        "decimal_separator": ",", "thousands_separator": " ",
        "formality": "formal", "style_tag": "elegant",
        "holidays": ["Fête nationale", "Noël"],
    },
    "it": {
        "currency": "EUR", "currency_symbol": "€", "symbol_position": "after",
        "decimal_separator": ",", "thousands_separator": ".",
        "formality": "neutral", "style_tag": "expressive",
        "holidays": ["Ferragosto", "Natale"],
    },
    "ja": {
        "currency": "JPY", "currency_symbol": "¥", "symbol_position": "before",
        "decimal_separator": ".", "thousands_separator": ",",
        "formality": "formal", "style_tag": "polite",
        "holidays": ["Golden Week", "Obon"],
    },
    "pt": {
        "currency": "BRL", "currency_symbol": "R$", "symbol_position": "before",
        "decimal_separator": ",", "thousands_separator": ".",
        "formality": "informal", "style_tag": "friendly",
        "holidays": ["Carnaval"],
    },
    "zh": {
        "currency": "CNY", "currency_symbol": "¥", "symbol_position": "before",
        "decimal_separator": ".", "thousands_separator": ",",
        "formality": "formal", "style_tag": "concise",
        "holidays": ["Spring Festival", "Mid-Autumn Festival"],
        "avoid_terms": ["送钟", "绿帽子"],
    },
}

# ===========================================
# FILES
# ===========================================
GLOSSARY_DIR = 'glossary'
ANALYTICS_DIR = 'data/analytics'
REVIEW_QUEUE_DB = 'data/review_queue.db'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/localization.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
