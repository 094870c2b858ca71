# src/sitepitch/rules.py
"""Fixed rule tables used by the signal extractor.

Every keyword list and pattern the extractor matches against is declared
here, keyed by locale where the words depend on the audience's language.
"""

import re

# Heading phrases that signal "what we offer"
SERVICE_KEYWORDS = {
    "no": ("tjenester", "produkter", "vi tilbyr", "våre tjenester"),
    "en": ("services", "products", "what we offer", "our services", "we offer"),
}

# Phrases that signal a question/answer section anywhere in the markup
FAQ_KEYWORDS = {
    "no": ("faq", "ofte stilte spørsmål"),
    "en": ("faq", "frequently asked questions"),
}

# Utility classes that usually render light/muted text
MUTED_TEXT_CLASSES = (
    "text-gray-300",
    "text-gray-200",
    "text-gray-400",
    "text-slate-300",
    "text-muted",
)

STRUCTURED_DATA_TYPE = "application/ld+json"

# Text color declarations with an explicit value; background-color excluded
COLOR_DECLARATION_PATTERN = re.compile(
    r"(?<![\w-])color\s*:\s*(#[0-9a-f]{3,8}\b|rgba?\([^)]*\))",
    re.IGNORECASE,
)

WHITESPACE_PATTERN = re.compile(r"\s+")

SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)

SERVICE_HEADING_TAGS = ("h1", "h2", "h3")

NOISE_TAGS = ("script", "style")


def supported_locales() -> tuple:
    """Locales that have a complete rule table."""
    return tuple(sorted(set(SERVICE_KEYWORDS) & set(FAQ_KEYWORDS)))


def service_keywords(locale: str) -> tuple:
    return SERVICE_KEYWORDS[locale]


def faq_keywords(locale: str) -> tuple:
    return FAQ_KEYWORDS[locale]
