"""Signal extraction from raw page markup.

Turns one page of HTML into a SignalSet. The extractor is total: malformed
or empty markup yields false/zero/empty signals, never an exception.
"""

import logging
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from sitepitch.constants import (
    CLASS_SNIPPET_LENGTH,
    DEFAULT_LOCALE,
    MAIN_KEYWORD_WORDS,
    MAX_CONTRAST_EXAMPLES,
    MIN_KEYWORD_WORD_LENGTH,
)
from sitepitch.messages import get_messages
from sitepitch.models import SignalSet
from sitepitch.rules import (
    COLOR_DECLARATION_PATTERN,
    MUTED_TEXT_CLASSES,
    NOISE_TAGS,
    SCHEME_PATTERN,
    SERVICE_HEADING_TAGS,
    STRUCTURED_DATA_TYPE,
    WHITESPACE_PATTERN,
    faq_keywords,
    service_keywords,
)
from sitepitch import scoring

logger = logging.getLogger(__name__)


def _collapse(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def _is_json_ld(type_value: Optional[str]) -> bool:
    return bool(type_value) and type_value.strip().lower() == STRUCTURED_DATA_TYPE


class SignalExtractor:
    """Extracts heuristic signals from a single page."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        """Initialize the extractor.

        Args:
            locale: Rule table and copy locale ("no" or "en")

        Raises:
            ValueError: If the locale has no rule table
        """
        self.messages = get_messages(locale)
        self.locale = locale
        self.service_keywords = service_keywords(locale)
        self.faq_keywords = faq_keywords(locale)

    def extract(self, markup: str, target_label: str) -> SignalSet:
        """Extract the signal set for one page.

        Args:
            markup: Raw HTML as fetched
            target_label: URL or other label identifying the page

        Returns:
            SignalSet with signals and derived scores
        """
        soup = self._parse(markup or "", target_label)

        # Structured data and contrast are read before noise removal:
        # JSON-LD lives in <script>, color declarations may live in <style>.
        has_structured_data = self._has_structured_data(soup)
        contrast_examples, contrast_count = self._find_contrast_examples(soup)

        for tag in soup.find_all(list(NOISE_TAGS)):
            tag.decompose()

        visible_text_length = len(_collapse(soup.get_text(" ")))
        headings_text = " ".join(
            h.get_text(" ") for h in soup.find_all(list(SERVICE_HEADING_TAGS))
        ).lower()
        has_service_language = any(kw in headings_text for kw in self.service_keywords)
        has_faq_section = self._has_faq(soup)
        link_count = len(soup.find_all("a", href=True))
        has_nav_landmark = (
            soup.find("nav") is not None
            or soup.find(attrs={"role": "navigation"}) is not None
        )
        main_keyword = self._guess_main_keyword(soup, target_label)

        contrast_risk = scoring.contrast_risk_for(contrast_count)

        signals = SignalSet(
            visible_text_length=visible_text_length,
            has_service_language=has_service_language,
            has_faq_section=has_faq_section,
            has_structured_data=has_structured_data,
            contrast_risk_examples=tuple(contrast_examples),
            contrast_match_count=contrast_count,
            contrast_risk=contrast_risk,
            link_count=link_count,
            has_nav_landmark=has_nav_landmark,
            main_keyword=main_keyword,
            seo_score=scoring.seo_score(
                visible_text_length, has_structured_data, has_service_language
            ),
            ai_visibility_score=scoring.ai_visibility_score(
                visible_text_length, has_faq_section, has_structured_data
            ),
            accessibility_score=scoring.accessibility_score(
                visible_text_length, contrast_risk
            ),
        )

        logger.debug(
            "Signals for %s: text=%d service=%s faq=%s schema=%s contrast=%s (%d) links=%d nav=%s",
            target_label,
            signals.visible_text_length,
            signals.has_service_language,
            signals.has_faq_section,
            signals.has_structured_data,
            signals.contrast_risk.value,
            signals.contrast_match_count,
            signals.link_count,
            signals.has_nav_landmark,
        )
        return signals

    def _parse(self, markup: str, target_label: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(markup, "html.parser")
        except ParserRejectedMarkup as e:
            # html.parser gives up on some broken <! declarations; escape them and retry
            logger.warning("Markup for %s rejected by parser (%s), retrying without declarations", target_label, e)
            return BeautifulSoup(markup.replace("<!", "&lt;!"), "html.parser")

    def _has_structured_data(self, soup: BeautifulSoup) -> bool:
        return soup.find("script", attrs={"type": _is_json_ld}) is not None

    def _has_faq(self, soup: BeautifulSoup) -> bool:
        lowered = str(soup).lower()
        if any(kw in lowered for kw in self.faq_keywords):
            return True
        return any(d.find("summary") is not None for d in soup.find_all("details"))

    def _find_contrast_examples(self, soup: BeautifulSoup) -> Tuple[List[str], int]:
        """Collect low-contrast indicators in scan order.

        Class tokens are scanned first, then inline style attributes, then
        <style> blocks. The example list stops at MAX_CONTRAST_EXAMPLES but
        every match is counted.

        Returns:
            Tuple of (example descriptions, total match count)
        """
        examples = []
        count = 0

        for tag in soup.find_all(class_=True):
            classes = tag.get("class")
            class_attr = " ".join(classes) if isinstance(classes, list) else str(classes)
            token = self._first_muted_token(class_attr)
            if token is None:
                continue
            count += 1
            if len(examples) < MAX_CONTRAST_EXAMPLES:
                examples.append(self.messages["contrast_class"].format(
                    token=token,
                    snippet=class_attr[:CLASS_SNIPPET_LENGTH],
                ))

        declarations = [tag["style"] for tag in soup.find_all(style=True)]
        declarations.extend(block.get_text() for block in soup.find_all("style"))
        for declaration in declarations:
            for match in COLOR_DECLARATION_PATTERN.finditer(declaration):
                count += 1
                if len(examples) < MAX_CONTRAST_EXAMPLES:
                    examples.append(
                        self.messages["contrast_color"].format(value=match.group(1))
                    )

        return examples, count

    def _first_muted_token(self, class_attr: str) -> Optional[str]:
        lowered = class_attr.lower()
        hits = [
            (lowered.find(token), token)
            for token in MUTED_TEXT_CLASSES
            if token in lowered
        ]
        if not hits:
            return None
        return min(hits)[1]

    def _guess_main_keyword(self, soup: BeautifulSoup, target_label: str) -> str:
        """Best-effort display label for the page subject."""
        source = ""
        h1 = soup.find("h1")
        if h1 is not None:
            source = _collapse(h1.get_text(" "))
        if not source:
            title = soup.find("title")
            if title is not None:
                source = _collapse(title.get_text(" "))
        if not source:
            source = SCHEME_PATTERN.sub("", target_label or "").split("/")[0]

        words = [w for w in _collapse(source).split(" ") if len(w) > MIN_KEYWORD_WORD_LENGTH]
        if not words:
            return self.messages["placeholder_keyword"]
        return " ".join(words[:MAIN_KEYWORD_WORDS])


def extract(markup: str, target_label: str, locale: str = DEFAULT_LOCALE) -> SignalSet:
    """Extract signals from markup with a fresh extractor."""
    return SignalExtractor(locale=locale).extract(markup, target_label)
