"""Report synthesis: signals to findings to report text."""

import logging
from typing import List

from sitepitch.constants import (
    DEFAULT_LOCALE,
    DISCOVERABILITY_TEXT_THRESHOLD,
    EXPLAINS_ITSELF_THRESHOLD,
    HEAVY_PAGE_TEXT_THRESHOLD,
    MIN_LINK_COUNT,
    REPORT_CONTRAST_EXAMPLES,
    SCORE_LABEL_HIGH,
)
from sitepitch.messages import get_messages
from sitepitch.models import ContrastRisk, Finding, SignalSet
from sitepitch.scoring import score_label

logger = logging.getLogger(__name__)


class ReportSynthesizer:
    """Builds the sales-oriented weakness report from a SignalSet.

    Findings are assembled in a fixed priority order and omitted when they
    have no evidence. The output is a pure function of the signals, the
    target label and the synthesizer's settings.
    """

    FINDING_ORDER = (
        "discoverability",
        "accessibility",
        "page_weight",
        "thin_content",
        "ai_visibility",
        "navigation",
    )

    def __init__(self, locale: str = DEFAULT_LOCALE, include_navigation: bool = True):
        """Initialize the synthesizer.

        Args:
            locale: Copy locale ("no" or "en")
            include_navigation: Whether the navigation clarity finding is reported

        Raises:
            ValueError: If the locale is unknown
        """
        self.messages = get_messages(locale)
        self.locale = locale
        self.include_navigation = include_navigation

    def synthesize(self, signals: SignalSet, target_label: str) -> str:
        """Render the full report text.

        Args:
            signals: Signals extracted from the page
            target_label: URL or label shown in the report

        Returns:
            Report as plain text, ending with a newline
        """
        findings = self.build_findings(signals)
        logger.debug(
            "Report for %s: %d findings (%s)",
            target_label,
            len(findings),
            ", ".join(f.key for f in findings),
        )

        sections = [
            self._render_header(signals, target_label),
            self._render_ranking(signals),
            self._render_findings(findings, target_label),
            self._render_summary(findings),
            self._render_pitch(),
        ]
        return "\n\n".join(sections) + "\n"

    def build_findings(self, signals: SignalSet) -> List[Finding]:
        """Build the findings that have evidence, in priority order."""
        evidence_builders = {
            "discoverability": self._discoverability_evidence,
            "accessibility": self._accessibility_evidence,
            "page_weight": self._page_weight_evidence,
            "thin_content": self._thin_content_evidence,
            "ai_visibility": self._ai_visibility_evidence,
            "navigation": self._navigation_evidence,
        }

        findings = []
        for key in self.FINDING_ORDER:
            if key == "navigation" and not self.include_navigation:
                continue
            evidence = evidence_builders[key](signals)
            if not evidence:
                continue
            copy = self.messages["findings"][key]
            findings.append(Finding(
                key=key,
                title=copy["title"],
                evidence=tuple(evidence),
                impacts=tuple(copy["impacts"]),
            ))
        return findings

    # -------------------------------------------------------------------------
    # Evidence
    # -------------------------------------------------------------------------

    def _discoverability_evidence(self, signals: SignalSet) -> List[str]:
        ev = self.messages["evidence"]
        bullets = []
        if not signals.has_structured_data:
            bullets.append(ev["no_schema"])
        if signals.visible_text_length < DISCOVERABILITY_TEXT_THRESHOLD:
            bullets.append(ev["low_text"].format(count=signals.visible_text_length))
        if not signals.has_service_language:
            bullets.append(ev["no_service_headings"])
        return bullets

    def _accessibility_evidence(self, signals: SignalSet) -> List[str]:
        ev = self.messages["evidence"]
        bullets = []
        if signals.contrast_risk == ContrastRisk.HIGH:
            bullets.append(ev["contrast_high"])
        elif signals.contrast_risk == ContrastRisk.MEDIUM:
            bullets.append(ev["contrast_medium"])
        if signals.contrast_risk_examples:
            bullets.append(ev["contrast_examples"])
            for example in signals.contrast_risk_examples[:REPORT_CONTRAST_EXAMPLES]:
                bullets.append(ev["contrast_example"].format(example=example))
        return bullets

    def _page_weight_evidence(self, signals: SignalSet) -> List[str]:
        if signals.visible_text_length > HEAVY_PAGE_TEXT_THRESHOLD:
            return [self.messages["evidence"]["heavy_page"]]
        return []

    def _thin_content_evidence(self, signals: SignalSet) -> List[str]:
        ev = self.messages["evidence"]
        bullets = []
        if signals.visible_text_length < EXPLAINS_ITSELF_THRESHOLD:
            bullets.append(ev["thin_text"])
        if not signals.has_service_language:
            bullets.append(ev["no_service_sections"])
        if signals.contrast_risk in (ContrastRisk.HIGH, ContrastRisk.MEDIUM):
            bullets.append(ev["contrast_readability"])
        return bullets

    def _ai_visibility_evidence(self, signals: SignalSet) -> List[str]:
        ev = self.messages["evidence"]
        bullets = []
        if not signals.has_faq_section:
            bullets.append(ev["no_faq"])
        if not signals.has_structured_data:
            bullets.append(ev["no_schema_ai"])
        return bullets

    def _navigation_evidence(self, signals: SignalSet) -> List[str]:
        ev = self.messages["evidence"]
        bullets = []
        if not signals.has_nav_landmark:
            bullets.append(ev["no_nav"])
        if signals.link_count < MIN_LINK_COUNT:
            bullets.append(ev["few_links"].format(count=signals.link_count))
        return bullets

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _label(self, score: int) -> str:
        return self.messages["score_labels"][score_label(score)]

    def _render_header(self, signals: SignalSet, target_label: str) -> str:
        header = self.messages["header"].format(
            target=target_label,
            score=signals.seo_score,
            label=self._label(signals.seo_score),
        )
        scores = self.messages["secondary_scores"].format(
            ai=signals.ai_visibility_score,
            accessibility=signals.accessibility_score,
        )
        return f"{header}\n\n{scores}"

    def _render_ranking(self, signals: SignalSet) -> str:
        """Estimated ranking table; derived from the SEO score, never measured."""
        copy = self.messages["ranking"]
        keyword = signals.main_keyword or self.messages["placeholder_keyword"]
        expected = copy["expected"][score_label(signals.seo_score)]

        lines = [copy["heading"], copy["columns"]]
        for term_template, reason in copy["rows"]:
            if reason == "local":
                reason = "local_high" if signals.seo_score >= SCORE_LABEL_HIGH else "local_weak"
            term = term_template.format(keyword=keyword)
            lines.append(f"{term}\t{expected}\t{copy['why'][reason]}")
        lines.append("")
        lines.append(copy["closing"].format(keyword=keyword))
        return "\n".join(lines)

    def _render_findings(self, findings: List[Finding], target_label: str) -> str:
        lines = [self.messages["problems_heading"].format(target=target_label)]
        if not findings:
            lines.append("")
            lines.append(self.messages["no_issues"])
            return "\n".join(lines)

        for ordinal, finding in enumerate(findings, start=1):
            lines.append("")
            lines.append(f"{ordinal}) {finding.title}")
            lines.extend(f"* {bullet}" for bullet in finding.evidence)
            lines.extend(f"→ {impact}" for impact in finding.impacts)
        return "\n".join(lines)

    def _render_summary(self, findings: List[Finding]) -> str:
        intro = self.messages["summary_intro" if findings else "summary_intro_clean"]
        lines = [self.messages["summary_heading"], intro]
        lines.extend(f"* {point}" for point in self.messages["summary_points"])
        return "\n".join(lines)

    def _render_pitch(self) -> str:
        lines = [self.messages["pitch_heading"], self.messages["pitch_intro"]]
        lines.extend(f"* {point}" for point in self.messages["pitch_points"])
        return "\n".join(lines)


def synthesize(
    signals: SignalSet,
    target_label: str,
    locale: str = DEFAULT_LOCALE,
    include_navigation: bool = True,
) -> str:
    """Render a report with a fresh synthesizer."""
    synthesizer = ReportSynthesizer(locale=locale, include_navigation=include_navigation)
    return synthesizer.synthesize(signals, target_label)
