"""Fixed-penalty scoring for the weakness report.

Every score starts from a baseline and loses a fixed number of points per
missing signal. Results are clamped to 0-100. There is no weighting.
"""

from sitepitch.constants import (
    SCORE_MIN,
    SCORE_MAX,
    SEO_BASELINE,
    SEO_PENALTY_NO_STRUCTURED_DATA,
    SEO_PENALTY_LOW_TEXT,
    SEO_PENALTY_NO_SERVICE_LANGUAGE,
    AI_BASELINE,
    AI_PENALTY_NO_FAQ,
    AI_PENALTY_NO_STRUCTURED_DATA,
    AI_PENALTY_LOW_TEXT,
    ACCESSIBILITY_BASELINE,
    ACCESSIBILITY_PENALTY_HIGH_CONTRAST_RISK,
    ACCESSIBILITY_PENALTY_MEDIUM_CONTRAST_RISK,
    ACCESSIBILITY_PENALTY_LOW_TEXT,
    LOW_TEXT_THRESHOLD,
    AI_TEXT_THRESHOLD,
    HIGH_CONTRAST_MATCH_THRESHOLD,
    SCORE_LABEL_HIGH,
    SCORE_LABEL_MEDIUM,
)
from sitepitch.models import ContrastRisk


def clamp_score(value: int) -> int:
    """Clamp a score into the 0-100 range."""
    return max(SCORE_MIN, min(SCORE_MAX, value))


def contrast_risk_for(match_count: int) -> ContrastRisk:
    """Map the uncapped contrast match count to a risk level.

    Args:
        match_count: Total low-contrast matches, not limited by the example cap

    Returns:
        ContrastRisk level
    """
    if match_count > HIGH_CONTRAST_MATCH_THRESHOLD:
        return ContrastRisk.HIGH
    if match_count > 0:
        return ContrastRisk.MEDIUM
    return ContrastRisk.LOW


def seo_score(
    visible_text_length: int,
    has_structured_data: bool,
    has_service_language: bool,
) -> int:
    score = SEO_BASELINE
    if not has_structured_data:
        score -= SEO_PENALTY_NO_STRUCTURED_DATA
    if visible_text_length < LOW_TEXT_THRESHOLD:
        score -= SEO_PENALTY_LOW_TEXT
    if not has_service_language:
        score -= SEO_PENALTY_NO_SERVICE_LANGUAGE
    return clamp_score(score)


def ai_visibility_score(
    visible_text_length: int,
    has_faq_section: bool,
    has_structured_data: bool,
) -> int:
    score = AI_BASELINE
    if not has_faq_section:
        score -= AI_PENALTY_NO_FAQ
    if not has_structured_data:
        score -= AI_PENALTY_NO_STRUCTURED_DATA
    if visible_text_length < AI_TEXT_THRESHOLD:
        score -= AI_PENALTY_LOW_TEXT
    return clamp_score(score)


def accessibility_score(visible_text_length: int, contrast_risk: ContrastRisk) -> int:
    score = ACCESSIBILITY_BASELINE
    if contrast_risk == ContrastRisk.HIGH:
        score -= ACCESSIBILITY_PENALTY_HIGH_CONTRAST_RISK
    elif contrast_risk == ContrastRisk.MEDIUM:
        score -= ACCESSIBILITY_PENALTY_MEDIUM_CONTRAST_RISK
    if visible_text_length < LOW_TEXT_THRESHOLD:
        score -= ACCESSIBILITY_PENALTY_LOW_TEXT
    return clamp_score(score)


def score_label(score: int) -> str:
    """Classify a score as "high", "medium" or "weak"."""
    if score >= SCORE_LABEL_HIGH:
        return "high"
    if score >= SCORE_LABEL_MEDIUM:
        return "medium"
    return "weak"
