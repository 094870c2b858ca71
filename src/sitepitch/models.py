"""Data models for the weakness report."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional


class ContrastRisk(str, Enum):
    """Heuristic estimate of low text/background contrast."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class SignalSet:
    """Signals derived from one page's markup.

    Created once per run by the extractor and read by the synthesizer.
    """

    visible_text_length: int = 0
    has_service_language: bool = False
    has_faq_section: bool = False
    has_structured_data: bool = False
    contrast_risk_examples: tuple[str, ...] = ()
    contrast_match_count: int = 0  # Uncapped; examples stop at 5
    contrast_risk: ContrastRisk = ContrastRisk.LOW
    link_count: int = 0
    has_nav_landmark: bool = False
    main_keyword: str = ""

    # Derived scores (0-100)
    seo_score: int = 0
    ai_visibility_score: int = 0
    accessibility_score: int = 0

    def to_dict(self) -> dict:
        """Convert to a JSON-serialisable dictionary."""
        data = asdict(self)
        data["contrast_risk_examples"] = list(self.contrast_risk_examples)
        data["contrast_risk"] = self.contrast_risk.value
        return data


@dataclass(frozen=True)
class Finding:
    """One reported problem with its evidence and business impact."""

    key: str
    title: str
    evidence: tuple[str, ...] = ()
    impacts: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "title": self.title,
            "evidence": list(self.evidence),
            "impacts": list(self.impacts),
        }


@dataclass
class FetchResult:
    """Result of fetching a single page."""

    url: str
    html: str = ""
    final_url: Optional[str] = None
    status_code: int = 200
    content_type: str = ""
    redirect_count: int = 0
    redirect_chain: list[str] = field(default_factory=list)
