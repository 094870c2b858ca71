"""Heuristic weakness report for a single web page."""

__version__ = "0.1.0"

from sitepitch.extractor import SignalExtractor, extract
from sitepitch.report import ReportSynthesizer, synthesize
from sitepitch.fetcher import PageFetcher, fetch_html
from sitepitch.output import ReportWriter
from sitepitch.models import (
    ContrastRisk,
    SignalSet,
    Finding,
    FetchResult,
)
from sitepitch.exceptions import (
    SitePitchError,
    FetchError,
    InvalidTarget,
    UnreachableOrTooManyRedirects,
    ReportWriteError,
)
from sitepitch.config import Config

__all__ = [
    # Core
    "SignalExtractor",
    "ReportSynthesizer",
    "extract",
    "synthesize",
    # Collaborators
    "PageFetcher",
    "fetch_html",
    "ReportWriter",
    # Models
    "ContrastRisk",
    "SignalSet",
    "Finding",
    "FetchResult",
    # Errors
    "SitePitchError",
    "FetchError",
    "InvalidTarget",
    "UnreachableOrTooManyRedirects",
    "ReportWriteError",
    "Config",
]
