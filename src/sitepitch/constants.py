# src/sitepitch/constants.py
"""Centralized constants for the weakness report.

This module contains the magic numbers used by the extractor, the scoring
functions and the report synthesizer. Keyword and class-name tables live in
rules.py; runtime settings live in config.py.
"""

# =============================================================================
# Text Volume Thresholds (visible characters)
# =============================================================================

# Below this the page is "very low text" (SEO and accessibility penalties)
LOW_TEXT_THRESHOLD = 1500

# Below this the page loses AI-visibility points
AI_TEXT_THRESHOLD = 3000

# Below this the discoverability finding reports the character count
DISCOVERABILITY_TEXT_THRESHOLD = 3000

# Below this the page does not "explain itself" (thin content finding)
EXPLAINS_ITSELF_THRESHOLD = 2000

# Above this the page is flagged as heavy for mobile
HEAVY_PAGE_TEXT_THRESHOLD = 8000


# =============================================================================
# Scoring
# =============================================================================

SCORE_MIN = 0
SCORE_MAX = 100

SEO_BASELINE = 100
SEO_PENALTY_NO_STRUCTURED_DATA = 20
SEO_PENALTY_LOW_TEXT = 20
SEO_PENALTY_NO_SERVICE_LANGUAGE = 20

AI_BASELINE = 70
AI_PENALTY_NO_FAQ = 20
AI_PENALTY_NO_STRUCTURED_DATA = 10
AI_PENALTY_LOW_TEXT = 10

ACCESSIBILITY_BASELINE = 75
ACCESSIBILITY_PENALTY_HIGH_CONTRAST_RISK = 20
ACCESSIBILITY_PENALTY_MEDIUM_CONTRAST_RISK = 10
ACCESSIBILITY_PENALTY_LOW_TEXT = 10

# Score label boundaries (inclusive lower bounds)
SCORE_LABEL_HIGH = 80
SCORE_LABEL_MEDIUM = 50


# =============================================================================
# Contrast Risk
# =============================================================================

# Maximum contrast examples kept on the signal set
MAX_CONTRAST_EXAMPLES = 5

# Match counts above this are "high" risk
HIGH_CONTRAST_MATCH_THRESHOLD = 5

# Contrast examples quoted verbatim in the report
REPORT_CONTRAST_EXAMPLES = 3

# Characters of the class attribute quoted in a contrast example
CLASS_SNIPPET_LENGTH = 40


# =============================================================================
# Navigation
# =============================================================================

# Fewer links than this is flagged by the navigation finding
MIN_LINK_COUNT = 5


# =============================================================================
# Main Keyword
# =============================================================================

# Words must be longer than this to count towards the main keyword
MIN_KEYWORD_WORD_LENGTH = 2

# Number of words kept for the main keyword
MAIN_KEYWORD_WORDS = 2


# =============================================================================
# Fetcher and Output Defaults
# =============================================================================

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

# Redirect hops followed before giving up
DEFAULT_MAX_REDIRECTS = 5

DEFAULT_REPORT_FILE = "SALGS-RAPPORT.txt"

DEFAULT_LOCALE = "no"

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SitePitch/1.0)"
