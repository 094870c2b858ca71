"""Errors raised at the system boundary.

The analysis core (extractor, scoring, report) never raises; only the
fetcher and the report writer do.
"""


class SitePitchError(Exception):
    """Base class for run failures."""

    def __init__(self, message: str, target: str = None):
        self.message = message
        self.target = target
        super().__init__(message)


class FetchError(SitePitchError):
    """The page could not be fetched."""


class InvalidTarget(FetchError):
    """The target URL cannot be parsed or is not http(s)."""


class UnreachableOrTooManyRedirects(FetchError):
    """The target did not answer, answered with an error, or redirected too often."""

    def __init__(self, message: str, target: str = None, status_code: int = None):
        self.status_code = status_code
        super().__init__(message, target=target)


class ReportWriteError(SitePitchError):
    """The report could not be persisted."""
