"""Page fetcher for the single page being reported on."""

import logging
import time
from typing import Optional
from urllib.parse import urlparse

import requests

from sitepitch.constants import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from sitepitch.exceptions import InvalidTarget, UnreachableOrTooManyRedirects
from sitepitch.models import FetchResult

logger = logging.getLogger(__name__)

# Content types whose body is analysed; anything else is dropped
TEXT_CONTENT_MARKERS = ("text/", "html", "xml")


class PageFetcher:
    """Fetches one page over HTTP(S), following a bounded number of redirects."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: int = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ):
        """Initialize the fetcher.

        Args:
            user_agent: User agent string (defaults to the SitePitch UA)
            timeout: Request timeout in seconds
            max_redirects: Redirect hops followed before giving up
        """
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout
        self.max_redirects = max_redirects

        self.session = requests.Session()
        self.session.max_redirects = max_redirects
        self.session.headers.update({
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "nb-NO,nb;q=0.9,no;q=0.8,en-US;q=0.7,en;q=0.6",
        })

    def fetch(self, url: str) -> FetchResult:
        """Fetch a URL and return its body as text.

        Args:
            url: Absolute http(s) URL

        Returns:
            FetchResult with the final body (empty for non-text responses)

        Raises:
            InvalidTarget: If the URL is not an absolute http(s) URL
            UnreachableOrTooManyRedirects: On network errors, error statuses
                or more than max_redirects hops
        """
        self._validate(url)

        start_time = time.time()
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
            response.raise_for_status()
        except requests.exceptions.TooManyRedirects:
            raise UnreachableOrTooManyRedirects(
                f"Too many redirects (more than {self.max_redirects})", target=url
            )
        except requests.exceptions.Timeout:
            raise UnreachableOrTooManyRedirects(
                f"Request timeout after {self.timeout}s", target=url
            )
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise UnreachableOrTooManyRedirects(
                f"HTTP error: {e}", target=url, status_code=status
            )
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as e:
            raise InvalidTarget(f"Invalid URL: {e}", target=url)
        except requests.exceptions.RequestException as e:
            raise UnreachableOrTooManyRedirects(f"Connection error: {e}", target=url)

        load_time = time.time() - start_time
        redirect_chain = [r.url for r in response.history]
        content_type = response.headers.get("Content-Type", "")

        if "charset=" not in content_type.lower():
            # requests falls back to ISO-8859-1 for text/* without a charset
            response.encoding = "utf-8"
        html = response.text
        if not self._is_text(content_type):
            logger.warning(
                "Ignoring non-text response from %s (Content-Type: %s)", response.url, content_type
            )
            html = ""

        logger.info(
            "Fetched %s (%d, %d redirects, %.2fs, %d chars)",
            response.url, response.status_code, len(redirect_chain), load_time, len(html),
        )

        return FetchResult(
            url=url,
            html=html,
            final_url=response.url,
            status_code=response.status_code,
            content_type=content_type,
            redirect_count=len(redirect_chain),
            redirect_chain=redirect_chain,
        )

    def close(self) -> None:
        self.session.close()

    def _validate(self, url: str) -> None:
        try:
            parsed = urlparse(url or "")
        except ValueError as e:
            raise InvalidTarget(f"Invalid URL: {e}", target=url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidTarget(f"Invalid URL: {url!r}", target=url)

    @staticmethod
    def _is_text(content_type: str) -> bool:
        if not content_type:
            return True
        lowered = content_type.lower()
        return any(marker in lowered for marker in TEXT_CONTENT_MARKERS)


def fetch_html(
    url: str,
    user_agent: Optional[str] = None,
    timeout: int = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
) -> str:
    """Fetch a page and return only its body text."""
    fetcher = PageFetcher(user_agent=user_agent, timeout=timeout, max_redirects=max_redirects)
    try:
        return fetcher.fetch(url).html
    finally:
        fetcher.close()
