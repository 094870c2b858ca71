"""Tests for the page fetcher."""

import pytest
import requests
from unittest.mock import Mock, patch

from sitepitch.fetcher import PageFetcher, fetch_html
from sitepitch.extractor import extract
from sitepitch.exceptions import InvalidTarget, UnreachableOrTooManyRedirects
from sitepitch.models import FetchResult


def make_response(text="<html><body>Hei</body></html>", content_type="text/html; charset=utf-8",
                  url="https://example.com/", history=None, status_code=200):
    response = Mock()
    response.text = text
    response.headers = {"Content-Type": content_type}
    response.url = url
    response.history = history or []
    response.status_code = status_code
    response.raise_for_status.return_value = None
    return response


class TestPageFetcher:
    """Test cases for PageFetcher."""

    @pytest.fixture
    def fetcher(self):
        return PageFetcher(user_agent="TestBot/1.0", timeout=5, max_redirects=5)

    def test_fetcher_initialization(self, fetcher):
        """Test session settings."""
        assert fetcher.session.headers["User-Agent"] == "TestBot/1.0"
        assert fetcher.session.max_redirects == 5
        assert fetcher.timeout == 5

    def test_default_user_agent(self):
        """Test the fallback user agent."""
        assert "SitePitch" in PageFetcher().user_agent

    def test_fetch_success(self, fetcher):
        """Test a plain HTML response."""
        response = make_response(history=[Mock(url="http://example.com/")])
        with patch.object(fetcher.session, "get", return_value=response) as mock_get:
            result = fetcher.fetch("http://example.com/")

        mock_get.assert_called_once_with("http://example.com/", timeout=5, allow_redirects=True)
        assert isinstance(result, FetchResult)
        assert result.html == "<html><body>Hei</body></html>"
        assert result.final_url == "https://example.com/"
        assert result.redirect_count == 1
        assert result.redirect_chain == ["http://example.com/"]

    def test_non_text_response_is_ignored(self, fetcher):
        """Test that binary bodies are dropped."""
        response = make_response(text="\x89PNG...", content_type="image/png")
        with patch.object(fetcher.session, "get", return_value=response):
            result = fetcher.fetch("https://example.com/logo.png")

        assert result.html == ""
        assert result.content_type == "image/png"

    def test_xhtml_response_is_kept(self, fetcher):
        """Test that XHTML counts as text."""
        response = make_response(content_type="application/xhtml+xml")
        with patch.object(fetcher.session, "get", return_value=response):
            result = fetcher.fetch("https://example.com/")
        assert result.html != ""

    def test_missing_charset_is_decoded_as_utf8(self, fetcher):
        """Test that a text/html body without a charset keeps its Norwegian letters."""
        response = requests.Response()
        response.status_code = 200
        response._content = "<h1>Rørlegger Oslo</h1><h2>Ofte stilte spørsmål</h2>".encode("utf-8")
        response.headers["Content-Type"] = "text/html"
        response.url = "https://example.no/"

        with patch.object(fetcher.session, "get", return_value=response):
            result = fetcher.fetch("https://example.no/")

        assert "Rørlegger Oslo" in result.html
        signals = extract(result.html, result.final_url)
        assert signals.has_faq_section is True
        assert signals.main_keyword == "Rørlegger Oslo"

    def test_declared_charset_is_respected(self, fetcher):
        """Test that an explicit charset is not overridden."""
        response = requests.Response()
        response.status_code = 200
        response._content = "<h1>Rørlegger</h1>".encode("iso-8859-1")
        response.headers["Content-Type"] = "text/html; charset=ISO-8859-1"
        response.url = "https://example.no/"

        with patch.object(fetcher.session, "get", return_value=response):
            result = fetcher.fetch("https://example.no/")

        assert "Rørlegger" in result.html

    @pytest.mark.parametrize("url", [
        "",
        "not a url",
        "example.com",
        "ftp://example.com/file",
        "https://",
    ])
    def test_invalid_target(self, fetcher, url):
        """Test URL validation before any request is made."""
        with patch.object(fetcher.session, "get") as mock_get:
            with pytest.raises(InvalidTarget):
                fetcher.fetch(url)
        mock_get.assert_not_called()

    def test_too_many_redirects(self, fetcher):
        """Test redirect loop handling."""
        with patch.object(fetcher.session, "get",
                          side_effect=requests.exceptions.TooManyRedirects("loop")):
            with pytest.raises(UnreachableOrTooManyRedirects) as exc_info:
                fetcher.fetch("https://example.com/")
        assert "redirects" in exc_info.value.message

    def test_connection_error(self, fetcher):
        """Test unreachable hosts."""
        with patch.object(fetcher.session, "get",
                          side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(UnreachableOrTooManyRedirects):
                fetcher.fetch("https://this-domain-does-not-exist-12345.com")

    def test_timeout(self, fetcher):
        """Test request timeouts."""
        with patch.object(fetcher.session, "get",
                          side_effect=requests.exceptions.ReadTimeout("slow")):
            with pytest.raises(UnreachableOrTooManyRedirects) as exc_info:
                fetcher.fetch("https://example.com/")
        assert "timeout" in exc_info.value.message

    def test_http_error_status(self, fetcher):
        """Test error statuses."""
        response = make_response(status_code=404)
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            "404 Client Error", response=Mock(status_code=404)
        )
        with patch.object(fetcher.session, "get", return_value=response):
            with pytest.raises(UnreachableOrTooManyRedirects) as exc_info:
                fetcher.fetch("https://example.com/missing")
        assert exc_info.value.status_code == 404
        assert exc_info.value.target == "https://example.com/missing"

    def test_fetch_html_returns_body(self):
        """Test the convenience function."""
        result = FetchResult(url="https://example.com", html="<p>x</p>")
        with patch.object(PageFetcher, "fetch", return_value=result):
            assert fetch_html("https://example.com") == "<p>x</p>"
