"""
HTTP client for the translation server's REST API.

Wraps a ``requests.Session`` with authentication, base URL resolution,
status checking and page-number pagination. Transport errors raised by
requests are not caught here.
"""
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import urlencode, urljoin, urlsplit
import logging

import requests

from ..core.exceptions import ConfigurationError, ProviderError, response_summary


logger = logging.getLogger(__name__)


class ApiConfig:
    DEFAULT_TIMEOUT = 30
    USER_AGENT = "Python-Translation-Provider/1.0"
    PAGE_PARAM = "page"


def with_page(url: str, page: int) -> str:
    """
    Append the page parameter to a URL, keeping any existing query string.

    Args:
        url: Listing URL
        page: 1-based page number

    Returns:
        URL with ``page=N`` appended
    """
    separator = '&' if urlsplit(url).query else '?'
    return f"{url}{separator}{urlencode({ApiConfig.PAGE_PARAM: page})}"


class ApiClient:
    """
    Session wrapper shared by the component, translation and unit APIs.
    """

    def __init__(
        self,
        api_url: str,
        api_token: str,
        verify_peer: bool = True,
        timeout: int = ApiConfig.DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        if not api_url or not api_url.strip():
            raise ConfigurationError("API URL required", field="api_url")
        if not api_token or not api_token.strip():
            raise ConfigurationError("API token required", field="api_token")
        if timeout <= 0:
            raise ConfigurationError(f"Invalid timeout: {timeout}", field="timeout")

        self.api_url = api_url if api_url.endswith('/') else f"{api_url}/"
        self.api_token = api_token
        self.verify_peer = verify_peer
        self.timeout = timeout

        self._owns_session = session is None
        if session is None:
            self._session = self._create_session()
        else:
            self._session = self._configure_session(session)

        if not verify_peer:
            logger.warning("TLS certificate verification is disabled")

        logger.debug(f"API client initialized: {self.api_url}")

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(self._api_headers())
        session.verify = self.verify_peer
        return session

    def _configure_session(self, session: requests.Session) -> requests.Session:
        """Add API headers to a caller-supplied session, keeping headers it already set."""
        defaults = requests.utils.default_headers()
        for name, value in self._api_headers().items():
            current = session.headers.get(name)
            if current is None or current == defaults.get(name):
                session.headers[name] = value
        return session

    def _api_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Token {self.api_token}",
            "Accept": "application/json",
            "User-Agent": ApiConfig.USER_AGENT,
        }

    def resolve(self, url: str) -> str:
        """Join relative paths onto the API root; absolute URLs pass through."""
        if urlsplit(url).scheme:
            return url
        return urljoin(self.api_url, url.lstrip('/'))

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send one request.

        Args:
            method: HTTP method
            url: Absolute URL or path relative to the API root
            **kwargs: Passed to ``requests.Session.request``

        Returns:
            The response, whatever its status
        """
        kwargs.setdefault('timeout', self.timeout)
        kwargs.setdefault('verify', self.verify_peer)
        return self._session.request(method, self.resolve(url), **kwargs)

    @staticmethod
    def expect(response: requests.Response, status: int, message: str) -> requests.Response:
        """
        Check the status code of a response.

        Raises:
            ProviderError: If the status differs from ``status``
        """
        if response.status_code != status:
            logger.debug(response_summary(response))
            raise ProviderError(message, response)
        return response

    @staticmethod
    def json(response: requests.Response, message: str) -> Dict[str, Any]:
        """Decode a JSON body, mapping garbage to ProviderError."""
        try:
            data = response.json()
        except ValueError as e:
            logger.debug(response_summary(response))
            raise ProviderError(f"{message} Invalid JSON response.", response) from e

        if not isinstance(data, dict):
            raise ProviderError(f"{message} Unexpected response payload.", response)
        return data

    def paginate(self, url: str, message: str) -> Iterator[List[Dict[str, Any]]]:
        """
        Walk a paginated listing.

        Requests ``page=1, 2, ...`` until the server reports no ``next``
        page and yields the ``results`` of each page.

        Raises:
            ProviderError: On the first page that does not answer 200
        """
        page = 1
        while True:
            response = self.expect(self.request('GET', with_page(url, page)), 200, message)
            data = self.json(response, message)

            yield data.get('results') or []

            if data.get('next') is None:
                break
            page += 1

    def close(self) -> None:
        """Close session."""
        if self._owns_session:
            self._session.close()
            logger.debug("Closed API session")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
