"""HTTP transport for the watch page, player endpoint and timed-text documents"""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import config
from ..errors import NetworkError, TranscriptParsingError

logger = logging.getLogger(__name__)


class HttpClient:
    """Thin wrapper around a requests session

    Transport failures (connection, DNS, timeout) surface as ``NetworkError``.
    HTTP status codes are left for the caller to interpret.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize HTTP client

        Args:
            session: Session to reuse. A new one is created if not provided.
            timeout: Per-request timeout in seconds. If not provided, uses config.

        Raises:
            ValueError: If the timeout is not greater than 0
        """
        if timeout is None:
            timeout = config.timeout_seconds
        if timeout <= 0:
            raise ValueError(f"Timeout must be greater than 0, got {timeout}")

        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the session if this client created it"""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(
        self, url: str, headers: Optional[Dict[str, str]] = None, video_id: Optional[str] = None
    ) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            return self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(str(e), video_id) from e

    def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        video_id: Optional[str] = None,
    ) -> requests.Response:
        logger.debug("POST %s", url)
        try:
            return self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(str(e), video_id) from e


def decode_body(response: requests.Response, what: str, video_id: Optional[str] = None) -> str:
    """Decode a response body as UTF-8

    Raises:
        TranscriptParsingError: If the body is not valid UTF-8
    """
    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TranscriptParsingError(f"Failed to decode {what}", video_id) from e
