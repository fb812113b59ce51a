from __future__ import annotations

import logging
from datetime import date

import requests

from ..errors import NetworkFailure
from ..puzzles import GameKind

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.nytimes.com/svc"


class NytClient:
    """Client for the public NYT games endpoints."""

    def __init__(self, base_url: str | None = None, timeout: float = 10.0):
        """
        Initialize the client.

        Args:
            base_url: Service root (defaults to the NYT svc root)
            timeout: Per-request timeout in seconds
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def url_for(self, kind: GameKind, day: date) -> str:
        return f"{self.base_url}/{kind.endpoint}/v2/{day.isoformat()}.json"

    def fetch(self, kind: GameKind, day: date) -> str:
        url = self.url_for(kind, day)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkFailure(f"GET {url} failed: {e}") from e

        # error statuses still carry a JSON body with "status": "ERROR"
        logger.debug("GET %s -> %s (%d bytes)", url, response.status_code, len(response.content))
        return response.text
