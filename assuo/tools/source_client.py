"""
Source Client

Fetches remote bytes and reads local files for url / file sources.

Example:
    client = SourceClient()
    data = client.fetch("https://example.com/base.bin")
"""
import logging
from pathlib import Path
from typing import Optional

import requests

from assuo.config import AssuoConfig
from assuo.core.errors import ResolutionError

logger = logging.getLogger(__name__)


class SourceClient:
    """
    Blocking byte fetcher.
    Any failure is reported as ResolutionError.
    """

    def __init__(self, config: Optional[AssuoConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or AssuoConfig()
        self.session = session or requests.Session()

    def fetch(self, url: str) -> bytes:
        """
        Download `url`

        Args:
            url: http(s) URL

        Returns:
            Response body
        """
        logger.info(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ResolutionError(f"couldn't fetch {url}: {e}", url) from e
        return response.content

    def read(self, path: str) -> bytes:
        """Read the file at `path`"""
        logger.info(f"Reading {path}")
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise ResolutionError(f"couldn't read {path}: {e}", str(path)) from e
