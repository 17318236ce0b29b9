import logging
from typing import List

import pandas as pd
import requests

from ..config import Settings, get_settings
from ..errors import SourceError
from .synthetic import SyntheticSource

logger = logging.getLogger(__name__)


class RestSource:
    """Fetches item records from a REST API."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def _endpoints(self) -> List[str]:
        base = (self.settings.api_base_url or "").rstrip("/")
        if not base:
            return []
        return [f"{base}/items"]

    def load(self) -> pd.DataFrame:
        endpoints = self._endpoints()
        if not endpoints:
            logger.info("No API_BASE_URL configured, using synthetic items")
            return SyntheticSource(self.settings).load()

        frames: list[pd.DataFrame] = []
        for url in endpoints:
            try:
                resp = requests.get(url, timeout=self.settings.request_timeout_seconds)
                resp.raise_for_status()
            except requests.RequestException as e:
                raise SourceError(f"GET {url} failed: {e}") from e
            frames.append(pd.DataFrame(resp.json()))

        return pd.concat(frames, ignore_index=True)
