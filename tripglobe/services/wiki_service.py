import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from tripglobe.config import settings

logger = logging.getLogger(__name__)


class WikipediaService:
    """Looks up city summaries from the Wikipedia REST API"""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.wikipedia_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout_seconds

    def get_summary(self, name: str) -> Dict[str, Any]:
        """
        Summary for a page title.

        Returns {title, extract, thumbnail}; on any request failure the
        result is {error: message} instead of raising.
        """
        url = f"{self.base_url}/{quote(name, safe='')}"
        try:
            response = requests.get(url, timeout=self.timeout, headers={"accept": "application/json"})
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Wikipedia lookup failed for {name!r}: {e}")
            return {"error": str(e)}

        return {
            "title": data.get("title"),
            "extract": (data.get("extract") or "").replace("\n", ""),
            "thumbnail": data.get("thumbnail"),
        }


def get_wikipedia_service() -> WikipediaService:
    return WikipediaService()
