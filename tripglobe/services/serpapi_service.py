import logging
from typing import Dict, Any, Optional

import requests

from tripglobe.config import settings

logger = logging.getLogger(__name__)


class SerpAPIService:
    BASE_URL = "https://serpapi.com/search"

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key if api_key is not None else settings.serpapi_key
        self.timeout = timeout or settings.request_timeout_seconds

    def query(self, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise RuntimeError("SERPAPI_KEY is not configured")

        params = {**params, "api_key": self.api_key}
        try:
            response = requests.get(self.BASE_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"SerpAPI {params.get('engine')} request failed: {e}")
            raise RuntimeError(f"Search provider unavailable: {e}")

    def search_flights(
        self,
        origin: str,
        destination: str,
        outbound_date: str,
        return_date: Optional[str] = None,
        adults: int = 1,
        currency: str = "USD",
    ) -> Dict[str, Any]:
        params = {
            "engine": "google_flights",
            "departure_id": origin,
            "arrival_id": destination,
            "outbound_date": outbound_date,
            "adults": adults,
            "currency": currency,
            "hl": "en",
            # 1 = round trip, 2 = one way
            "type": 1 if return_date else 2,
        }
        if return_date:
            params["return_date"] = return_date
        return self.query(params)

    def search_hotels(
        self,
        destination: str,
        check_in: str,
        check_out: str,
        guests: int = 2,
        currency: str = "USD",
    ) -> Dict[str, Any]:
        return self.query({
            "engine": "google_hotels",
            "q": destination,
            "check_in_date": check_in,
            "check_out_date": check_out,
            "adults": guests,
            "currency": currency,
            "hl": "en",
        })


def get_serpapi_service() -> SerpAPIService:
    return SerpAPIService()
