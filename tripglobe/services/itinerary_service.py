import json
import logging
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone

from tripglobe.editor.adapter import flatten_ai_itinerary
from tripglobe.editor.dates import generate_date_range
from tripglobe.services.llm_service import get_llm_service, LLMConfig, SystemInstructions, GeminiLLMService
from tripglobe.config import settings

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class ItineraryService:
    """Generates itineraries with the LLM and turns them into editor stops"""

    def __init__(self, llm_service: Optional[GeminiLLMService] = None):
        self.llm_service = llm_service or get_llm_service()

    async def generate_itinerary(
        self,
        destination: str,
        start_date: str,
        end_date: str,
        origin: Optional[str] = None,
        travellers: int = 1,
        interests: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Generate an itinerary for the trip.

        Returns:
            {"title", "stops", "raw", "fallbackUsed", "generatedAt"}

        Raises:
            ValueError: invalid date range or unparseable model output
            RuntimeError: the model call failed
        """
        day_keys = generate_date_range(start_date, end_date)
        if not day_keys:
            raise ValueError(f"Invalid trip dates: {start_date} to {end_date}")
        if len(day_keys) > settings.max_trip_days:
            raise ValueError(f"Trips are limited to {settings.max_trip_days} days, got {len(day_keys)}")

        logger.info(f"Generating itinerary for {destination}, {len(day_keys)} days, {travellers} traveller(s)")

        user_message = self._create_trip_planning_prompt(
            destination=destination,
            start_date=start_date,
            end_date=end_date,
            num_days=len(day_keys),
            origin=origin,
            travellers=travellers,
            interests=interests or [],
        )

        response = self.llm_service.generate_content(
            user_message=user_message,
            system_instruction=SystemInstructions.trip_planner(),
            config=LLMConfig(model=settings.llm_model),
        )
        if not response.success:
            logger.error(f"LLM call failed: {response.error}")
            raise RuntimeError(f"Failed to generate itinerary: {response.error}")
        if response.fallback_used:
            logger.warning("Using canned fallback itinerary")

        raw = self.parse_llm_response(response.content)
        stops = flatten_ai_itinerary(raw, start_date=start_date)

        return {
            "title": raw.get("title") or f"Trip to {destination}",
            "stops": stops,
            "raw": raw,
            "fallbackUsed": response.fallback_used,
            "generatedAt": datetime.now(timezone.utc).isoformat(),
        }

    def _create_trip_planning_prompt(
        self,
        destination: str,
        start_date: str,
        end_date: str,
        num_days: int,
        origin: Optional[str],
        travellers: int,
        interests: List[str],
    ) -> str:
        prompt_parts = [
            f"Plan a {num_days}-day trip to {destination} for {travellers} traveller(s).",
            f"Travel dates: {start_date} to {end_date}.",
        ]
        if origin:
            prompt_parts.append(f"Travelling from {origin}.")
        if interests:
            prompt_parts.append(f"Interests: {', '.join(interests)}.")
        prompt_parts.append(f"Include activities for all {num_days} days and give every day its date.")
        return " ".join(prompt_parts)

    @staticmethod
    def parse_llm_response(response_content: str) -> Dict[str, Any]:
        """Parse model output, tolerating ```json fences around the object"""
        content = (response_content or "").strip()
        if content.startswith('```json'):
            content = content[7:]
        if content.startswith('```'):
            content = content[3:]
        if content.endswith('```'):
            content = content[:-3]
        content = content.strip()

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse LLM response as JSON: {e}")
            logger.error(f"Response content (first 500 chars): {content[:500]}")
            raise ValueError("LLM did not return valid JSON")

        if not isinstance(data, dict):
            raise ValueError("LLM response is not a JSON object")
        return data


def get_itinerary_service() -> ItineraryService:
    """Get instance of ItineraryService"""
    return ItineraryService()
