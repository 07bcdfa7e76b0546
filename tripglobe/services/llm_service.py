import json
import logging
from typing import Any, List, Optional
from dataclasses import dataclass

from google import genai
from google.genai import types

from tripglobe.config import settings

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


ITINERARY_SCHEMA_DOCS = """
{
  "title": "string - short trip title",
  "days": [
    {
      "day": 1,
      "date": "YYYY-MM-DD",
      "activities": [
        {
          "title": "string",
          "description": "string - one or two sentences",
          "startTime": "HH:MM",
          "endTime": "HH:MM",
          "location": {"name": "string", "coordinates": {"lat": 0.0, "lng": 0.0}}
        }
      ]
    }
  ]
}
"""

# Returned when no model is configured so the editor still gets a usable itinerary.
FALLBACK_ITINERARY_JSON = json.dumps({
    "title": "Sample itinerary",
    "days": [
        {
            "day": 1,
            "activities": [
                {
                    "title": "Old town walking tour",
                    "description": "Get your bearings with a relaxed walk through the historic centre.",
                    "startTime": "09:00",
                    "endTime": "11:30",
                },
                {
                    "title": "Local market lunch",
                    "description": "Try regional dishes at the central market.",
                    "startTime": "12:30",
                    "endTime": "14:00",
                },
            ],
        },
        {
            "day": 2,
            "activities": [
                {
                    "title": "City museum",
                    "description": "Spend the morning on the city's history and art collections.",
                    "startTime": "10:00",
                    "endTime": "12:30",
                },
            ],
        },
    ],
})


@dataclass
class LLMConfig:
    model: str = "gemini-2.0-flash-lite"
    temperature: float = 0.7
    top_p: float = 0.95
    max_output_tokens: int = 8192


@dataclass
class LLMResponse:
    success: bool
    content: str
    raw_response: Any
    error: Optional[str] = None
    fallback_used: bool = False


class GeminiLLMService:

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.google_api_key
        self.client = None
        if self.api_key:
            try:
                self.client = genai.Client(api_key=self.api_key)
                logger.info("Initialized Gemini client")
            except Exception as e:
                logger.error(f"Failed to initialize Gemini client: {e}")
                raise RuntimeError(f"Gemini client initialization failed: {e}")
        else:
            logger.warning("GOOGLE_API_KEY not set - itinerary requests will get the canned fallback")

    @property
    def available(self) -> bool:
        return self.client is not None

    def _create_contents(self, system_instruction: str, user_message: str) -> List[types.Content]:
        combined_message = f"{system_instruction}\n\n{user_message}"
        return [types.Content(role="user", parts=[types.Part(text=combined_message)])]

    def generate_content(
        self,
        user_message: str,
        system_instruction: str,
        config: Optional[LLMConfig] = None
    ) -> LLMResponse:
        """
        Generate content with the configured model.

        Without a client the canned fallback itinerary is returned as a
        successful response with `fallback_used` set.
        """
        if not self.available:
            return LLMResponse(success=True, content=FALLBACK_ITINERARY_JSON, raw_response=None, fallback_used=True)

        if config is None:
            config = LLMConfig(model=settings.llm_model)

        try:
            logger.info(f"Making LLM call with model: {config.model}")

            generate_content_config = types.GenerateContentConfig(
                temperature=config.temperature,
                top_p=config.top_p,
                max_output_tokens=config.max_output_tokens,
            )
            response = self.client.models.generate_content(
                model=config.model,
                contents=self._create_contents(system_instruction, user_message),
                config=generate_content_config
            )

            content = response.text or ""
            logger.info(f"LLM call successful, response length: {len(content)}")
            return LLMResponse(success=True, content=content, raw_response=response)

        except Exception as e:
            logger.error(f"LLM call failed: {e}")
            return LLMResponse(success=False, content="", raw_response=None, error=str(e))


# Singleton instance
_llm_service_instance = None

def get_llm_service() -> GeminiLLMService:
    global _llm_service_instance
    if _llm_service_instance is None:
        _llm_service_instance = GeminiLLMService()
    return _llm_service_instance


class SystemInstructions:

    @staticmethod
    def trip_planner() -> str:
        base_instruction = (
            "You are a travel planner. Build a realistic day-by-day itinerary for the trip described "
            "by the user. Spread activities across every day of the trip, keep travel between stops "
            "short, and give each activity a start and end time. Respond with JSON only, no markdown."
        )
        return base_instruction + f"\n\n=== REQUIRED JSON SCHEMA ===\n{ITINERARY_SCHEMA_DOCS}"
