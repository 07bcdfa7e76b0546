# tripglobe/config.py
import os
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List
from dotenv import load_dotenv
load_dotenv()

class Settings(BaseSettings):
    # Application Settings
    max_trip_days: int = 60
    allowed_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    port: int = 3000

    # Firestore Configuration
    project_id: str = ""
    database: str = "(default)"

    # LLM Configuration (falls back to the canned itinerary when no key is set)
    google_api_key: str = ""
    llm_model: str = "gemini-2.0-flash-lite"

    # Third-party APIs
    serpapi_key: str = ""
    wikipedia_base_url: str = "https://en.wikipedia.org/api/rest_v1/page/summary"
    request_timeout_seconds: float = 20.0

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore"  # Allow extra environment variables without validation errors
    )

class CloudRunConfig:
    """Configuration for Cloud Run deployment"""

    IS_CLOUD_RUN: bool = os.getenv("K_SERVICE") is not None
    PROJECT_ID: str = os.getenv("GOOGLE_CLOUD_PROJECT", "")
    PORT: int = int(os.getenv("PORT", "8080"))

settings = Settings()
cloud_config = CloudRunConfig()
