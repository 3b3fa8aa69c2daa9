"""Environment config loader"""
from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Environment variables"""

    # API Keys
    GOOGLE_MAPS_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    KLUSTER_API_KEY: Optional[str] = None

    # Report analysis (OpenAI-compatible endpoint)
    REPORT_MODEL: str = "klusterai/Meta-Llama-3.1-8B-Instruct-Turbo"
    LLM_BASE_URL: Optional[str] = "https://api.kluster.ai/v1"
    LLM_TEMPERATURE: float = 0.1
    LLM_MAX_TOKENS: int = 1000
    REPORT_MAX_CHARS: int = 10000  # sent to the model
    REPORT_CONTENT_MAX_BYTES: int = 900 * 1024  # stored on the record

    # Facility ranking
    LOCAL_RADIUS_KM: float = 25.0
    REGIONAL_RADIUS_KM: float = 50.0
    AMBULANCE_RADIUS_KM: float = 50.0
    HOSPITAL_RADIUS_KM: float = 50.0
    MAX_RESULTS: int = 10
    MIN_LOCAL_RESULTS: int = 3
    AMBULANCE_MIN_CITY_RESULTS: int = 3
    DEDUPE_RADIUS_KM: float = 0.2
    LOCATION_UPDATE_THRESHOLD_KM: float = 0.5
    PLACES_SEARCH_RADIUS_M: int = 25000

    # External HTTP
    HTTP_TIMEOUT: int = 10

    # Pharmacy
    LOW_STOCK_THRESHOLD: int = 10

    # Server
    DEBUG: bool = True
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def report_api_key(self) -> Optional[str]:
        """Kluster key wins, plain OpenAI key is the fallback"""
        return self.KLUSTER_API_KEY or self.OPENAI_API_KEY


@lru_cache
def get_settings() -> Settings:
    """Cached Settings singleton"""
    return Settings()
