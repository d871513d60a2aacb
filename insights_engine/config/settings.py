# insights_engine/config/settings.py
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Literal, Optional

# Get project root (2 levels up from this file)
PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    # OpenAI (primary classification path)
    openai_api_key: Optional[str] = None
    openai_llm_model: str = "gpt-4o-mini"
    ai_timeout_seconds: float = 30.0
    ai_max_tokens: int = 8192

    # Heuristic path
    key_phrase_limit: int = 3

    # Aggregation
    time_series_days: int = 7
    filler_policy: Literal["random", "none"] = "random"
    filler_seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        case_sensitive = False
