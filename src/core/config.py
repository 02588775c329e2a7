from functools import lru_cache
from typing import List
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from services.voter_type_engine.loader import DEFAULT_QUIZ_DATA_PATH

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class QuizSettings(BaseSettings):
    data_path: str = str(DEFAULT_QUIZ_DATA_PATH)
    site_url: str = ""  # e.g. https://votertype.example; empty keeps share URLs relative
    log_level: str = "INFO"
    json_logs: bool = True
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix='QUIZ_')


@lru_cache(maxsize=None)
def get_settings() -> QuizSettings:
    return QuizSettings()
