# structurer/config.py
import os
import logging
from functools import lru_cache
from pydantic import BaseModel

class Settings(BaseModel):
    openai_api_key: str = ""
    model_name: str = "gpt-4o-mini"
    generation_temperature: float = 0.6
    rewrite_temperature: float = 0.5
    summary_temperature: float = 0.3
    default_word_count: int = 500
    default_language: str = "English"
    log_level: str = "INFO"

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment (call load_dotenv() first)."""
    env = {
        "openai_api_key": os.getenv("OPENAI_API_KEY"),
        "model_name": os.getenv("MODEL_NAME"),
        "generation_temperature": os.getenv("GENERATION_TEMPERATURE"),
        "rewrite_temperature": os.getenv("REWRITE_TEMPERATURE"),
        "summary_temperature": os.getenv("SUMMARY_TEMPERATURE"),
        "default_word_count": os.getenv("DEFAULT_WORD_COUNT"),
        "default_language": os.getenv("DEFAULT_LANGUAGE"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    return Settings(**{k: v for k, v in env.items() if v not in (None, "")})

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
