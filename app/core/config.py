from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    DATABASE_URL: str
    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    # Public report ids are drawn at random; attempts before giving up on a free one
    REPORT_ID_MAX_ATTEMPTS: int = 5
    # OpenAI (chat assistant)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_FALLBACK_MODEL: str = "gpt-3.5-turbo"
    OPENAI_MAX_TOKENS: int = 400
    OPENAI_TEMPERATURE: float = 0.7

settings = Settings()
