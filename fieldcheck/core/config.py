from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)
    
    # Triggering
    TRIGGER_EVENT: str = "change"
    
    # Locale defaults for number, currency and date validators
    DECIMAL_SEPARATOR: str = "."
    THOUSANDS_SEPARATOR: str = ","
    CURRENCY_SYMBOL: str = "$"
    DATE_INPUT_FORMAT: str = "MM/DD/YYYY"
    
    class Config:
        env_file = ".env"
        env_prefix = "FIELDCHECK_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
