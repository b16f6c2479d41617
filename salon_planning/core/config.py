from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    PLANNING_LOCALE: str = "fr"
    PLANNING_FIRST_WEEKDAY: int | None = None  # 0 = Monday, overrides the locale
    PLANNING_START_HOUR: int = 8
    PLANNING_END_HOUR: int = 20
    PREMIUM_WEEKDAYS: list[int] = [5]
    DEFAULT_STAFF_COLOR: str = "#8B5CF6"

    BOOKING_API_BASE_URL: str | None = None
    BOOKING_API_TOKEN: str | None = None
    BOOKING_API_TIMEOUT: float = 10.0
    BOOKING_API_MAX_ATTEMPTS: int = 3
    BOOKING_API_BACKOFF_SECONDS: float = 0.5

    STAFF_STORE_PATH: str = "./data/staff.json"
    STAFF_CACHE_TTL_SECONDS: float = 60.0


settings = Settings()
