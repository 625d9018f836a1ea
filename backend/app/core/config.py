from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- DB ---
    DATABASE_URL: str = "sqlite:///./intercession.sqlite"

    # --- JWT ---
    JWT_SECRET: str = "change-me-intercession-secret"
    JWT_ALG: str = "HS256"
    JWT_EXPIRE_MIN: int = 10080  # 7 days
    AUTH_COOKIE_NAME: str = "auth-token"

    # --- Users ---
    MAX_ADMINS: int = 3

    # --- Scheduling ---
    # Only used to decide which calendar day "today" is
    LOCAL_TIMEZONE: str = "America/Chicago"
    DEFAULT_WEEKS_TO_GENERATE: int = 4

    # --- Uploads ---
    UPLOAD_DIR: str = "./uploads"
    UPLOAD_MAX_BYTES: int = 5 * 1024 * 1024
    UPLOAD_INLINE: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
