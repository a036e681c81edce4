from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AppConfig(BaseConfig):
    APP_NAME: str = "contact-desk"
    DEBUG: bool = False
    APP_ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ALLOWED_ORIGIN: str = "http://localhost:3000"
    TRUST_PROXY: bool = False
    LOG_LEVEL: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGIN.split(",") if origin.strip()]


class AdminConfig(BaseConfig):
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD_HASH: str = ""


class SessionConfig(BaseConfig):
    SESSION_SECRET: str = ""
    SESSION_COOKIE_NAME: str = "contact_desk_session"
    SESSION_TTL_HOURS: int = 24


class DBConfig(BaseConfig):
    DB_PATH: str = "data/submissions.db"

    def get_url(self, is_async: bool = True) -> str:
        driver = "sqlite+aiosqlite" if is_async else "sqlite"
        return f"{driver}:///{Path(self.DB_PATH).as_posix()}"


class RateLimitConfig(BaseConfig):
    GLOBAL_MAX_REQUESTS: int = 100
    GLOBAL_WINDOW_SECONDS: int = 15 * 60
    STRICT_MAX_REQUESTS: int = 10
    STRICT_WINDOW_SECONDS: int = 15 * 60


APP_CONFIG = AppConfig()
ADMIN_CONFIG = AdminConfig()
SESSION_CONFIG = SessionConfig()
DB_CONFIG = DBConfig()
RATE_LIMIT_CONFIG = RateLimitConfig()
