from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(ENV_FILE), case_sensitive=False, extra="ignore")

    APP_NAME: str = "Affiliate Portal"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 3000

    DATABASE_URL: str = "sqlite:///./affiliate.db"

    SESSION_SECRET: str = "changeme"
    SESSION_COOKIE_NAME: str = "affiliate_session"

    # Public base URL used to build shareable referral links.
    BASE_URL: str = "http://localhost:3000"
    REFERRAL_PATH_PREFIX: str = "/r/"

    # Admin bootstrap is skipped unless both are set.
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""

    PASSWORD_HASH_ROUNDS: int = 10
    REFERRAL_CODE_ATTEMPTS: int = 10
    CLICK_LIST_LIMIT: int = 100

    @property
    def admin_bootstrap_configured(self) -> bool:
        return bool(self.ADMIN_EMAIL.strip() and self.ADMIN_PASSWORD)

    @property
    def referral_base(self) -> str:
        prefix = "/" + self.REFERRAL_PATH_PREFIX.strip("/") + "/"
        return f"{self.BASE_URL.rstrip('/')}{prefix}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
