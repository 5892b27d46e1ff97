import os
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self, **overrides):
        self.APP_NAME: str = os.getenv("APP_NAME", "Storefront API")
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "changeme")
        self.ALGORITHM: str = "HS256"
        self.SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "storefront_session")
        self.SESSION_EXPIRE_MINUTES: int = int(os.getenv("SESSION_EXPIRE_MINUTES", str(60 * 24)))  # 1 day
        self.COOKIE_SECURE: bool = _env_bool("COOKIE_SECURE", "false")
        self.SEED_SAMPLE_DATA: bool = _env_bool("SEED_SAMPLE_DATA", "true")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
