# app/config.py
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv


load_dotenv()


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    app_title: str = "Books API"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @property
    def allow_credentials(self) -> bool:
        # Never combined with a wildcard origin
        return self.cors_allow_credentials and "*" not in self.cors_origins

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            app_title=os.environ.get("APP_TITLE", "Books API"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", 8080)),
            cors_origins=_split_origins(os.environ.get("CORS_ORIGINS", "*")),
            cors_allow_credentials=_parse_bool(os.environ.get("CORS_ALLOW_CREDENTIALS", "false")),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
