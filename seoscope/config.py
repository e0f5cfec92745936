"""
Service configuration, read from the environment (and an optional .env file).
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SEOScope/1.0; +https://github.com/seoscope/seoscope)"


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 5174
    allow_origin: str = "*"
    fetch_timeout: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            host=os.environ.get("HOST", cls.host),
            port=int(os.environ.get("PORT", cls.port)),
            allow_origin=os.environ.get("ANALYZER_ALLOW_ORIGIN", cls.allow_origin),
            fetch_timeout=float(os.environ.get("FETCH_TIMEOUT", cls.fetch_timeout)),
            user_agent=os.environ.get("USER_AGENT", cls.user_agent),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
