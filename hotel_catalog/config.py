import logging
import sys
from typing import TextIO

from pydantic_settings import BaseSettings

BASE_URL = "https://5f2be0b4ffc88500167b85a0.mockapi.io/suppliers"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    acme_url: str = f"{BASE_URL}/acme"
    patagonia_url: str = f"{BASE_URL}/patagonia"
    paperflies_url: str = f"{BASE_URL}/paperflies"
    http_timeout: float = 30.0
    skip_failed_suppliers: bool = False
    log_level: str = "INFO"


def configure_logging(level: str, stream: TextIO | None = None) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=stream or sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
