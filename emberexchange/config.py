import logging
from pathlib import Path
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EMBER_", env_file=".env", extra="ignore")

    database_path: Path = Path("data/ember.db")
    log_level: str = "INFO"

    # Reveal strip geometry
    strip_length: int = 60
    final_index: int = 40

    # Fixed seed for reproducible draws while debugging
    seed: Optional[int] = None

    @model_validator(mode="after")
    def check_strip(self):
        if self.strip_length <= 0:
            raise ValueError("strip_length must be positive")
        if not 0 <= self.final_index < self.strip_length:
            raise ValueError("final_index must fall inside the strip")
        return self


settings = Settings()


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
