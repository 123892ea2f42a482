"""Runtime configuration helpers for scientist."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


def _load_dotenv() -> None:
    env_path = Path(".env")
    if not env_path.is_file():
        return
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip())
    except OSError:
        pass


class Settings(BaseModel):
    SCIENTIST_RESULTS_DIR: str = "artifacts/scientist"
    SCIENTIST_TOGGLES_PATH: Optional[str] = None
    SCIENTIST_LOG_LEVEL: str = "INFO"

    class Config:
        frozen = True

    @property
    def results_path(self) -> Path:
        return Path(self.SCIENTIST_RESULTS_DIR) / "results.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv()
    return Settings(
        SCIENTIST_RESULTS_DIR=os.getenv("SCIENTIST_RESULTS_DIR", "artifacts/scientist"),
        SCIENTIST_TOGGLES_PATH=os.getenv("SCIENTIST_TOGGLES_PATH") or None,
        SCIENTIST_LOG_LEVEL=os.getenv("SCIENTIST_LOG_LEVEL", "INFO").upper(),
    )


__all__ = ["Settings", "get_settings"]
