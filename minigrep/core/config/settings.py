# File: minigrep/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Application ---
    APP_NAME: str = "minigrep"
    APP_VERSION: str = "0.1.0"

    # --- Search Defaults ---
    DEFAULT_ROOT: Path = Path(os.getenv("MINIGREP_DEFAULT_PATH", "."))
    INCLUDE_HIDDEN: bool = os.getenv("MINIGREP_INCLUDE_HIDDEN", "true").lower() == "true"

    # --- Output ---
    # "auto" colours matches only when stdout is a terminal
    COLOR: str = os.getenv("MINIGREP_COLOR", "auto").lower()

    # --- File Decoding ---
    # Decoding is strict: files that do not decode are reported, never guessed.
    FILE_ENCODING: str = os.getenv("MINIGREP_ENCODING", "utf-8")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("MINIGREP_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


settings = Settings()
