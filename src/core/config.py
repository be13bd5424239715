"""Application settings, read from the environment."""

import os


class Config:
    DATABASE_URL = os.environ.get("DATABASE_URL") or "sqlite:///./scavenger_hunt.db"
    SQL_ECHO = os.environ.get("SQL_ECHO", "false").lower() == "true"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    # Local blob store
    IMAGE_STORAGE_DIR = os.environ.get("IMAGE_STORAGE_DIR") or "./images"
    IMAGE_BASE_URL = os.environ.get("IMAGE_BASE_URL") or "http://localhost:8000/images"
    # Added to the details of upstream (502) errors
    HELP_URL = os.environ.get("HELP_URL", "https://sh.jerishbovas.com/help")
