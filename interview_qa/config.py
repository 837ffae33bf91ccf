import os
import logging

DEFAULT_DOCUMENT_URL = (
    "https://raw.githubusercontent.com/sudheerj/javascript-interview-questions/master/README.md"
)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime settings read from the environment"""

    def __init__(self):
        self.document_url = os.getenv("DOCUMENT_URL", DEFAULT_DOCUMENT_URL)
        self.fetch_timeout = float(os.getenv("FETCH_TIMEOUT", "10"))
        self.strict_toc = _env_flag("STRICT_TOC")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.frontend_dir = os.getenv("FRONTEND_DIR", "frontend")
        self.markdown_dir = os.getenv("MARKDOWN_DIR", "data/markdown")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


settings = Settings()
