import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    encoding: str
    max_upload_bytes: int
    highlight_class: str
    log_level: str


def load_settings() -> Settings:
    """
    Read settings from the environment. Unset variables fall back to defaults.
    COMPAIR_MAX_UPLOAD_BYTES=0 turns the per-file size cap off.
    """
    return Settings(
        encoding=os.environ.get("COMPAIR_ENCODING", "utf-8"),
        max_upload_bytes=int(os.environ.get("COMPAIR_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
        highlight_class=os.environ.get("COMPAIR_HIGHLIGHT_CLASS", "changed"),
        log_level=os.environ.get("COMPAIR_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
