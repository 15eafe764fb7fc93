# settings.py
from __future__ import annotations
from dataclasses import dataclass
import os
from typing import Optional

from corpus import DICTIONARY_FILE_URL, LOCAL_DICTIONARY_FILE_NAME


class SettingsError(ValueError):
    """A configuration value is malformed or out of range."""


def _positive(name: str, raw: str, kind: type):
    try:
        value = kind(raw)
    except ValueError as e:
        raise SettingsError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise SettingsError(f"{name} must be greater than 0, got {raw!r}")
    return value


@dataclass
class Settings:
    """Runtime configuration for the console corrector."""
    corpus_path: str = LOCAL_DICTIONARY_FILE_NAME
    corpus_url: str = DICTIONARY_FILE_URL
    timeout: float = 30.0
    max_workers: Optional[int] = None
    download: bool = True

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> Settings:
        env = os.environ if environ is None else environ
        timeout = env.get("SPELLCHECK_TIMEOUT")
        workers = env.get("SPELLCHECK_MAX_WORKERS")
        return cls(
            corpus_path=env.get("SPELLCHECK_CORPUS_PATH", LOCAL_DICTIONARY_FILE_NAME),
            corpus_url=env.get("SPELLCHECK_CORPUS_URL", DICTIONARY_FILE_URL),
            timeout=_positive("SPELLCHECK_TIMEOUT", timeout, float) if timeout else 30.0,
            max_workers=_positive("SPELLCHECK_MAX_WORKERS", workers, int) if workers else None,
            download=env.get("SPELLCHECK_NO_DOWNLOAD", "").lower() not in {"1", "true", "yes"},
        )
