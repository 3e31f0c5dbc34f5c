"""
Configuration - Settings read from the environment.

Environment variables:
    SCRAMBLE_ENV          development | production (default: development)
    SCRAMBLE_WORD_POOL    Root word pool file (default: bundled start.txt)
    SCRAMBLE_DICTIONARY   wordfreq | wordlist (default: wordfreq)
    SCRAMBLE_WORDLIST     Word list file for the wordlist backend
    SCRAMBLE_LANGUAGE     Dictionary language (default: en)
    SCRAMBLE_MIN_ZIPF     wordfreq recognition threshold (default: 2.5)
    SCRAMBLE_LOG_LEVEL    Log level for the CLI (default: INFO)
    SCRAMBLE_SESSION_TTL  Seconds an idle API session is kept (default: 3600)
    ALLOWED_ORIGINS       Comma-separated CORS origins (default: *)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os

from .dictionary.frequency import DEFAULT_MIN_ZIPF

DEFAULT_SESSION_TTL = 3600


@dataclass
class ScrambleConfig:
    """Runtime configuration shared by the CLI and the API."""
    env: str = "development"
    word_pool_path: str | None = None
    dictionary_backend: str = "wordfreq"
    wordlist_path: str | None = None
    language: str = "en"
    min_zipf: float = DEFAULT_MIN_ZIPF
    log_level: str = "INFO"
    session_ttl_seconds: int = DEFAULT_SESSION_TTL
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ScrambleConfig:
        """Build a config from environment variables."""
        env = os.environ if environ is None else environ
        try:
            min_zipf = float(env.get("SCRAMBLE_MIN_ZIPF", DEFAULT_MIN_ZIPF))
        except ValueError:
            raise ValueError(
                f"SCRAMBLE_MIN_ZIPF must be a number, got {env['SCRAMBLE_MIN_ZIPF']!r}"
            )
        try:
            session_ttl = int(env.get("SCRAMBLE_SESSION_TTL", DEFAULT_SESSION_TTL))
        except ValueError:
            raise ValueError(
                f"SCRAMBLE_SESSION_TTL must be an integer, got {env['SCRAMBLE_SESSION_TTL']!r}"
            )

        return cls(
            env=env.get("SCRAMBLE_ENV", "development"),
            word_pool_path=env.get("SCRAMBLE_WORD_POOL") or None,
            dictionary_backend=env.get("SCRAMBLE_DICTIONARY", "wordfreq"),
            wordlist_path=env.get("SCRAMBLE_WORDLIST") or None,
            language=env.get("SCRAMBLE_LANGUAGE", "en"),
            min_zipf=min_zipf,
            log_level=env.get("SCRAMBLE_LOG_LEVEL", "INFO").upper(),
            session_ttl_seconds=session_ttl,
            allowed_origins=[
                o.strip() for o in env.get("ALLOWED_ORIGINS", "*").split(",") if o.strip()
            ],
        )
