"""
Tests for environment configuration.
"""

import pytest

from ..config import ScrambleConfig


def test_defaults():
    config = ScrambleConfig.from_env({})

    assert config.env == "development"
    assert config.word_pool_path is None
    assert config.dictionary_backend == "wordfreq"
    assert config.language == "en"
    assert config.min_zipf == 2.5
    assert config.allowed_origins == ["*"]


def test_reads_environment():
    config = ScrambleConfig.from_env({
        "SCRAMBLE_ENV": "production",
        "SCRAMBLE_WORD_POOL": "/data/start.txt",
        "SCRAMBLE_DICTIONARY": "wordlist",
        "SCRAMBLE_WORDLIST": "/data/words.txt",
        "SCRAMBLE_MIN_ZIPF": "3.0",
        "SCRAMBLE_LOG_LEVEL": "debug",
        "ALLOWED_ORIGINS": "http://a.test, http://b.test",
    })

    assert config.env == "production"
    assert config.word_pool_path == "/data/start.txt"
    assert config.dictionary_backend == "wordlist"
    assert config.wordlist_path == "/data/words.txt"
    assert config.min_zipf == 3.0
    assert config.log_level == "DEBUG"
    assert config.allowed_origins == ["http://a.test", "http://b.test"]


def test_bad_min_zipf():
    with pytest.raises(ValueError, match="SCRAMBLE_MIN_ZIPF"):
        ScrambleConfig.from_env({"SCRAMBLE_MIN_ZIPF": "lots"})


def test_session_ttl():
    assert ScrambleConfig.from_env({}).session_ttl_seconds == 3600
    assert ScrambleConfig.from_env({"SCRAMBLE_SESSION_TTL": "60"}).session_ttl_seconds == 60


def test_bad_session_ttl():
    with pytest.raises(ValueError, match="SCRAMBLE_SESSION_TTL"):
        ScrambleConfig.from_env({"SCRAMBLE_SESSION_TTL": "soon"})
