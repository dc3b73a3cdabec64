"""Pytest configuration and shared fixtures."""

import pytest

SAMPLE_UUID = "0195c62c-8f2c-7f47-bbc7-bf347ca146b9"
SAMPLE_PUID = "abc06awcb4f5hzmfey7qwt7s8a6q4"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PUIDV7_* variables from the outer environment out of tests."""
    monkeypatch.delenv("PUIDV7_PREFIX", raising=False)
    monkeypatch.delenv("PUIDV7_STRICT", raising=False)


@pytest.fixture
def sample_uuid() -> str:
    """UUIDv7 with a known puidv7 encoding."""
    return SAMPLE_UUID


@pytest.fixture
def sample_puid() -> str:
    """puidv7 encoding of sample_uuid with prefix 'abc'."""
    return SAMPLE_PUID
