"""Shared test fixtures."""

import pytest

from valitime import TimeConverter


@pytest.fixture(autouse=True)
def posix_numeric_locale(monkeypatch):
    """Pin the environment locale so default formatting is deterministic."""
    for name in ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LC_NUMERIC", "C")


@pytest.fixture
def converter():
    return TimeConverter()


@pytest.fixture
def german_converter():
    return TimeConverter(locale="de_DE")
