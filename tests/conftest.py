"""Shared pytest configuration, marker assignment and text fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_TEXT = "名前,年齢,住所\n山田太郎,30,東京都\n佐藤花子,25,大阪府\n"


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def sample_text() -> str:
    """Japanese CSV content representable in Shift-JIS."""
    return SAMPLE_TEXT


@pytest.fixture
def sjis_bytes() -> bytes:
    """Shift-JIS encoding of ``SAMPLE_TEXT``."""
    return SAMPLE_TEXT.encode("shift_jis")


@pytest.fixture
def utf8_bytes() -> bytes:
    """UTF-8 encoding of ``SAMPLE_TEXT``."""
    return SAMPLE_TEXT.encode("utf-8")
