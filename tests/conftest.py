"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from teamscards.config import settings
from teamscards.text import TextNormalizer


@pytest.fixture
def stub_normalizer():
    """Normalizer whose emoji lookup is replaced by a recording mock."""
    emojizer = MagicMock(side_effect=lambda text: text.replace(":ok:", "OK"))
    return TextNormalizer(emojizer=emojizer)


@pytest.fixture
def custom_settings(monkeypatch):
    """Temporarily override builder settings."""

    def _apply(**overrides):
        for key, value in overrides.items():
            monkeypatch.setattr(settings, key, value)
        return settings

    return _apply
