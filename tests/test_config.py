import pytest
from pydantic import ValidationError

from statsapi.core import schemas
from statsapi.core.config import Settings


def test_default_display_mode_is_parsed():
    assert Settings(DEFAULT_DISPLAY_MODE="SELECTOR").DEFAULT_DISPLAY_MODE == schemas.DisplayMode.SELECTOR


def test_unknown_default_display_mode_fails_at_startup():
    with pytest.raises(ValidationError):
        Settings(DEFAULT_DISPLAY_MODE="FANCY")
