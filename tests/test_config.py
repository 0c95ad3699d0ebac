"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from ministat.config import Settings, get_settings, settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "WIDTH",
            "DEFAULT_WIDTH",
            "CONFIDENCE",
            "MODERN_CHARS",
            "DELIMITER",
            "LOG_LEVEL",
        ):
            monkeypatch.delenv(f"MINISTAT_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.width is None
        assert s.default_width == 74
        assert s.confidence == "95"
        assert s.modern_chars is False
        assert s.delimiter == " \t"
        assert s.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MINISTAT_WIDTH", "100")
        monkeypatch.setenv("MINISTAT_CONFIDENCE", "99")
        monkeypatch.setenv("MINISTAT_MODERN_CHARS", "true")
        s = Settings(_env_file=None)
        assert s.width == 100
        assert s.confidence == "99"
        assert s.modern_chars is True

    def test_rejects_narrow_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MINISTAT_WIDTH", "2")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_global_instance(self) -> None:
        assert get_settings() is settings
