"""Tests for hermes.config — AppConfig frozen dataclass."""

import pytest

from hermes.config import AppConfig


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.debug is False
        assert cfg.log_level == "info"
        assert cfg.access_log is True
        assert cfg.default_headers == ()
        assert cfg.json_ensure_ascii is False
        assert cfg.json_indent is None

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=3000, default_headers=(("X-Frame-Options", "DENY"),))

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.default_headers == (("X-Frame-Options", "DENY"),)

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.port = 9000  # type: ignore[misc]
