"""
Unit tests for configuration loading.
"""
import logging

import pytest

from zerohour.base import config as config_module
from zerohour.base.config import CatalogConfig, ZeroHourConfig, get_config, set_config, setup_logging
from zerohour.errors import ZeroHourError, ErrorCode


@pytest.fixture
def clean_env(monkeypatch):
    for name in [
        "ZEROHOUR_ADMIN_TOKEN", "ZEROHOUR_API_HOST", "ZEROHOUR_API_PORT", "PORT",
        "ZEROHOUR_ALLOWED_ORIGINS", "ZEROHOUR_LOG_LEVEL", "ZEROHOUR_LOG_FILE",
        "ZEROHOUR_STATIC_DIR", "ZEROHOUR_DEBUG", "ZEROHOUR_TARGET_NAME", "ZEROHOUR_TARGET_ID",
        "ZEROHOUR_COUNTDOWN_DETECTED", "ZEROHOUR_COUNTDOWN_WINDOW_CLOSES",
        "ZEROHOUR_COUNTDOWN_EXPOSURE_LOST",
    ]:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    set_config(None)


class TestDefaults:
    def test_from_env_defaults(self, clean_env):
        cfg = ZeroHourConfig.from_env()
        assert cfg.security.admin_token == "DEMO_ADMIN_TOKEN"
        assert cfg.security.allowed_origins == ("*",)
        assert cfg.api_port == 3000
        assert cfg.api_host == "127.0.0.1"
        assert cfg.log.file_enabled is False
        assert cfg.catalog.default_scenario == "cyber_breach_pre_disclosure"
        assert cfg.catalog.default_state == "normal"
        assert cfg.catalog.countdown.window_closes == 98

    def test_catalog_vocabulary(self):
        catalog = CatalogConfig()
        assert catalog.domains == ("legal", "cyber", "reputational", "third_party")
        assert catalog.state_index("exposure_window_open") == 2
        assert catalog.state_index("unknown") == -1


class TestEnvironmentOverrides:
    def test_overrides(self, clean_env):
        clean_env.setenv("ZEROHOUR_ADMIN_TOKEN", "s3cret")
        clean_env.setenv("ZEROHOUR_API_PORT", "8080")
        clean_env.setenv("ZEROHOUR_ALLOWED_ORIGINS", "http://a.test, http://b.test")
        clean_env.setenv("ZEROHOUR_TARGET_NAME", "ACME CORP")
        clean_env.setenv("ZEROHOUR_COUNTDOWN_WINDOW_CLOSES", "60")
        clean_env.setenv("ZEROHOUR_DEBUG", "TRUE")

        cfg = ZeroHourConfig.from_env()

        assert cfg.security.admin_token == "s3cret"
        assert cfg.api_port == 8080
        assert cfg.security.allowed_origins == ("http://a.test", "http://b.test")
        assert cfg.catalog.target_entity.name == "ACME CORP"
        assert cfg.catalog.target_entity.id == "E-08471"
        assert cfg.catalog.countdown.window_closes == 60
        assert cfg.debug is True

    def test_port_fallback(self, clean_env):
        clean_env.setenv("PORT", "5000")
        assert ZeroHourConfig.from_env().api_port == 5000

    def test_log_file_enables_file_logging(self, clean_env, tmp_path):
        clean_env.setenv("ZEROHOUR_LOG_FILE", str(tmp_path / "zh.log"))
        cfg = ZeroHourConfig.from_env()
        assert cfg.log.file_enabled is True
        assert cfg.log.file_path.endswith("zh.log")

    def test_bad_integer_is_config_error(self, clean_env):
        clean_env.setenv("ZEROHOUR_API_PORT", "three thousand")
        with pytest.raises(ZeroHourError) as exc_info:
            ZeroHourConfig.from_env()
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert exc_info.value.details["variable"] == "ZEROHOUR_API_PORT"


class TestValidation:
    def test_default_scenario_must_be_known(self):
        with pytest.raises(ValueError):
            CatalogConfig(default_scenario="nope")

    def test_default_state_must_be_known(self):
        with pytest.raises(ValueError):
            CatalogConfig(default_state="nope")


class TestSingleton:
    def test_get_config_is_cached(self, clean_env):
        set_config(None)
        assert get_config() is get_config()

    def test_set_config_replaces(self, clean_env):
        custom = ZeroHourConfig(api_port=9999)
        set_config(custom)
        assert get_config() is custom
        assert config_module._config is custom


def test_setup_logging_with_file(tmp_path):
    from zerohour.base.config import LogConfig

    log_path = tmp_path / "zerohour.log"
    cfg = ZeroHourConfig(log=LogConfig(level="WARNING", file_enabled=True, file_path=str(log_path)))
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    try:
        setup_logging(cfg)
        assert root.level == logging.WARNING
        logging.getLogger("zerohour.test").warning("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in log_path.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved[1]
        root.setLevel(saved[0])
