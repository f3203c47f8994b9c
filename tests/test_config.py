# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# EPOCH: 1 - SERVICE BINDING
# STATUS: Tests - Platform config and handler defaults
# PURPOSE: Verify environment parsing for VCAP_* and BINDINGS_* variables
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import json

import pytest

from core.config import BindingDefaults, PlatformConfig, get_defaults, reset_defaults
from core.errors import ConfigurationError


PLATFORM_VARS = [
    "VCAP_SERVICES",
    "VCAP_APPLICATION",
    "TMPDIR",
    "VCAP_APP_HOST",
    "VCAP_APP_PORT",
    "BINDINGS_REQUIRED",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove platform variables so defaults apply."""
    for var in PLATFORM_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ============================================================================
# PLATFORM CONFIG
# ============================================================================

class TestPlatformConfig:
    """Tests for PlatformConfig.from_env."""

    def test_defaults(self, clean_env):
        config = PlatformConfig.from_env()
        assert config.services == {}
        assert config.app_info == {}
        assert config.tmp_dir == "/tmp"
        assert config.host == "localhost"
        assert config.port == 3000
        assert config.required_services == []

    def test_reads_platform_variables(self, clean_env):
        services = {"redis-2.6": [{"name": "c", "label": "redis-2.6", "credentials": {}}]}
        clean_env.setenv("VCAP_SERVICES", json.dumps(services))
        clean_env.setenv("VCAP_APPLICATION", json.dumps({"application_name": "shop"}))
        clean_env.setenv("TMPDIR", "/var/tmp")
        clean_env.setenv("VCAP_APP_HOST", "0.0.0.0")
        clean_env.setenv("VCAP_APP_PORT", "8080")
        clean_env.setenv("BINDINGS_REQUIRED", "db, redis,,")

        config = PlatformConfig.from_env()

        assert config.services == services
        assert config.app_info == {"application_name": "shop"}
        assert config.tmp_dir == "/var/tmp"
        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.required_services == ["db", "redis"]

    def test_invalid_json_raises(self, clean_env):
        clean_env.setenv("VCAP_SERVICES", "{not json")
        with pytest.raises(ConfigurationError):
            PlatformConfig.from_env()

    def test_non_object_json_raises(self, clean_env):
        clean_env.setenv("VCAP_APPLICATION", "[1, 2]")
        with pytest.raises(ConfigurationError):
            PlatformConfig.from_env()

    def test_invalid_port_raises(self, clean_env):
        clean_env.setenv("VCAP_APP_PORT", "eighty")
        with pytest.raises(ConfigurationError):
            PlatformConfig.from_env()


# ============================================================================
# BINDING DEFAULTS
# ============================================================================

class TestBindingDefaults:
    """Tests for BindingDefaults.from_env and the cached instance."""

    def test_builtin_versions(self):
        defaults = BindingDefaults()
        assert defaults.get_version("mongodb") == "2.2"
        assert defaults.get_version("rabbitmq") == "2.8"
        assert defaults.get_version("mysql") == "5.5"
        assert defaults.get_version("redis") == "2.6"
        assert defaults.connect_timeout_seconds == 30.0

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("BINDINGS_MYSQL_VERSION", "5.7")
        monkeypatch.setenv("BINDINGS_CONNECT_TIMEOUT", "2.5")

        defaults = BindingDefaults.from_env()

        assert defaults.get_version("mysql") == "5.7"
        assert defaults.get_version("redis") == "2.6"
        assert defaults.connect_timeout_seconds == 2.5

    def test_invalid_timeout_raises(self, monkeypatch):
        monkeypatch.setenv("BINDINGS_CONNECT_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            BindingDefaults.from_env()

    def test_get_defaults_cached_until_reset(self, monkeypatch):
        reset_defaults()
        monkeypatch.setenv("BINDINGS_REDIS_VERSION", "3.2")
        try:
            first = get_defaults()
            monkeypatch.setenv("BINDINGS_REDIS_VERSION", "4.0")
            assert get_defaults() is first
            assert first.get_version("redis") == "3.2"

            reset_defaults()
            assert get_defaults().get_version("redis") == "4.0"
        finally:
            monkeypatch.delenv("BINDINGS_REDIS_VERSION")
            reset_defaults()
