import pytest
from pydantic import ValidationError

from wastebin_api.config import Settings
from wastebin_api.errors import ConfigError


ENV_VARS = [
    "SUPABASE_URL", "SUPABASE_KEY", "SUPABASE_TABLE", "SUPABASE_TIMEOUT",
    "SECURITY_M", "SECURITY_K", "HOST", "PORT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(load_env_file=False)

    assert settings.port == 3000
    assert settings.supabase_table == "wastebin_sensors"
    assert settings.supabase_url is None
    assert settings.security_m is None
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://xyz.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "key")
    monkeypatch.setenv("SECURITY_M", "m-secret")
    monkeypatch.setenv("SECURITY_K", "k-secret")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SUPABASE_TIMEOUT", "5.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env(load_env_file=False)

    assert settings.supabase_url == "https://xyz.supabase.co"
    assert settings.supabase_key == "key"
    assert settings.security_m == "m-secret"
    assert settings.security_k == "k-secret"
    assert settings.port == 8080
    assert settings.supabase_timeout == 5.5
    assert settings.log_level == "DEBUG"


def test_bad_port_raises(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ConfigError):
        Settings.from_env(load_env_file=False)


def test_settings_are_frozen():
    settings = Settings(security_m="a", security_k="b")

    with pytest.raises(ValidationError):
        settings.security_m = "c"
