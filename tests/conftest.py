import pytest

from latlong.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Isolate every test from the developer's environment and cached settings."""
    # Point .env discovery at an empty file so a local .env cannot leak in.
    empty_env = tmp_path / "empty.env"
    empty_env.write_text("", encoding="utf-8")
    monkeypatch.setenv("LATLONG_ENV_FILE", str(empty_env))
    for name in ["LATLONG_CONFIG_PATH", "LATLONG_LOG_LEVEL", "LATLONG_EARTH_RADIUS_KM"]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
