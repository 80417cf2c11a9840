from typing import Optional, get_type_hints

from config import Settings, configure_logging


def test_configure_logging_level_is_optional():
    assert get_type_hints(configure_logging)["level"] == Optional[str]
    configure_logging()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("PAGE_SIZE", "3")
    loaded = Settings()
    assert loaded.jwt_secret == "from-env"
    assert loaded.page_size == 3
