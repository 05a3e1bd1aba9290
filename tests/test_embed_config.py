import ogembed.embed.config as config


def test_get_footer_mode_default(monkeypatch):
    monkeypatch.delenv("OGEMBED_FOOTER_MODE", raising=False)
    assert config.get_footer_mode() == "merge"


def test_get_footer_mode_env_override(monkeypatch):
    monkeypatch.setenv("OGEMBED_FOOTER_MODE", " Separate ")
    assert config.get_footer_mode() == "separate"


def test_get_footer_mode_unknown_value_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("OGEMBED_FOOTER_MODE", "inline")
    assert config.get_footer_mode() == "merge"
    assert "Unknown OGEMBED_FOOTER_MODE" in caplog.text


def test_get_public_url_strips_trailing_slash(monkeypatch):
    monkeypatch.setenv("OGEMBED_PUBLIC_URL", "https://cards.example.com/ ")
    assert config.get_public_url() == "https://cards.example.com"
    monkeypatch.setenv("OGEMBED_PUBLIC_URL", "")
    assert config.get_public_url() is None


def test_get_default_port(monkeypatch):
    monkeypatch.delenv("OGEMBED_PORT", raising=False)
    assert config.get_default_port() == 8000
    monkeypatch.setenv("OGEMBED_PORT", "9100")
    assert config.get_default_port() == 9100
    monkeypatch.setenv("OGEMBED_PORT", "abc")
    assert config.get_default_port() == 8000
    monkeypatch.setenv("OGEMBED_PORT", "70000")
    assert config.get_default_port() == 8000


def test_get_default_host_and_log_level(monkeypatch):
    monkeypatch.delenv("OGEMBED_HOST", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config.get_default_host() == "127.0.0.1"
    assert config.get_log_level() == "DEBUG"


def test_cache_policy_per_mode():
    assert config.max_age_for_mode("merge") == 300
    assert config.max_age_for_mode("separate") == 3600
    assert config.cache_control(300) == "public, max-age=300, stale-while-revalidate=86400"
