"""Tests for environment-driven configuration."""

from map_navigator.config import AppConfig, get_config, reset_config


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.api_key is None
        assert config.llm.model == "claude-4.5-sonnet"
        assert config.llm.max_tokens == 1024
        assert config.amap.base_url == "https://restapi.amap.com"
        assert config.baidu.search_region == "全国"
        assert config.speech.host == "iat-api.xfyun.cn"
        assert config.speech.sample_rate == 16000
        assert config.http_timeout_seconds == 10.0
        assert config.parallel_resolution is False
        assert config.ui.port == 3000

    def test_credentials_from_conventional_names(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        monkeypatch.setenv("ANTHROPIC_MODEL", "claude-custom")
        monkeypatch.setenv("AMAP_MAPS_API_KEY", "amap")
        monkeypatch.setenv("BAIDU_MAPS_API_KEY", "baidu")
        monkeypatch.setenv("XFYUN_APPID", "app")
        monkeypatch.setenv("XFYUN_API_KEY", "key")
        monkeypatch.setenv("XFYUN_API_SECRET", "secret")

        config = AppConfig()

        assert config.llm.api_key == "sk-test"
        assert config.llm.model == "claude-custom"
        assert config.amap.api_key == "amap"
        assert config.baidu.api_key == "baidu"
        assert (config.speech.appid, config.speech.api_key, config.speech.api_secret) == (
            "app",
            "key",
            "secret",
        )

    def test_runtime_knobs(self, monkeypatch):
        monkeypatch.setenv("NAVIGATOR_HTTP_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("NAVIGATOR_PARALLEL_RESOLUTION", "true")
        monkeypatch.setenv("NAVIGATOR_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("NAVIGATOR_UI_PORT", "8080")

        config = AppConfig()

        assert config.http_timeout_seconds == 2.5
        assert config.parallel_resolution is True
        assert config.observability.level == "DEBUG"
        assert config.ui.port == 8080

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("AMAP_MAPS_API_KEY=from-dotenv\n", encoding="utf-8")
        assert AppConfig().amap.api_key == "from-dotenv"


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("BAIDU_MAPS_API_KEY", "new")
    assert get_config().baidu.api_key is None
    reset_config()
    assert get_config().baidu.api_key == "new"
