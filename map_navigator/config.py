"""Centralized configuration using Pydantic Settings.

Every external collaborator reads its credentials and endpoints from
here. Configuration is assembled once and passed down explicitly.

The credential variables keep their conventional names:
- ANTHROPIC_API_KEY / ANTHROPIC_BASE_URL / ANTHROPIC_MODEL
- AMAP_MAPS_API_KEY
- BAIDU_MAPS_API_KEY
- XFYUN_APPID / XFYUN_API_KEY / XFYUN_API_SECRET

Runtime knobs use the NAVIGATOR_ prefix, e.g.
- NAVIGATOR_HTTP_TIMEOUT_SECONDS=5
- NAVIGATOR_PARALLEL_RESOLUTION=true
- NAVIGATOR_LOG_LEVEL=DEBUG

A ``.env`` file in the working directory is honoured.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseSettings):
    """Language model configuration.

    Environment variables prefixed with ANTHROPIC_.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANTHROPIC_", env_file=".env", extra="ignore"
    )

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: str = "claude-4.5-sonnet"
    max_tokens: int = 1024
    timeout_seconds: float = 60.0


class AMapConfig(BaseSettings):
    """AMap (Gaode) web service configuration.

    Environment variables prefixed with AMAP_MAPS_.
    """

    model_config = SettingsConfigDict(
        env_prefix="AMAP_MAPS_", env_file=".env", extra="ignore"
    )

    api_key: Optional[str] = None
    base_url: str = "https://restapi.amap.com"


class BaiduConfig(BaseSettings):
    """Baidu Maps web service configuration.

    Environment variables prefixed with BAIDU_MAPS_.
    """

    model_config = SettingsConfigDict(
        env_prefix="BAIDU_MAPS_", env_file=".env", extra="ignore"
    )

    api_key: Optional[str] = None
    base_url: str = "https://api.map.baidu.com"
    search_region: str = "全国"


class SpeechConfig(BaseSettings):
    """iFlytek (XFYUN) dictation configuration.

    Environment variables prefixed with XFYUN_.
    """

    model_config = SettingsConfigDict(
        env_prefix="XFYUN_", env_file=".env", extra="ignore"
    )

    appid: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    host: str = "iat-api.xfyun.cn"
    path: str = "/v2/iat"
    language: str = "zh_cn"
    accent: str = "mandarin"
    vad_eos_ms: int = 5000
    sample_rate: int = 16000
    timeout_seconds: float = 15.0


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with NAVIGATOR_LOG_.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAVIGATOR_LOG_", env_file=".env", extra="ignore"
    )

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class UIConfig(BaseSettings):
    """Front-end server configuration.

    Environment variables prefixed with NAVIGATOR_UI_.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAVIGATOR_UI_", env_file=".env", extra="ignore"
    )

    host: str = "127.0.0.1"
    port: int = 3000


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.amap.api_key)
        print(config.http_timeout_seconds)

    Environment variables prefixed with NAVIGATOR_.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAVIGATOR_", env_file=".env", extra="ignore"
    )

    llm: LLMConfig = Field(default_factory=LLMConfig)
    amap: AMapConfig = Field(default_factory=AMapConfig)
    baidu: BaiduConfig = Field(default_factory=BaiduConfig)
    speech: SpeechConfig = Field(default_factory=SpeechConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    http_timeout_seconds: float = 10.0
    parallel_resolution: bool = False


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
