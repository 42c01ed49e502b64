"""Provider deep-link synthesis."""

from .urls import build_amap_url, build_baidu_url, build_navigation_url

__all__ = ["build_amap_url", "build_baidu_url", "build_navigation_url"]
