"""Place adapters - Implementations of PlaceResolverPort.

Available implementations:
- AMapPlaceResolver: AMap (Gaode) web service API
- BaiduPlaceResolver: Baidu Maps web service API
"""

from .amap_adapter import AMapPlaceResolver
from .baidu_adapter import BaiduPlaceResolver
from .base import RestPlaceResolver

__all__ = ["AMapPlaceResolver", "BaiduPlaceResolver", "RestPlaceResolver"]
