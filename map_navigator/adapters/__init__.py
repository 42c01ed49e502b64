"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Map provider web services (AMap, Baidu)
- Language models (Anthropic)
- The host browser
- Speech recognition (iFlytek)
"""
