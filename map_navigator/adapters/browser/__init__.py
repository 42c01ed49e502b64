"""Browser adapters - Implementations of BrowserLauncherPort.

Available implementations:
- SystemBrowserLauncher: platform opener invoked without a shell
"""

from .system_browser import SystemBrowserLauncher

__all__ = ["SystemBrowserLauncher"]
