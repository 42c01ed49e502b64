"""Browser port - Abstraction for opening a URL on the host."""

from __future__ import annotations

from typing import Protocol


class BrowserLauncherPort(Protocol):
    """Port for the OS "open URL in default browser" capability.

    Implementation: adapters/browser/system_browser.py
    """

    def open(self, url: str) -> None:
        """Open a URL in the default browser.

        Args:
            url: The URL to open, passed through unchanged.

        Raises:
            LaunchError: If the opener could not be started or failed.
        """
        ...
