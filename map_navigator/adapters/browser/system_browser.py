"""System browser launcher.

Opens URLs with the platform opener, always passing the URL as a
single argument-vector element so no shell ever parses it. Deep links
contain ``$``, ``&`` and quotes, none of which may be interpreted.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ...domain.errors import LaunchError


def opener_command(url: str, platform: str) -> List[str]:
    """Return the argument vector that opens ``url`` on ``platform``.

    Args:
        url: URL to open, passed through unchanged.
        platform: A ``sys.platform`` value other than ``win32``.
    """
    if platform == "darwin":
        return ["open", url]
    return ["xdg-open", url]


@dataclass
class SystemBrowserLauncher:
    """BrowserLauncherPort implementation using the OS opener.

    Attributes:
        platform: ``sys.platform`` value deciding which opener is used
        runner: Callable used to run the opener (``subprocess.run``)
        timeout_seconds: How long to wait for the opener to return
    """

    platform: str = field(default_factory=lambda: sys.platform)
    runner: Callable[..., subprocess.CompletedProcess] = field(
        default=subprocess.run, repr=False
    )
    timeout_seconds: Optional[float] = 30.0

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def open(self, url: str) -> None:
        """Open a URL in the default browser.

        Raises:
            LaunchError: If the opener is missing, times out or exits non-zero.
        """
        self._logger.info(
            "Opening navigation URL",
            extra={"platform": self.platform, "url": url},
        )

        if self.platform == "win32":
            self._open_windows(url)
            return

        command = opener_command(url, self.platform)
        try:
            self.runner(
                command,
                check=True,
                capture_output=True,
                timeout=self.timeout_seconds,
            )
        except (OSError, subprocess.SubprocessError) as e:
            self._logger.error(
                "Browser launch failed",
                extra={"command": command[0], "error": str(e)},
            )
            raise LaunchError(
                f"Failed to open browser with {command[0]}", cause=e, url=url
            )

    def _open_windows(self, url: str) -> None:
        # ShellExecute with the URL as a single argument; no cmd.exe parsing.
        startfile = getattr(os, "startfile", None)
        if startfile is None:
            raise LaunchError("os.startfile is not available", url=url)
        try:
            startfile(url)
        except OSError as e:
            self._logger.error("Browser launch failed", extra={"error": str(e)})
            raise LaunchError("Failed to open browser", cause=e, url=url)
