"""External static-site build step, run after archiving."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class SiteBuildError(Exception):
    """Raised when the external site generator fails or cannot be started."""


class SiteBuilder:
    """
    Runs the configured site generator synchronously.

    The generator's output goes straight to the terminal. Any failure is
    fatal for the invocation that triggered it.
    """

    def __init__(self, command: Sequence[str], cwd: Path | str | None = None):
        self.command = list(command)
        self.cwd = Path(cwd) if cwd is not None else None

    def build(self) -> None:
        if not self.command:
            raise SiteBuildError("No site build command configured")

        logger.info(f"Building static site: {' '.join(self.command)}")
        try:
            subprocess.run(self.command, cwd=self.cwd, check=True)
        except FileNotFoundError as e:
            raise SiteBuildError(f"Site build command not found: {self.command[0]}") from e
        except subprocess.CalledProcessError as e:
            raise SiteBuildError(
                f"Site build failed with exit code {e.returncode}"
            ) from e
        logger.info("Static site built successfully")


__all__ = ["SiteBuilder", "SiteBuildError"]
