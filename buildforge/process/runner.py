from __future__ import annotations

import logging
import os
import subprocess
import time

from buildforge.console import Console

from .duration import format_duration
from .types import CommandError, ExecutionResult

logger = logging.getLogger(__name__)

STRICT_MODE = "set -e; set -u; set -o pipefail; "
DEFAULT_SHELL = "/bin/bash"


class ProcessRunner:
    """Runs external commands one at a time through a strict-mode shell."""

    def __init__(
        self,
        *,
        verbose: bool = False,
        console: Console | None = None,
        shell: str = DEFAULT_SHELL,
        env: dict[str, str] | None = None,
    ):
        self.verbose = verbose
        self.console = console or Console()
        self.shell = shell
        self.env = env

    def run(
        self,
        command: str,
        *,
        quiet: bool = False,
        timed: bool = False,
        survive: bool = False,
    ) -> ExecutionResult:
        silence = quiet and not self.verbose
        logger.debug("Running: %s", command)

        start = time.monotonic()
        completed = subprocess.run(
            STRICT_MODE + command,
            shell=True,
            executable=self.shell,
            env=self._environment(),
            stdout=subprocess.DEVNULL if silence else None,
            stderr=subprocess.DEVNULL if silence else None,
        )
        duration = time.monotonic() - start

        result = ExecutionResult(command, completed.returncode, duration)
        logger.debug("Exit code %d after %.3fs", result.returncode, duration)

        if not result.success:
            if not survive:
                raise CommandError(result)
            logger.debug("Tolerating failure of: %s", command)

        if timed:
            self.console.say(f"Finished in {format_duration(duration)}")

        return result

    def capture(self, command: str) -> str:
        logger.debug("Capturing: %s", command)

        start = time.monotonic()
        completed = subprocess.run(
            STRICT_MODE + command,
            shell=True,
            executable=self.shell,
            env=self._environment(),
            stdout=subprocess.PIPE,
            stderr=None if self.verbose else subprocess.DEVNULL,
            text=True,
        )
        duration = time.monotonic() - start

        result = ExecutionResult(command, completed.returncode, duration)
        if not result.success:
            raise CommandError(result)

        return completed.stdout

    def _environment(self) -> dict[str, str] | None:
        if self.env is None:
            return None
        return {**os.environ, **self.env}
