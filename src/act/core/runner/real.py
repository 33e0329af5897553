"""Production script runner using subprocess with inherited standard streams."""

import logging
import subprocess

from act.core.errors import LaunchFailureError
from act.core.runner.abc import ScriptRunner

logger = logging.getLogger(__name__)


def normalize_returncode(returncode: int) -> int:
    """Map a Popen return code to a process exit status.

    Negative codes mean the child was killed by a signal; report them the way
    POSIX shells do (128 + signal number).
    """
    if returncode < 0:
        return 128 + -returncode
    return returncode


class RealScriptRunner(ScriptRunner):
    """Runs the child with stdin/stdout/stderr attached to this process's streams."""

    def run(self, argv: list[str]) -> int:
        logger.debug("Launching: %s", argv)
        try:
            process = subprocess.Popen(argv)
        except OSError as e:
            raise LaunchFailureError(argv[0], e.strerror or str(e)) from e

        # Ctrl-C reaches the child through the process group; keep waiting so
        # its own exit status is what we report.
        while True:
            try:
                returncode = process.wait()
                break
            except KeyboardInterrupt:
                logger.debug("Interrupted while waiting for pid %d; still waiting", process.pid)

        logger.debug("Child pid %d exited with %d", process.pid, returncode)
        return normalize_returncode(returncode)
