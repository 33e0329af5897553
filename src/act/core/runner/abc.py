"""Script execution abstraction.

This module provides abstraction over child-process execution, enabling
dependency injection for testing without running real scripts.
"""

from abc import ABC, abstractmethod


class ScriptRunner(ABC):
    """Abstract interface for running a delegated script."""

    @abstractmethod
    def run(self, argv: list[str]) -> int:
        """Run argv as a child process with the caller's stdin, stdout and stderr.

        Blocks until the child exits.

        Args:
            argv: Executable followed by its arguments

        Returns:
            The child's exit status, in the range 0-255

        Raises:
            LaunchFailureError: If the child process could not be started
        """
        ...
