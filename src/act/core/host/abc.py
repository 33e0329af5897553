"""Host environment abstraction.

Wraps the platform facts the environment gate depends on so tests can
simulate unsupported hosts and missing tools without mock.patch.
"""

from abc import ABC, abstractmethod


class Host(ABC):
    """Abstract view of the machine act is running on."""

    @abstractmethod
    def platform(self) -> str:
        """Return the interpreter's platform identifier (e.g. "linux", "win32")."""
        ...

    @abstractmethod
    def read_kernel_version(self) -> str | None:
        """Return the contents of /proc/version, or None if it cannot be read."""
        ...

    @abstractmethod
    def which(self, tool: str) -> str | None:
        """Resolve an executable on PATH.

        Returns:
            Absolute path to the executable, or None if it is not on PATH
        """
        ...
