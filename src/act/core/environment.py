"""Environment gate run before any script is delegated.

Checks that the host can run the toolkit's shell and that every required
tool resolves on PATH. Both checks fail fast on the first problem.
"""

import logging

from act.core.config import ToolkitConfig
from act.core.errors import MissingDependencyError, PlatformUnsupportedError
from act.core.host.abc import Host

logger = logging.getLogger(__name__)


def is_wsl(host: Host) -> bool:
    """Detect the Windows Subsystem for Linux from the kernel version string."""
    kernel_version = host.read_kernel_version()
    if kernel_version is None:
        return False
    return "microsoft" in kernel_version.lower()


def check_platform(host: Host, shell: str) -> None:
    """Raise PlatformUnsupportedError on native Windows.

    Windows hosts that identify as WSL are treated as POSIX.
    """
    platform = host.platform()
    if platform != "win32":
        return
    if is_wsl(host):
        logger.debug("win32 platform identified as WSL")
        return
    raise PlatformUnsupportedError(shell)


def check_dependencies(host: Host, tools: tuple[str, ...]) -> None:
    """Raise MissingDependencyError for the first tool not found on PATH."""
    for tool in tools:
        resolved = host.which(tool)
        if resolved is None:
            raise MissingDependencyError(tool)
        logger.debug("Resolved %s -> %s", tool, resolved)


def check_environment(host: Host, config: ToolkitConfig) -> None:
    """Run the platform check followed by the dependency check."""
    check_platform(host, config.shell)
    check_dependencies(host, config.required_tools)
