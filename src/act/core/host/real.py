"""Production host implementation using sys, /proc and shutil."""

import shutil
import sys
from pathlib import Path

from act.core.host.abc import Host

PROC_VERSION = Path("/proc/version")


class RealHost(Host):
    """Reads facts from the running interpreter and filesystem."""

    def platform(self) -> str:
        return sys.platform

    def read_kernel_version(self) -> str | None:
        if not PROC_VERSION.exists():
            return None
        try:
            return PROC_VERSION.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return None

    def which(self, tool: str) -> str | None:
        return shutil.which(tool)
