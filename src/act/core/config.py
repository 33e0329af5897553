"""Toolkit configuration loaded from the bundled manifest.

Provides immutable configuration read once at the CLI entry point and stored
in ActContext. Nothing re-reads the manifest after startup.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from act.core.errors import ManifestError

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
MANIFEST_PATH = DATA_DIR / "toolkit.toml"

TOOLKIT_ROOT_ENV = "ACT_TOOLKIT_ROOT"


@dataclass(frozen=True)
class ToolkitConfig:
    """Immutable toolkit configuration.

    Attributes:
        version: Toolkit version string shown by `act version` and `act help`
        toolkit_root: Directory that registry targets are resolved against
        shell: Executable used to run delegated scripts
        required_tools: Executables that must resolve on PATH, checked in order
    """

    version: str
    toolkit_root: Path
    shell: str
    required_tools: tuple[str, ...]


def load_toolkit_config(
    manifest_path: Path = MANIFEST_PATH,
    environ: Mapping[str, str] | None = None,
) -> ToolkitConfig:
    """Load toolkit configuration from the manifest.

    The toolkit root defaults to the manifest's directory and can be
    overridden with ACT_TOOLKIT_ROOT.

    Args:
        manifest_path: Path to toolkit.toml
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ToolkitConfig with loaded values

    Raises:
        ManifestError: If the manifest is missing, unreadable, or lacks a version
    """
    if environ is None:
        environ = os.environ

    try:
        data = tomllib.loads(manifest_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(manifest_path, e.strerror or str(e)) from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(manifest_path, str(e)) from e

    section = data.get("toolkit")
    if not isinstance(section, dict):
        raise ManifestError(manifest_path, "missing [toolkit] table")

    version = section.get("version")
    if not isinstance(version, str) or not version:
        raise ManifestError(manifest_path, "missing 'version'")

    shell = section.get("shell", "bash")
    if not isinstance(shell, str) or not shell:
        raise ManifestError(manifest_path, "'shell' must be a non-empty string")

    tools = section.get("required_tools", [shell])
    if not isinstance(tools, list) or not all(isinstance(t, str) and t for t in tools):
        raise ManifestError(manifest_path, "'required_tools' must be a list of names")

    root_override = environ.get(TOOLKIT_ROOT_ENV)
    if root_override:
        toolkit_root = Path(root_override).expanduser().resolve()
    else:
        toolkit_root = manifest_path.parent

    return ToolkitConfig(
        version=version,
        toolkit_root=toolkit_root,
        shell=shell,
        required_tools=tuple(tools),
    )
