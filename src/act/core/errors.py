"""Dispatcher-detected failures.

Core modules raise these; the CLI layer renders them on stderr and exits 1.
A delegated script exiting non-zero is not represented here: its status is
propagated as the process exit code.
"""

from pathlib import Path


class DispatchError(Exception):
    """Base class for failures that abort an invocation before or at delegation.

    Attributes:
        message: One-line description, rendered after the "Error: " prefix
        hints: Follow-up lines telling the user how to recover
    """

    def __init__(self, message: str, hints: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.hints = hints


class ManifestError(DispatchError):
    """The toolkit manifest is missing, unreadable, or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__("Could not read toolkit manifest", (f"  {path}: {reason}",))
        self.path = path


class PlatformUnsupportedError(DispatchError):
    def __init__(self, shell: str) -> None:
        super().__init__(
            f"act requires {shell}, which is not available on native Windows.",
            ("Hint: Install WSL2 (https://aka.ms/wsl) and run act from a WSL terminal.",),
        )


class MissingDependencyError(DispatchError):
    def __init__(self, tool: str) -> None:
        super().__init__(
            f'Required dependency "{tool}" not found on PATH.',
            ("Install it and try again.",),
        )
        self.tool = tool


class UnknownCommandError(DispatchError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown command: {name}",
            ('Run "act help" to see available commands.',),
        )
        self.name = name


class MissingSubCommandError(DispatchError):
    def __init__(self, group: str, available: tuple[str, ...]) -> None:
        super().__init__(f'"{group}" requires a subcommand: {", ".join(available)}')
        self.group = group
        self.available = available


class UnknownSubCommandError(DispatchError):
    def __init__(self, group: str, name: str, available: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown {group} subcommand: {name}",
            (f"Available: {', '.join(available)}",),
        )
        self.group = group
        self.name = name
        self.available = available


class ScriptNotFoundError(DispatchError):
    """The registry points at a script the installation does not contain."""

    def __init__(self, script_path: Path) -> None:
        super().__init__(
            f"Script not found: {script_path}",
            (
                "This script may not be included in the current installation.",
                "Try reinstalling: pip install --force-reinstall autonomous-coding-toolkit",
            ),
        )
        self.script_path = script_path


class LaunchFailureError(DispatchError):
    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(f"Failed to launch {executable}: {reason}")
        self.executable = executable
