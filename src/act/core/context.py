"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from act.core.config import ToolkitConfig, load_toolkit_config
from act.core.host.abc import Host
from act.core.host.real import RealHost
from act.core.registry import DEFAULT_REGISTRY, CommandRegistry
from act.core.runner.abc import ScriptRunner
from act.core.runner.real import RealScriptRunner


@dataclass(frozen=True)
class ActContext:
    """Immutable context holding all dependencies for a dispatch.

    Created at CLI entry point and threaded through click's ctx.obj.
    Frozen to prevent accidental modification at runtime.
    """

    config: ToolkitConfig
    registry: CommandRegistry
    host: Host
    runner: ScriptRunner

    @staticmethod
    def for_test(
        config: ToolkitConfig | None = None,
        registry: CommandRegistry | None = None,
        host: Host | None = None,
        runner: ScriptRunner | None = None,
        toolkit_root: Path | None = None,
    ) -> "ActContext":
        """Create test context with fakes for any unspecified dependency.

        Args:
            config: Optional ToolkitConfig. If None, uses version "0.0.0-test",
                shell "bash" and required tools bash, git and jq.
            registry: Optional registry. If None, uses DEFAULT_REGISTRY.
            host: Optional Host. If None, creates a FakeHost on linux with
                every required tool installed.
            runner: Optional ScriptRunner. If None, creates FakeScriptRunner
                that exits 0.
            toolkit_root: Toolkit root for the default config. Ignored when
                config is given. Defaults to Path("/test/toolkit").

        Returns:
            ActContext for CliRunner.invoke(obj=...)
        """
        from tests.fakes.host import FakeHost
        from tests.fakes.script_runner import FakeScriptRunner

        if config is None:
            config = ToolkitConfig(
                version="0.0.0-test",
                toolkit_root=toolkit_root if toolkit_root is not None else Path("/test/toolkit"),
                shell="bash",
                required_tools=("bash", "git", "jq"),
            )
        if host is None:
            host = FakeHost(
                installed_tools={tool: f"/usr/bin/{tool}" for tool in config.required_tools}
            )

        return ActContext(
            config=config,
            registry=registry if registry is not None else DEFAULT_REGISTRY,
            host=host,
            runner=runner if runner is not None else FakeScriptRunner(),
        )


def create_context() -> ActContext:
    """Create the production context.

    Raises:
        ManifestError: If the toolkit manifest cannot be loaded
    """
    return ActContext(
        config=load_toolkit_config(),
        registry=DEFAULT_REGISTRY,
        host=RealHost(),
        runner=RealScriptRunner(),
    )
