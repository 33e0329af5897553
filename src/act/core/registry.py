"""Static command table mapping command names to toolkit scripts.

Each entry is either a CommandEntry (one script) or a CommandGroup that owns
its own table of sub-commands. Lookups are exact and case-sensitive.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


@dataclass(frozen=True)
class CommandEntry:
    """A command delegated to a single script.

    Attributes:
        target: Script path relative to the toolkit root
        fixed_args: Arguments always placed before the user's arguments
        usage: Argument synopsis shown in help, e.g. "<file> [flags]"
        summary: One-line description shown in help
        section: Help section heading the command is listed under
    """

    target: str
    fixed_args: tuple[str, ...] = ()
    usage: str = ""
    summary: str = ""
    section: str = ""

    def __post_init__(self) -> None:
        if not self.target:
            raise ValueError("CommandEntry target must be non-empty")


@dataclass(frozen=True)
class CommandGroup:
    """A command whose first argument selects one of its sub-commands."""

    subcommands: Mapping[str, CommandEntry]
    summary: str = ""
    section: str = ""

    def __post_init__(self) -> None:
        if not self.subcommands:
            raise ValueError("CommandGroup requires at least one subcommand")
        object.__setattr__(self, "subcommands", MappingProxyType(dict(self.subcommands)))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.subcommands)

    def get(self, name: str) -> CommandEntry | None:
        return self.subcommands.get(name)


RegistryEntry = CommandEntry | CommandGroup


@dataclass(frozen=True)
class CommandRegistry:
    """Read-only table of top-level commands, in help display order."""

    entries: Mapping[str, RegistryEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, name: str) -> RegistryEntry | None:
        return self.entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def sections(self) -> dict[str, list[tuple[str, RegistryEntry]]]:
        """Group entries by help section, preserving registration order."""
        grouped: dict[str, list[tuple[str, RegistryEntry]]] = {}
        for name, entry in self.entries.items():
            grouped.setdefault(entry.section, []).append((name, entry))
        return grouped


@dataclass(frozen=True)
class Invocation:
    """The command-line split into the command that was asked for and its arguments.

    sub_command_name is only set when command_name names a CommandGroup.
    """

    command_name: str
    sub_command_name: str | None
    remaining_args: tuple[str, ...]


def build_argv(
    shell: str, script_path: Path, entry: CommandEntry, user_args: tuple[str, ...]
) -> list[str]:
    """Build the child process argv: shell, script, fixed args, then user args."""
    return [shell, str(script_path), *entry.fixed_args, *user_args]


def _script(name: str, usage: str, summary: str, section: str) -> CommandEntry:
    return CommandEntry(
        target=f"scripts/{name}", usage=usage, summary=summary, section=section
    )


LESSONS_GROUP = CommandGroup(
    subcommands={
        "pull": CommandEntry(
            target="scripts/pull-community-lessons.sh",
            summary="Pull community lessons from upstream",
        ),
        "check": CommandEntry(
            target="scripts/lesson-check.sh",
            fixed_args=("--list",),
            summary="List active lesson checks",
        ),
        "promote": CommandEntry(
            target="scripts/promote-mab-lessons.sh",
            summary="Promote MAB-discovered lessons",
        ),
        "infer": CommandEntry(
            target="scripts/scope-infer.sh",
            summary="Infer scope metadata for lesson files",
        ),
    },
    summary="Manage lesson files",
    section="Lessons",
)


DEFAULT_REGISTRY = CommandRegistry(
    entries={
        # Execution
        "plan": _script(
            "run-plan.sh", "<file> [flags]", "Headless/team/MAB batch execution", "Execution"
        ),
        "compound": _script(
            "auto-compound.sh", "[dir]", "Full pipeline: report→PRD→execute→PR", "Execution"
        ),
        "mab": _script("mab-run.sh", "<flags>", "Multi-Armed Bandit competing agents", "Execution"),
        # Quality
        "gate": _script(
            "quality-gate.sh",
            "[flags]",
            "Composite quality gate (lesson-check + tests + memory)",
            "Quality",
        ),
        "check": _script(
            "lesson-check.sh",
            "[files...]",
            "Syntactic anti-pattern scan from lesson files",
            "Quality",
        ),
        "policy": _script(
            "policy-check.sh", "[files...]", "Advisory positive-pattern checker", "Quality"
        ),
        "research-gate": _script(
            "research-gate.sh", "[flags]", "Block PRD if unresolved research issues", "Quality"
        ),
        "validate": _script("validate-all.sh", "", "Run all validators", "Quality"),
        "validate-plan": _script(
            "validate-plan-quality.sh", "<file>", "Validate plan quality score", "Quality"
        ),
        "validate-prd": _script(
            "validate-prd.sh", "[file]", "Validate PRD shell-command criteria", "Quality"
        ),
        # Lessons
        "lessons": LESSONS_GROUP,
        # Analysis
        "audit": _script(
            "entropy-audit.sh", "[flags]", "Entropy audit: doc drift, naming violations", "Analysis"
        ),
        "batch-audit": _script(
            "batch-audit.sh", "[flags]", "Cross-project audit runner", "Analysis"
        ),
        "batch-test": _script(
            "batch-test.sh", "[flags]", "Memory-aware cross-project test runner", "Analysis"
        ),
        "analyze": _script(
            "analyze-report.sh", "[report]", "Analyze audit/test report", "Analysis"
        ),
        "digest": _script(
            "failure-digest.sh", "[flags]", "Failure digest from run logs", "Analysis"
        ),
        "status": _script("pipeline-status.sh", "[flags]", "Pipeline status summary", "Analysis"),
        "architecture": _script(
            "architecture-map.sh", "[flags]", "Generate architecture map", "Analysis"
        ),
        # Telemetry
        "telemetry": _script("telemetry.sh", "[flags]", "Telemetry reporting", "Telemetry"),
        # Benchmarks live under benchmarks/, not scripts/
        "benchmark": CommandEntry(
            target="benchmarks/runner.sh",
            usage="[flags]",
            summary="Run benchmark suite",
            section="Benchmarks",
        ),
        # Setup
        "init": _script("init.sh", "[flags]", "Initialize toolkit in current project", "Setup"),
        "license-check": _script(
            "license-check.sh", "[flags]", "Check dependency licenses", "Setup"
        ),
        "module-size": _script(
            "module-size-check.sh", "[flags]", "Check module sizes against budget", "Setup"
        ),
    }
)
