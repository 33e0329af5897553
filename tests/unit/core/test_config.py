"""Tests for loading the toolkit manifest."""

from pathlib import Path

import pytest

from act.core.config import MANIFEST_PATH, TOOLKIT_ROOT_ENV, load_toolkit_config
from act.core.errors import ManifestError


def write_manifest(tmp_path: Path, content: str) -> Path:
    manifest = tmp_path / "toolkit.toml"
    manifest.write_text(content, encoding="utf-8")
    return manifest


def test_loads_all_fields(tmp_path: Path) -> None:
    manifest = write_manifest(
        tmp_path,
        '[toolkit]\nversion = "2.3.4"\nshell = "bash"\nrequired_tools = ["bash", "git"]\n',
    )

    config = load_toolkit_config(manifest, environ={})

    assert config.version == "2.3.4"
    assert config.shell == "bash"
    assert config.required_tools == ("bash", "git")
    assert config.toolkit_root == tmp_path


def test_defaults_shell_and_tools(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path, '[toolkit]\nversion = "1.0.0"\n')

    config = load_toolkit_config(manifest, environ={})

    assert config.shell == "bash"
    assert config.required_tools == ("bash",)


def test_toolkit_root_env_override(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path, '[toolkit]\nversion = "1.0.0"\n')
    other_root = tmp_path / "checkout"
    other_root.mkdir()

    config = load_toolkit_config(manifest, environ={TOOLKIT_ROOT_ENV: str(other_root)})

    assert config.toolkit_root == other_root.resolve()


def test_missing_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(ManifestError) as exc_info:
        load_toolkit_config(tmp_path / "absent.toml", environ={})

    assert exc_info.value.message == "Could not read toolkit manifest"
    assert exc_info.value.path == tmp_path / "absent.toml"


@pytest.mark.parametrize(
    "content",
    [
        "not = [valid toml",
        'version = "1.0.0"\n',
        "[toolkit]\n",
        '[toolkit]\nversion = ""\n',
        '[toolkit]\nversion = "1.0.0"\nrequired_tools = "git"\n',
        '[toolkit]\nversion = "1.0.0"\nshell = ""\n',
    ],
)
def test_malformed_manifest_raises(tmp_path: Path, content: str) -> None:
    manifest = write_manifest(tmp_path, content)

    with pytest.raises(ManifestError):
        load_toolkit_config(manifest, environ={})


def test_bundled_manifest_is_valid() -> None:
    config = load_toolkit_config(MANIFEST_PATH, environ={})

    assert config.version
    assert config.shell == "bash"
    assert config.required_tools == ("bash", "git", "jq")
