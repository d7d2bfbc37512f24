from __future__ import annotations

from pathlib import Path

import pytest

from wayfinder.discovery import (
    DiscoveryRequest,
    DiscoverySource,
    directory_exists,
    find_directory,
    resolve_directory,
)


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home, raising=False)
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


def test_env_override_points_to_existing_directory(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_dir = workspace / "env-dir"
    env_dir.mkdir()
    (workspace / ".test").mkdir()
    monkeypatch.setenv("TEST_SUBDIR", str(env_dir))

    result = resolve_directory(
        DiscoveryRequest(subdirectory=".test", override_env_name="TEST", start_directory=workspace)
    )

    assert result.source is DiscoverySource.ENV_OVERRIDE
    assert result.path == env_dir
    assert result.exists is True


def test_relative_env_override_resolves_against_cwd(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (workspace / "custom").mkdir()
    monkeypatch.chdir(workspace)
    monkeypatch.setenv("TEST_SUBDIR", "custom")

    result = resolve_directory(DiscoveryRequest(subdirectory=".test", override_env_name="TEST"))

    assert result.path == Path.cwd() / "custom"
    assert result.exists is True


def test_finds_nested_subdirectory_from_deep_start(workspace: Path) -> None:
    target = workspace / ".prompts-mcp" / "prompts"
    target.mkdir(parents=True)
    deep = workspace / "a" / "b" / "c"
    deep.mkdir(parents=True)

    result = resolve_directory(
        DiscoveryRequest(
            subdirectory=".prompts-mcp/prompts",
            override_env_name="PROMPTS",
            start_directory=deep,
            use_home_fallback=False,
        )
    )

    assert result.path == target
    assert result.source is DiscoverySource.PROJECT
    assert result.exists is True


def test_project_dir_env_with_nested_start(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    knowledge = workspace / ".knowledge"
    knowledge.mkdir()
    nested = workspace / "packages" / "api"
    nested.mkdir(parents=True)
    monkeypatch.setenv("PROJECT_DIR", str(workspace))

    result = resolve_directory(DiscoveryRequest(subdirectory=".knowledge", start_directory=nested))

    assert result.path == knowledge
    assert result.source is DiscoverySource.ENV_PROJECT
    assert result.exists is True


def test_falls_back_to_home_directory(workspace: Path, home_dir: Path) -> None:
    (home_dir / ".wayfinder-home-test").mkdir()

    result = resolve_directory(DiscoveryRequest(subdirectory=".wayfinder-home-test", start_directory=workspace))

    assert result.source is DiscoverySource.HOME
    assert result.path == home_dir / ".wayfinder-home-test"
    assert result.exists is True


def test_defaults_to_current_working_directory(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = workspace / ".quiet-shell"
    target.mkdir()
    nested = workspace / "src"
    nested.mkdir()
    monkeypatch.chdir(nested)

    assert find_directory(DiscoveryRequest(subdirectory=".quiet-shell")) == Path.cwd().parent / ".quiet-shell"


def test_directory_exists_helpers(workspace: Path, home_dir: Path) -> None:
    (workspace / ".test").mkdir()

    assert directory_exists(DiscoveryRequest(subdirectory=".test", start_directory=workspace)) is True
    assert (
        directory_exists(
            DiscoveryRequest(
                subdirectory=".wayfinder-surely-missing", start_directory=workspace, use_home_fallback=False
            )
        )
        is False
    )
    assert find_directory(
        DiscoveryRequest(subdirectory=".wayfinder-surely-missing", start_directory=workspace, use_home_fallback=False)
    ) == workspace / ".wayfinder-surely-missing"


def test_symlinks_are_preserved(workspace: Path) -> None:
    real = workspace / "real"
    (real / ".tool").mkdir(parents=True)
    link = workspace / "link"
    link.symlink_to(real, target_is_directory=True)

    result = resolve_directory(DiscoveryRequest(subdirectory=".tool", start_directory=link))

    assert result.path == link / ".tool"
