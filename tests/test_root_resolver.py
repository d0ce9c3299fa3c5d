"""Project root discovery tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from rootconf import ROOT_MARKER, ConfigError, ErrorKind, PathResolver
from rootconf.adapters.fs.root import _candidates

UNLIKELY_MARKER = ".rootconf-test-marker-8d2f"


@pytest.mark.os_agnostic
def test_default_marker_is_the_in_project_virtualenv() -> None:
    assert ROOT_MARKER == ".venv"
    assert PathResolver().marker == ".venv"


@pytest.mark.os_agnostic
def test_candidates_exclude_the_filesystem_anchor(tmp_path: Path) -> None:
    candidates = _candidates(tmp_path)

    assert candidates[0] == tmp_path
    assert Path(tmp_path.anchor) not in candidates


@pytest.mark.os_agnostic
def test_resolves_working_directory_when_it_holds_the_marker(project_dir: Path) -> None:
    assert PathResolver().resolve_root() == project_dir


@pytest.mark.os_agnostic
def test_resolves_nearest_ancestor_from_nested_directory(
    project_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    nested = project_dir / "src" / "pkg" / "deep"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert PathResolver().resolve_root() == project_dir


@pytest.mark.os_agnostic
def test_nearest_marker_wins_over_outer_one(project_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    inner = project_dir / "packages" / "inner"
    (inner / ".venv").mkdir(parents=True)
    monkeypatch.chdir(inner)

    assert PathResolver().resolve_root() == inner


@pytest.mark.os_agnostic
def test_custom_marker_is_honoured(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path.resolve()
    (root / UNLIKELY_MARKER).mkdir()
    (root / "a").mkdir()
    monkeypatch.chdir(root / "a")

    assert PathResolver(UNLIKELY_MARKER).resolve_root() == root


@pytest.mark.os_agnostic
def test_missing_marker_raises_not_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ConfigError, match="Could not find project root") as exc:
        PathResolver(UNLIKELY_MARKER).resolve_root()

    assert exc.value.kind is ErrorKind.NOT_FOUND


@pytest.mark.os_agnostic
def test_root_is_cached_after_first_resolution(project_dir: Path) -> None:
    resolver = PathResolver()
    first = resolver.resolve_root()
    shutil.rmtree(project_dir / ".venv")

    assert resolver.resolve_root() == first
    assert resolver.root == first


@pytest.mark.os_agnostic
def test_reset_forces_a_fresh_probe(project_dir: Path) -> None:
    resolver = PathResolver()
    resolver.resolve_root()
    shutil.rmtree(project_dir / ".venv")

    resolver.reset()

    assert resolver.root is None
    with pytest.raises(ConfigError) as exc:
        resolver.resolve_root()
    assert exc.value.kind is ErrorKind.NOT_FOUND


@pytest.mark.os_agnostic
def test_failed_resolution_caches_nothing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path.resolve()
    monkeypatch.chdir(root)
    resolver = PathResolver(UNLIKELY_MARKER)
    with pytest.raises(ConfigError):
        resolver.resolve_root()

    (root / UNLIKELY_MARKER).mkdir()

    assert resolver.resolve_root() == root


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_async_resolution_matches_blocking_resolution(project_dir: Path) -> None:
    assert await PathResolver().resolve_root_async() == PathResolver().resolve_root()


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_async_and_blocking_resolution_share_one_cache(project_dir: Path) -> None:
    resolver = PathResolver()
    first = await resolver.resolve_root_async()
    shutil.rmtree(project_dir / ".venv")

    assert resolver.resolve_root() == first


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_async_missing_marker_raises_not_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ConfigError) as exc:
        await PathResolver(UNLIKELY_MARKER).resolve_root_async()

    assert exc.value.kind is ErrorKind.NOT_FOUND
