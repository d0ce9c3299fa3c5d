"""Shared pytest fixtures for store, filesystem, and CLI tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from rootconf.adapters.memory import DisplaySpy, InMemoryFileSystem, InMemoryResolver
from rootconf.application.store import ConfigStore, StoreOptions
from rootconf.composition import build_memory_store_adapters, build_testing

if TYPE_CHECKING:
    from rootconf.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g., JSON parsing) so log
    records on stderr never contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from rootconf.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_settings_cache() -> Iterator[None]:
    """Clear the get_settings lru_cache before each test.

    Only clears before, not after, to avoid errors when the function has
    been monkeypatched during the test (losing its cache_clear method).
    """
    from rootconf.adapters.config import settings as settings_mod

    settings_mod.get_settings.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


# ======================== project trees on disk ========================


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create ``<tmp>/project/.venv`` and make ``project`` the working directory.

    Returns:
        Path: The project root, resolved so comparisons with ``Path.cwd()``
            survive symlinked temp directories.
    """
    root = (tmp_path / "project").resolve()
    (root / ".venv").mkdir(parents=True)
    monkeypatch.chdir(root)
    return root


# ======================== in-memory stores ========================


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    """Empty in-memory filesystem with call accounting."""
    return InMemoryFileSystem()


@pytest.fixture
def memory_resolver() -> InMemoryResolver:
    """Resolver fixed on ``/project`` that counts probes."""
    return InMemoryResolver()


@pytest.fixture
def make_memory_store(
    memory_fs: InMemoryFileSystem,
    memory_resolver: InMemoryResolver,
) -> Callable[..., ConfigStore[Any]]:
    """Return a factory building stores on the shared in-memory fixtures.

    Example:
        def test_load(make_memory_store, memory_fs) -> None:
            memory_fs.put("/project/app.json", '{"a": 1}')
            store = make_memory_store("app.json")
    """

    def _make(file_name: str, default: Any = None) -> ConfigStore[Any]:
        return ConfigStore(
            StoreOptions(file_name=file_name, default=default),
            build_memory_store_adapters(memory_fs, memory_resolver),
        )

    return _make


@dataclass
class MemoryCliContext:
    """Services factory plus the in-memory pieces behind it.

    Attributes:
        factory: Callable returning wired AppServices for CLI invocation.
        fs: Filesystem every store built by the services reads from.
        resolver: Root resolver those stores share.
        spy: DisplaySpy recording ``show`` output.
    """

    factory: Callable[[], AppServices]
    fs: InMemoryFileSystem
    resolver: InMemoryResolver
    spy: DisplaySpy


@pytest.fixture
def cli_services() -> Callable[..., AppServices]:
    """Return ``build_testing`` wired with the production logging initializer.

    Commands bind lib_log_rich job context, which needs a live runtime.

    Example:
        def test_root(cli_services) -> None:
            services = cli_services(resolver=InMemoryResolver(root=None))
    """
    from rootconf.adapters.logging import init_logging

    def _build(**overrides: Any) -> AppServices:
        return build_testing(init_logging=init_logging, **overrides)

    return _build


@pytest.fixture
def memory_cli(
    memory_fs: InMemoryFileSystem,
    memory_resolver: InMemoryResolver,
    cli_services: Callable[..., AppServices],
) -> MemoryCliContext:
    """Wire CLI services around shared fixtures so tests can inspect them."""
    spy = DisplaySpy()

    def _factory() -> AppServices:
        return cli_services(fs=memory_fs, resolver=memory_resolver, spy=spy)

    return MemoryCliContext(factory=_factory, fs=memory_fs, resolver=memory_resolver, spy=spy)
