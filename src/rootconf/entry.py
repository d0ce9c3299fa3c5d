"""Production entry point behind the ``rootconf`` console script.

Lives beside the package root rather than under ``adapters`` because it is
the one place allowed to hand the composition root to the CLI adapter.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``rootconf`` with real filesystem, settings and logging adapters."""
    return run_cli(argv, services_factory=build_production)


__all__ = ["main"]
