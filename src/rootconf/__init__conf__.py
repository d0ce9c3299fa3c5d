"""Static package metadata surfaced to CLI commands and documentation.

Kept in sync with ``pyproject.toml`` so ``rootconf info`` and the layered
settings loader agree on names without consulting installed distribution
metadata at runtime.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - render the metadata block.
"""

from __future__ import annotations

name = "rootconf"
title = "Project-root configuration loader with validator pipelines"
version = "1.0.0"
homepage = "https://github.com/rootconf/rootconf"
author = "rootconf contributors"
author_email = "maintainers@rootconf.dev"
shell_command = "rootconf"

# Identifiers for lib_layered_config (app/host/user layer discovery).
LAYEREDCONF_VENDOR: str = "rootconf"
LAYEREDCONF_APP: str = "rootconf"
LAYEREDCONF_SLUG: str = "rootconf"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for rootconf:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
