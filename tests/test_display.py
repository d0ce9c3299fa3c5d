"""Configuration display wrapper tests.

The wrapper adds a source header and log flushing in front of
lib_layered_config's renderer; core rendering is that library's concern.
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from rootconf.adapters.config.display import display_config
from rootconf.adapters.memory import DisplaySpy
from rootconf.domain.enums import OutputFormat

# ======================== display_config - error paths ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_nonexistent_section(output_format: OutputFormat) -> None:
    """Requesting a section that doesn't exist must raise ValueError."""
    with pytest.raises(ValueError, match="not found"):
        display_config({"existing": {"key": "value"}}, output_format=output_format, section="nonexistent")


# ======================== display_config - rendering ========================


@pytest.mark.os_agnostic
def test_display_human_renders_values_and_source_header(capsys: pytest.CaptureFixture[str]) -> None:
    display_config(
        {"app_name": "myapp", "section": {"key": "val"}},
        output_format=OutputFormat.HUMAN,
        source=Path("/project/app.json"),
    )
    output = capsys.readouterr().out

    assert "# source:" in output
    assert "app.json" in output
    assert 'app_name = "myapp"' in output
    assert "[section]" in output


@pytest.mark.os_agnostic
def test_display_human_names_the_default_when_no_file_was_loaded(capsys: pytest.CaptureFixture[str]) -> None:
    display_config({"a": 1}, output_format=OutputFormat.HUMAN)

    assert "# source: default configuration" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_json_renders_output_without_header(capsys: pytest.CaptureFixture[str]) -> None:
    display_config({"section": {"key": "value"}}, output_format=OutputFormat.JSON, source=Path("/p/app.json"))
    output = capsys.readouterr().out

    assert "# source" not in output
    assert '"section"' in output
    assert '"key": "value"' in output


@pytest.mark.os_agnostic
def test_display_writes_header_to_the_given_console() -> None:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, width=120)

    display_config({"a": 1}, output_format=OutputFormat.HUMAN, source=Path("/p/app.json"), console=console)

    assert "# source:" in buffer.getvalue()


# ======================== DisplaySpy ========================


@pytest.mark.os_agnostic
def test_display_spy_records_requests() -> None:
    spy = DisplaySpy()

    spy.display_config({"a": 1}, output_format=OutputFormat.JSON, section="a", source=Path("/p/x.json"))

    assert spy.displayed == [
        {"config": {"a": 1}, "output_format": OutputFormat.JSON, "section": "a", "source": Path("/p/x.json")}
    ]


@pytest.mark.os_agnostic
def test_display_spy_mirrors_missing_section_error() -> None:
    with pytest.raises(ValueError, match="not found"):
        DisplaySpy().display_config({"a": 1}, section="b")
