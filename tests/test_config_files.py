from __future__ import annotations

from pathlib import Path

import pytest

from zoomedit import files
from zoomedit.clipboard import (
    ClipboardError,
    MemoryClipboard,
    SystemClipboard,
    create_clipboard,
)
from zoomedit.config import EditorConfig
from zoomedit.runtime import telemetry


def test_config_defaults_without_environment() -> None:
    config = EditorConfig.from_env({})

    assert config == EditorConfig()
    assert config.pan_step == 5
    assert config.default_path == "editor_content.txt"


def test_config_reads_prefixed_variables() -> None:
    config = EditorConfig.from_env(
        {
            "ZOOMEDIT_PAN_STEP": "8",
            "ZOOMEDIT_SCALE_STEP": "0.25",
            "ZOOMEDIT_DEFAULT_PATH": "notes.txt",
            "ZOOMEDIT_CLIPBOARD": "Memory",
        }
    )

    assert config.pan_step == 8
    assert config.scale_step == 0.25
    assert config.default_path == "notes.txt"
    assert config.clipboard == "memory"


def test_config_falls_back_on_bad_values() -> None:
    config = EditorConfig.from_env(
        {
            "ZOOMEDIT_PAN_STEP": "lots",
            "ZOOMEDIT_SCALE_STEP": "0",
            "ZOOMEDIT_CLIPBOARD": "carrier-pigeon",
        }
    )

    assert config.pan_step == 5
    assert config.scale_step == 0.1
    assert config.clipboard == "system"


def test_save_then_load_preserves_text(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"

    files.save_text(target, "one\ntwo\n")

    assert files.load_text(target) == "one\ntwo\n"
    assert files.load_initial(str(target)) == "one\ntwo\n"


def test_load_initial_without_path_uses_sample() -> None:
    assert files.load_initial(None) == files.sample_text()
    assert files.sample_text()


def test_load_initial_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        files.load_initial(str(tmp_path / "missing.txt"))


def test_help_text_mentions_return_key() -> None:
    assert "F5" in files.help_text().splitlines()[0]


def test_memory_clipboard_round_trips_and_fails_on_demand() -> None:
    clipboard = MemoryClipboard()
    clipboard.copy("abc")
    assert clipboard.paste() == "abc"

    broken = MemoryClipboard(error="no display")
    with pytest.raises(ClipboardError, match="no display"):
        broken.paste()


def test_create_clipboard_by_kind() -> None:
    assert isinstance(create_clipboard("memory"), MemoryClipboard)
    assert isinstance(create_clipboard("system"), SystemClipboard)
    with pytest.raises(ValueError):
        create_clipboard("ftp")


def test_main_reports_unreadable_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    from zoomedit.adapters.textual.app import _parse_args, main

    args = _parse_args(["notes.txt", "--memory-clipboard"])
    assert args.path == "notes.txt"
    assert args.memory_clipboard is True
    assert args.log_file is None

    try:
        code = main([str(tmp_path / "missing.txt")])
    finally:
        telemetry.configure(preset="quiet")

    assert code == 1
    assert "cannot open" in capsys.readouterr().err
