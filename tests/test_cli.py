"""Tests for the ``revemap`` command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from alphabet import Alphabet
from revemap import EnumResolutionError, cli
from revemap.cli import setup_logging
from revemap.config import MapSettings, save_settings


@pytest.fixture(autouse=True)
def recorded_logging(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str | None, str | None]]:
    calls: list[tuple[str | None, str | None]] = []

    def fake_setup(level: str | None = None, log_file: str | None = None) -> None:
        calls.append((level, log_file))

    monkeypatch.setattr(cli, "setup_logging", fake_setup)
    monkeypatch.delenv("REVEMAP_LOG_LEVEL", raising=False)
    return calls


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, object]:
    status = cli.main(list(argv))
    return status, yaml.safe_load(capsys.readouterr().out)


def test_forward_map_is_printed(capsys: pytest.CaptureFixture[str]) -> None:
    status, payload = _run(capsys, "alphabet:Alphabet")

    assert status == 0
    assert payload == {"ALFA": "Alfa", "BRAVO": "Bravo", "CHARLIE": "Charlie"}


def test_reverse_map_by_value(capsys: pytest.CaptureFixture[str]) -> None:
    status, payload = _run(capsys, "alphabet:Alphabet", "--reverse", "--key", "value")

    assert status == 0
    assert payload == {1: "ALFA", 2: "BRAVO", 3: "CHARLIE"}


def test_range_restricts_members(capsys: pytest.CaptureFixture[str]) -> None:
    status, payload = _run(capsys, "alphabet:Alphabet", "--range", "BRAVO", "CHARLIE", "--key", "name")

    assert status == 0
    assert payload == {"BRAVO": "BRAVO", "CHARLIE": "CHARLIE"}


def test_settings_supply_default_key_style(capsys: pytest.CaptureFixture[str]) -> None:
    save_settings(MapSettings(key_style="value"))

    status, payload = _run(capsys, "alphabet:Alphabet")

    assert status == 0
    assert payload == {"ALFA": 1, "BRAVO": 2, "CHARLIE": 3}


def test_colliding_reverse_map_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["alphabet:Clash", "--reverse"]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["alphabet"],
        ["alphabet:Missing"],
        ["revemap_no_such_module:Enum"],
        ["alphabet:DescendingDict"],
        ["alphabet:Alphabet", "--range", "ALFA", "ZULU"],
    ],
)
def test_unresolvable_targets_fail(argv: list[str]) -> None:
    assert cli.main(argv) == 1


def test_log_level_resolution(
    monkeypatch: pytest.MonkeyPatch,
    recorded_logging: list[tuple[str | None, str | None]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["alphabet:Alphabet", "--log-level", "debug"])
    monkeypatch.setenv("REVEMAP_LOG_LEVEL", "INFO")
    cli.main(["alphabet:Alphabet"])
    monkeypatch.delenv("REVEMAP_LOG_LEVEL")
    cli.main(["alphabet:Alphabet"])

    assert [level for level, _ in recorded_logging] == ["debug", "INFO", "WARNING"]


def test_load_enum_returns_class() -> None:
    assert cli.load_enum("alphabet:Alphabet") is Alphabet
    with pytest.raises(EnumResolutionError):
        cli.load_enum(":Alphabet")


def test_setup_logging_creates_missing_log_directory(tmp_path: Path) -> None:
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    log_path = tmp_path / "logs" / "nested" / "revemap.log"
    for handler in saved_handlers:
        root_logger.removeHandler(handler)
    try:
        setup_logging("info", str(log_path))
        logging.getLogger("revemap.tests").info("logging smoke test")
        for handler in root_logger.handlers:
            handler.flush()

        assert root_logger.level == logging.INFO
        assert "logging smoke test" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
