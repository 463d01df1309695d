"""End-to-end tests for the console entry point."""

import logging

import pytest

from starship_os.src import main as main_module
from starship_os.src.core.registry import SingletonRegistry, get_instance
from starship_os.src.core.ship_computer import ShipComputer
from starship_os.src.models.subroutine import DEFAULT_SUBROUTINES
from starship_os.src.utils.logging_utils import setup_logging


@pytest.fixture
def logging_calls(monkeypatch):
    """Record ``setup_logging`` arguments instead of touching the root logger."""
    calls = []
    monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.fixture
def run(settings_file, logging_calls):
    return main_module.main


def test_default_run_prints_identity_and_fifteen_dispatches(run, capsys):
    assert run([]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Same instance"
    assert lines[1] == ""

    dispatch_lines = lines[2:]
    names = {s.name for s in DEFAULT_SUBROUTINES}
    assert len(dispatch_lines) == 15
    for line in dispatch_lines:
        prefix, _, name = line.partition(": ")
        assert prefix == "Dispatch request to"
        assert name in names

    assert SingletonRegistry.construction_count == 1


def test_requests_option(run, capsys):
    assert run(["--requests", "3"]) == 0

    out = capsys.readouterr().out
    assert out.count("Dispatch request to: ") == 3


def test_seed_makes_output_repeatable(run, capsys):
    run(["--seed", "11"])
    first = capsys.readouterr().out

    SingletonRegistry.reset()
    run(["--seed", "11"])
    second = capsys.readouterr().out

    assert first == second


def test_settings_file_drives_defaults(run, settings_file, capsys):
    settings_file.write_text('{"dispatch_count": 2}', encoding="utf-8")

    assert run([]) == 0

    assert capsys.readouterr().out.count("Dispatch request to: ") == 2


def test_invalid_request_count_exits_with_error(run, capsys):
    assert run(["--requests", "-1"]) == 1

    assert "Dispatch request to" not in capsys.readouterr().out


def test_zero_identity_checks_exits_with_error(run, capsys):
    assert run(["--checks", "0"]) == 1

    assert capsys.readouterr().out == ""


def test_checks_option(run, capsys):
    assert run(["--checks", "2", "--requests", "0"]) == 0

    assert capsys.readouterr().out == "Same instance\n\n"


def test_log_level_option_overrides_settings(run, settings_file, logging_calls):
    settings_file.write_text('{"log_level": "WARNING"}', encoding="utf-8")

    assert run(["--log-level", "DEBUG", "--requests", "0"]) == 0

    assert logging_calls == [{"log_level": "DEBUG", "log_file": None}]


def test_log_level_comes_from_settings(run, settings_file, logging_calls):
    settings_file.write_text('{"log_level": "WARNING"}', encoding="utf-8")

    run(["--requests", "0"])

    assert logging_calls[0]["log_level"] == "WARNING"


def test_unusable_log_file_exits_with_error(settings_file, tmp_path, monkeypatch,
                                            restore_root_logger, capsys):
    """A directory as log file is reported through the exit code."""
    monkeypatch.setattr(main_module, "setup_logging", setup_logging)
    settings_file.write_text(f'{{"log_file": "{tmp_path.as_posix()}"}}', encoding="utf-8")

    assert main_module.main(["--requests", "1"]) == 1

    assert "Dispatch request to" not in capsys.readouterr().out


def test_seeded_run_restores_factory(run):
    run(["--seed", "11", "--requests", "0"])

    assert SingletonRegistry.factory is ShipComputer

    # Later constructions are unseeded again
    SingletonRegistry.reset()
    assert SingletonRegistry.get_instance() is not None
    assert SingletonRegistry.factory is ShipComputer


def test_seed_ignored_when_computer_already_online(run, caplog):
    existing = get_instance()

    with caplog.at_level(logging.WARNING):
        assert run(["--seed", "11", "--requests", "1"]) == 0

    assert "seed 11 ignored" in caplog.text
    assert SingletonRegistry.get_instance() is existing
    assert SingletonRegistry.construction_count == 1
    assert SingletonRegistry.factory is ShipComputer
