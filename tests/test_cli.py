"""Tests for the command line entry point."""

import io
import json

import pytest
from datetime import datetime

from caffeine import CaffeineCLI
from caffeine_dose.models import ProcessSnapshot
from caffeine_dose.session import SessionInspector

from fakes import FakeProcessQuery


def run_cli(args, snapshot=None):
    out = io.StringIO()
    cli = CaffeineCLI(inspector=SessionInspector(FakeProcessQuery(snapshot)), out=out)
    cli.run(args)
    return out.getvalue()


def first_item(output):
    return json.loads(output)["items"][0]


@pytest.mark.parametrize("args, expected_arg", [
    (["filter", "2h"], "120"),
    (["filter", "1", "30"], "90"),
    (["filter", "1 30"], "90"),
    (["filter", "8pm"], "TIME:20:00"),
    (["filter", "i"], "indefinite"),
    (["filter", "nonsense"], "0"),
    (["filter"], "status"),
    (["filter", ""], "status"),
])
def test_filter(args, expected_arg):
    assert first_item(run_cli(args))["arg"] == expected_arg


def test_filter_output_is_one_json_line():
    output = run_cli(["filter", "45"])
    assert output.endswith("\n")
    assert output.count("\n") == 1


def test_toggle():
    assert first_item(run_cli(["toggle"]))["arg"] == "on"

    running = ProcessSnapshot(running=True, start_time=datetime.now(), invocation_args="-i")
    assert first_item(run_cli(["toggle"], running))["arg"] == "off"


def test_status_prints_panel(capsys):
    running = ProcessSnapshot(running=True, start_time=datetime.now(), invocation_args="-i")
    run_cli(["status"], running)
    assert "Caffeinate active indefinitely" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert run_cli([]) == ""
    assert "usage: caffeine" in capsys.readouterr().out


def test_config_prints_settings(capsys):
    run_cli(["config"])
    out = capsys.readouterr().out
    assert "Time format" in out
    assert "caffeinate" in out
