"""
Tests for status output.
"""
import logging
from types import SimpleNamespace

import pytest

from did_driver.logger import log
from did_driver.models import DriverOptions


@pytest.mark.parametrize("options", [None, {}, DriverOptions(), SimpleNamespace()])
def test_log_prints(options, capsys):
    log(options, "hello")

    assert capsys.readouterr().out == "hello\n"


@pytest.mark.parametrize("options", [{"quiet": True}, DriverOptions(quiet=True), SimpleNamespace(quiet=True)])
def test_log_quiet(options, capsys):
    log(options, "hello")

    assert capsys.readouterr().out == ""


def test_log_records_status(caplog):
    with caplog.at_level(logging.INFO, logger="did_driver.status"):
        log({"quiet": True}, "hello")

    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("did_driver.status", logging.INFO, "hello")
    ]


@pytest.mark.parametrize("quiet", ["false", "0", "no", False])
def test_log_quiet_parsed_like_driver_options(quiet, capsys):
    """Test that string flags in a mapping are parsed, not just truth-tested."""
    log({"quiet": quiet}, "hello")

    assert capsys.readouterr().out == "hello\n"


def test_log_quiet_string_true(capsys):
    log({"quiet": "true"}, "hello")

    assert capsys.readouterr().out == ""
