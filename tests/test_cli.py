import logging
import sys

import pytest
from click.testing import CliRunner

from noderange.cli.main import cli, main
from noderange.cli.selftest import CASES, SelftestCase, run_selftest
from noderange.utils.logger import LOGGER


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def restore_log_level():
    level = LOGGER.level
    yield
    LOGGER.setLevel(level)


def test_expand(runner):
    result = runner.invoke(cli, ["expand", "node[08-10],node01"])
    assert result.exit_code == 0
    assert result.output == "node08 node09 node10 node01\n"


def test_expand_unique_with_separator(runner):
    result = runner.invoke(
        cli, ["expand", "-u", "-s", ",", "node[08-10]", "node01", "node09"]
    )
    assert result.exit_code == 0
    assert result.output == "node01,node08,node09,node10\n"


def test_condense(runner):
    result = runner.invoke(
        cli,
        ["condense", "node00", "node02", "node01", "node09", "node12", "node03", "node07", "node06"],
    )
    assert result.exit_code == 0
    assert result.output == "node[00-03],node[06-07],node09,node12\n"


def test_condense_from_stdin(runner):
    result = runner.invoke(cli, ["condense", "-"], input="node3 node1\nnode2\n\n")
    assert result.exit_code == 0
    assert result.output == "node[1-3]\n"


@pytest.mark.parametrize(
    "args",
    [
        ["condense", "node[0-999]"],
        ["expand", "node1", "node[1-2"],
        ["expand"],
        ["contains", "node-", "node-[00-63]"],
    ],
)
def test_parse_errors_exit_nonzero(runner, args):
    result = runner.invoke(cli, args)
    assert result.exit_code == 1
    assert "Error" in result.output
    assert not isinstance(result.exception, ValueError)


def test_contains(runner):
    result = runner.invoke(cli, ["contains", "node-00", "node-[00-63]"])
    assert result.exit_code == 0
    assert result.output == "true\n"

    result = runner.invoke(
        cli,
        ["contains", "node-02", "node-[00-01],node-[03-03],node-04,othernodes0000"],
    )
    assert result.exit_code == 1
    assert result.output == "false\n"


def test_count(runner):
    result = runner.invoke(cli, ["count", "n[1-5]", "n3", "n03"])
    assert result.exit_code == 0
    assert result.output == "6\n"


def test_verbose_enables_debug_logging(runner, restore_log_level):
    result = runner.invoke(cli, ["-v", "count", "n1"])
    assert result.exit_code == 0
    assert LOGGER.level == logging.DEBUG


def test_selftest_passes(runner):
    result = runner.invoke(cli, ["selftest"])
    assert result.exit_code == 0, result.output
    assert "checks passed" in result.output


def test_selftest_cases_all_pass():
    assert all(result.passed for result in run_selftest())
    assert len(run_selftest()) == len(CASES)


def test_selftest_reports_failures():
    [result] = run_selftest([SelftestCase("wrong", lambda: 1 + 1, 3)])
    assert not result.passed
    assert result.actual == 2


@pytest.mark.parametrize(
    "program,args,expected",
    [
        ("/usr/local/bin/r2n", ["node[1-3]"], "node1 node2 node3\n"),
        ("n2r", ["node1", "node3", "node2"], "node[1-3]\n"),
        ("noderange", ["condense", "node1,node2"], "node[1-2]\n"),
    ],
)
def test_main_dispatches_on_program_name(monkeypatch, capsys, program, args, expected):
    monkeypatch.setattr(sys, "argv", [program, *args])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == expected


@pytest.mark.parametrize("program", ["r2n", "n2r", "noderange"])
def test_help_works_under_every_program_name(monkeypatch, capsys, program):
    monkeypatch.setattr(sys, "argv", [program, "-h"])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 0
    assert "Usage" in capsys.readouterr().out


def test_condense_from_crlf_stdin(runner):
    result = runner.invoke(cli, ["condense", "-"], input="node2\r\nnode1\r\n")
    assert result.exit_code == 0
    assert result.output == "node[1-2]\n"
