"""Tests for the metamark CLI."""

import json
from argparse import Namespace

import pytest
from loguru import logger

from metamark import TargetImportError, UnknownStrategyError
from metamark.cli import main as cli_main
from metamark.cli.commands import handle_inspect, handle_types
from metamark.cli.commands.inspect import load_target, mappings_to_records
from metamark.core.config import Config
from tests.fakes import Nested

NESTED = "tests.fakes.markers:Nested"


def _args(target=NESTED, **overrides) -> Namespace:
    values = {
        "target": target,
        "collector": None,
        "mapping": None,
        "declared": False,
        "format": None,
    }
    values.update(overrides)
    return Namespace(**values)


class TestLoadTarget:
    """Tests for load_target."""

    def test_qualname(self):
        """Resolves module:qualname."""
        assert load_target(NESTED) is Nested

    def test_module_only(self):
        """A bare module name returns the module."""
        module = load_target("tests.fakes.markers")

        assert module.Nested is Nested

    def test_missing_module(self):
        """Unknown modules raise TargetImportError."""
        with pytest.raises(TargetImportError):
            load_target("tests.fakes.nowhere:Nested")

    def test_missing_attribute(self):
        """Unknown attributes raise TargetImportError."""
        with pytest.raises(TargetImportError, match="no attribute 'Missing'"):
            load_target("tests.fakes.markers:Missing")

    def test_empty_module(self):
        """A target without module fails."""
        with pytest.raises(TargetImportError):
            load_target(":Nested")


class TestHandleInspect:
    """Tests for the inspect command."""

    def test_tree_output(self, capsys):
        """The tree shows every mapping indented by depth."""
        handle_inspect(_args(), Config())

        lines = capsys.readouterr().out.splitlines()

        assert lines[0] == NESTED
        assert len(lines) == 15
        assert lines[1].startswith("  Outer(")
        assert lines[2].startswith("    Middle(")

    def test_json_output(self, capsys):
        """JSON records reference sources by index."""
        handle_inspect(_args(format="json"), Config())

        records = json.loads(capsys.readouterr().out)

        assert len(records) == 14
        assert records[0]["type"] == "Outer"
        assert records[0]["source"] is None
        assert records[0]["declared"] is True
        assert records[1]["source"] == 0

    def test_declared_only(self, capsys):
        """--declared limits output to root markers."""
        handle_inspect(_args(format="json", declared=True), Config())

        records = json.loads(capsys.readouterr().out)

        assert [r["type"] for r in records] == ["Outer"]

    def test_format_from_config(self, capsys):
        """The configured format applies without a flag."""
        handle_inspect(_args(), Config(output_format="json"))

        assert json.loads(capsys.readouterr().out)[0]["index"] == 0

    def test_collector_override(self, capsys):
        """--collector overrides the configured collector."""
        handle_inspect(_args(format="json", collector="none"), Config())

        records = json.loads(capsys.readouterr().out)

        assert [r["type"] for r in records] == ["Outer", "Documented"]

    def test_unknown_format(self):
        """Unknown configured formats are rejected."""
        with pytest.raises(UnknownStrategyError):
            handle_inspect(_args(), Config(output_format="yaml"))

    def test_unknown_collector(self):
        """Unknown collectors are rejected."""
        with pytest.raises(UnknownStrategyError):
            handle_inspect(_args(collector="fancy"), Config())

    def test_empty_element(self, capsys):
        """Elements without markers print a placeholder."""
        handle_inspect(_args(target="tests.fakes.markers:Bare"), Config())

        assert "(no markers)" in capsys.readouterr().out


class TestHandleTypes:
    """Tests for the types command."""

    def test_counts(self, capsys):
        """Prints per-type counts and the total."""
        handle_types(_args(), Config())

        out = capsys.readouterr().out

        assert "Outer: 1 (1 declared)" in out
        assert "Middle: 2 (0 declared)" in out
        assert "Inner: 4 (0 declared)" in out
        assert "Documented: 7 (0 declared)" in out
        assert "Total: 14" in out


class TestRecords:
    """Tests for mappings_to_records."""

    def test_source_outside_list(self):
        """Sources missing from the list are reported as None."""
        from metamark import RepeatableMetaMarkedElement, generic_mapping

        element = RepeatableMetaMarkedElement.create(Nested, generic_mapping)
        records = mappings_to_records(list(element)[1:2])

        assert records[0]["source"] is None
        assert records[0]["declared"] is False


class TestMain:
    """Tests for the entry point."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        """Drop the sinks main() installs."""
        yield
        logger.remove()

    def test_types_exit_zero(self, monkeypatch, capsys):
        """Successful commands exit with status 0."""
        monkeypatch.setattr("sys.argv", ["metamark", "types", NESTED])

        with pytest.raises(SystemExit) as exc_info:
            cli_main.main()

        assert exc_info.value.code == 0
        assert "Total: 14" in capsys.readouterr().out

    def test_error_exit_one(self, monkeypatch, capsys):
        """Failures print the error and exit with status 1."""
        monkeypatch.setattr("sys.argv", ["metamark", "inspect", "tests.fakes.nowhere:X"])

        with pytest.raises(SystemExit) as exc_info:
            cli_main.main()

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_command_prints_help(self, monkeypatch, capsys):
        """Without a command, help is printed."""
        monkeypatch.setattr("sys.argv", ["metamark"])

        with pytest.raises(SystemExit):
            cli_main.main()

        assert "usage: metamark" in capsys.readouterr().out
