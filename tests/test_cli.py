"""Tests for the gpl2clr command line."""

import subprocess
import sys

import pytest

from gpl2clr.cli import main, parse_args
from gpl2clr.errors import MissingGPLPathError, UnrecognizedOptionError


def test_cli_import():
    """Test that CLI module can be imported without errors."""
    try:
        from gpl2clr.cli import main, parse_args

        assert main is not None
        assert parse_args is not None
    except ImportError as e:
        pytest.fail(f"Failed to import CLI module: {e}")


@pytest.mark.unit
class TestParseArgs:
    def test_defaults(self):
        args = parse_args(["in.gpl"])
        assert args.gpl_path == "in.gpl"
        assert args.clr_path is None
        assert args.install is False
        assert args.verbose is False
        assert args.dry_run is False

    def test_all_flags(self):
        args = parse_args(["in.gpl", "out.clr", "--install", "--verbose", "--dry-run"])
        assert args.clr_path == "out.clr"
        assert args.install is True
        assert args.verbose is True
        assert args.dry_run is True

    def test_positionals_after_flags(self):
        args = parse_args(["--verbose", "in.gpl", "--install", "out.clr"])
        assert args.gpl_path == "in.gpl"
        assert args.clr_path == "out.clr"
        assert args.verbose and args.install

    def test_missing_input(self):
        with pytest.raises(MissingGPLPathError):
            parse_args(["--verbose"])

    def test_unknown_option(self):
        with pytest.raises(UnrecognizedOptionError) as excinfo:
            parse_args(["in.gpl", "--force"])
        assert excinfo.value.option == "--force"

    def test_no_abbreviations(self):
        with pytest.raises(UnrecognizedOptionError):
            parse_args(["in.gpl", "--inst"])

    def test_third_positional(self):
        with pytest.raises(UnrecognizedOptionError) as excinfo:
            parse_args(["a.gpl", "b.clr", "c"])
        assert excinfo.value.option == "c"

    def test_double_dash_is_unrecognized(self):
        with pytest.raises(UnrecognizedOptionError) as excinfo:
            parse_args(["in.gpl", "--", "--dry-run"])
        assert excinfo.value.option == "--"

    def test_flag_with_value_is_unrecognized(self):
        with pytest.raises(UnrecognizedOptionError) as excinfo:
            parse_args(["in.gpl", "--dry-run=1"])
        assert excinfo.value.option == "--dry-run=1"

    def test_single_dash_token_is_positional(self):
        args = parse_args(["-palette.gpl", "-out"])
        assert args.gpl_path == "-palette.gpl"
        assert args.clr_path == "-out"


@pytest.mark.unit
class TestMain:
    def test_help_exits_zero(self, capsys):
        assert main(["--help"]) == 0
        assert "usage: gpl2clr" in capsys.readouterr().out

    def test_help_wins_over_everything(self, capsys):
        assert main(["a", "b", "c", "--bogus", "--help"]) == 0
        out = capsys.readouterr().out
        assert "usage: gpl2clr" in out
        assert "Unrecognized" not in out

    def test_no_arguments(self, capsys):
        assert main([]) == 1
        out = capsys.readouterr().out
        assert "Error: Missing GPL file path." in out
        assert "usage: gpl2clr" in out

    def test_unrecognized_option(self, capsys):
        assert main(["in.gpl", "--bogus"]) == 2
        out = capsys.readouterr().out
        assert "Error: Unrecognized option '--bogus'." in out
        assert "usage: gpl2clr" in out

    def test_flag_with_value_prints_diagnostic(self, capsys):
        assert main(["in.gpl", "--install=yes"]) == 2
        out = capsys.readouterr().out
        assert "Error: Unrecognized option '--install=yes'." in out
        assert "usage: gpl2clr" in out

    def test_double_dash_never_reaches_conversion(self, basic_palette_path, capsys):
        assert main([basic_palette_path, "--", "--dry-run"]) == 2
        out = capsys.readouterr().out
        assert "Error: Unrecognized option '--'." in out
        assert "Dry run" not in out
        assert "unexpected error" not in out

    def test_conversion_error_is_not_an_exit_code(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.gpl")]) == 0
        assert "Error: Invalid GPL file" in capsys.readouterr().out

    def test_dry_run(self, basic_palette_path, capsys):
        assert main([basic_palette_path, "--dry-run", "--verbose"]) == 0
        out = capsys.readouterr().out
        assert "[gpl2clr] - Deep Magenta: R255, G0, B255" in out
        assert "Dry run: Conversion completed without creating files." in out


@pytest.mark.integration
def test_module_entry_point(basic_palette_path):
    """``python -m gpl2clr`` runs the same CLI."""
    result = subprocess.run(
        [sys.executable, "-m", "gpl2clr", basic_palette_path, "--dry-run"],
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
    assert "Dry run: Conversion completed without creating files." in result.stdout
