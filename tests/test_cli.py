"""
Tests for the command-line interface.
"""

import io
import sys

import pytest

from asmfmt.__main__ import build_parser, main, resolve_config
from asmfmt.printer import FormatConfig


class TestArguments:
    """Tests for argument parsing and config resolution."""

    def test_defaults(self):
        """Test that no flags give the default layout."""
        args = build_parser().parse_args(["a.asm"])
        assert resolve_config(args) == FormatConfig()

    def test_short_flags(self):
        """Test the short indentation flags."""
        args = build_parser().parse_args(["-ii", "4", "-ci", "32", "a.asm"])
        assert resolve_config(args) == FormatConfig(instruction_indent=4, comment_column=32)

    def test_long_flags(self):
        """Test the long indentation flags."""
        args = build_parser().parse_args(
            ["--instruction-indent", "2", "--comment-column", "20", "a.asm"]
        )
        assert resolve_config(args) == FormatConfig(instruction_indent=2, comment_column=20)

    def test_flags_override_config_file(self, tmp_path):
        """Test that command-line flags take precedence over the config file."""
        path = tmp_path / "asmfmt.yaml"
        path.write_text("instruction_indent: 4\ncomment_column: 32\n", encoding="utf-8")
        args = build_parser().parse_args(["--config", str(path), "-ci", "50", "a.asm"])
        assert resolve_config(args) == FormatConfig(instruction_indent=4, comment_column=50)

    def test_negative_indent_rejected(self, capsys):
        """Test that a negative indent is an argument error."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-ii", "-3", "a.asm"])
        assert exc_info.value.code == 2

    def test_non_integer_rejected(self, capsys):
        """Test that a non-integer column is an argument error."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-ci", "wide", "a.asm"])
        assert exc_info.value.code == 2
        assert "invalid integer" in capsys.readouterr().err

    def test_stdin_path_is_positional(self):
        """Test that "-" is accepted as a file argument."""
        args = build_parser().parse_args(["-"])
        assert args.files == ["-"]


class TestMain:
    """Tests for the main entry point."""

    def test_no_files_prints_usage(self, capsys):
        """Test that running without files prints help to stderr."""
        assert main([]) == 0
        captured = capsys.readouterr()
        assert "usage:" in captured.err
        assert captured.out == ""

    def test_unknown_flag_aborts(self, tmp_path, capsys):
        """Test that an unknown flag aborts before touching any file."""
        path = tmp_path / "prog.asm"
        path.write_text("ret\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["--bogus", str(path)])
        assert exc_info.value.code == 2
        assert path.read_text(encoding="utf-8") == "ret\n"

    def test_bad_config_aborts(self, tmp_path, capsys):
        """Test that an invalid config file aborts before touching any file."""
        config = tmp_path / "asmfmt.yaml"
        config.write_text("comment_column: -1\n", encoding="utf-8")
        path = tmp_path / "prog.asm"
        path.write_text("ret\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config), str(path)])
        assert exc_info.value.code == 2
        assert "comment_column" in capsys.readouterr().err
        assert path.read_text(encoding="utf-8") == "ret\n"

    def test_formats_files(self, tmp_path):
        """Test formatting files with custom flags."""
        path = tmp_path / "prog.asm"
        path.write_text("top: inc a ;up\n", encoding="utf-8")

        assert main(["-ii", "4", "-ci", "20", str(path)]) == 0
        assert path.read_text(encoding="utf-8") == "top:\n    inc a" + " " * 10 + "; up\n"

    def test_file_error_does_not_fail_run(self, tmp_path, capsys):
        """Test that a per-file error is reported but the run succeeds."""
        good = tmp_path / "good.asm"
        good.write_text("ret\n", encoding="utf-8")

        assert main([str(tmp_path / "missing.asm"), str(good)]) == 0
        assert "missing.asm" in capsys.readouterr().err
        assert good.read_text(encoding="utf-8") == "        ret\n"

    def test_check_needs_formatting(self, tmp_path, capsys):
        """Test that check mode exits with 1 when a file would change."""
        path = tmp_path / "prog.asm"
        path.write_text("ret\n", encoding="utf-8")

        assert main(["--check", str(path)]) == 1
        assert "would reformat" in capsys.readouterr().out
        assert path.read_text(encoding="utf-8") == "ret\n"

    def test_check_clean(self, tmp_path):
        """Test that check mode exits with 0 for formatted files."""
        path = tmp_path / "prog.asm"
        path.write_text("        ret\n", encoding="utf-8")
        assert main(["--check", str(path)]) == 0

    def test_stdin(self, monkeypatch, capsys):
        """Test formatting stdin to stdout."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("db 1,2\n"))
        assert main(["-"]) == 0
        assert capsys.readouterr().out == "        db 1, 2\n"

    def test_version(self, capsys):
        """Test the version flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "asmfmt 1.0.0" in capsys.readouterr().out
