"""
Tests for the spl-lex command line tool.
"""

import io
import sys
import os

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spl.cli import main


class TestCommandLine:

    def test_success_prints_tokens(self, capsys):
        assert main(["-c", "var x = 1;"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Tokenization successful. Tokens:",
            "<Var, var> Line: 1",
            "<Identifier, x> Line: 1",
            "<Equals, => Line: 1",
            "<Number, 1> Line: 1",
            "<Semicolon, ;> Line: 1",
        ]

    def test_errors_go_to_stderr(self, capsys):
        assert main(["-c", "1 @ \"open"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        err = captured.err.splitlines()
        assert err[0] == "Tokenization failed. Tokenization errors:"
        assert err[1].startswith("Unexpected char '@'")
        assert err[2].startswith("Unterminated string sequence found")

    def test_reads_file(self, tmp_path, capsys):
        source = tmp_path / "program.spl"
        source.write_text("print \"hi\";\n", encoding="utf-8")
        assert main([str(source), "--eof"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[-1] == "<EndOfFile, > Line: 2"
        assert "<String, hi> Line: 1" in out

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("while"))
        assert main([]) == 0
        assert "<While, while> Line: 1" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.spl")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_file_not_utf8(self, tmp_path, capsys):
        source = tmp_path / "latin1.spl"
        source.write_bytes(b"var x = \xff;\n")
        assert main([str(source)]) == 2
        err = capsys.readouterr().err
        assert "not valid UTF-8" in err
        assert "0xff at offset 8" in err

    def test_source_and_path_are_exclusive(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-c", "var x;", str(tmp_path / "program.spl")])
        assert exc.value.code == 2
        assert "not allowed with argument" in capsys.readouterr().err

    def test_help_lists_examples(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "spl-lex -c 'var x = 1;'" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "spl-lex" in capsys.readouterr().out
