"""Tests for the keysmith command-line interface."""

from unittest.mock import patch

import pytest

from keysmith.cli import main


class TestGenerateCommand:
    def test_generates_count_passwords(self, capsys):
        assert main(["generate", "-n", "20", "-c", "3"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        for line in lines:
            assert len(line.split()[0]) == 20
            assert "bits" in line

    def test_pronounceable(self, capsys):
        assert main(["generate", "-p", "--no-special", "-n", "12"]) == 0
        out = capsys.readouterr().out
        assert len(out.split()[0]) == 12

    def test_no_character_set(self, capsys):
        rc = main([
            "generate", "--no-lowercase", "--no-uppercase", "--no-numbers", "--no-special",
        ])
        assert rc == 1
        captured = capsys.readouterr()
        assert "Select at least one character set" in captured.err
        assert captured.out == ""

    def test_invalid_length(self, capsys):
        assert main(["generate", "-n", "0"]) == 1
        assert "at least 1" in capsys.readouterr().err

    def test_length_outside_ui_range_warns(self, capsys):
        assert main(["generate", "-n", "40"]) == 0
        captured = capsys.readouterr()
        assert "outside the usual 8-32 range" in captured.err
        assert len(captured.out.split()[0]) == 40

    def test_unsatisfiable(self, capsys):
        assert main(["generate", "-n", "1"]) == 1
        assert "attempts" in capsys.readouterr().err

    @patch("keysmith.entropy.os.urandom", side_effect=NotImplementedError)
    def test_fallback_warning(self, _mock_urandom, capsys):
        assert main(["generate"]) == 0
        assert "weak fallback entropy" in capsys.readouterr().err


class TestScoreCommand:
    def test_score_arguments(self, capsys):
        assert main(["score", "aB3$aB3$", "abcdefghijkmnopq"]) == 0
        out = capsys.readouterr().out
        assert "Weak (16 bits" in out
        assert "Weak (64 bits" in out
        assert "Crack time: ~seconds" in out

    def test_score_file(self, tmp_path, capsys):
        f = tmp_path / "pw.txt"
        f.write_text("first\n\nsecond\n")
        assert main(["score", "-f", str(f)]) == 0
        out = capsys.readouterr().out
        assert "'first'" in out
        assert "'second'" in out

    def test_no_passwords(self, capsys):
        assert main(["score"]) == 1
        assert "provide passwords" in capsys.readouterr().err


class TestTopLevel:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "keysmith" in capsys.readouterr().out
