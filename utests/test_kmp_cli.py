import logging
from pathlib import Path

import pytest
from kmp_cli import DEMO_PATTERN, DEMO_TEXT, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger, put it back after every test."""
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def temp_text_file(tmp_path) -> Path:
    """
    Fixture with a temporary text file.
    Returns the path to the file.
    """
    file_path = tmp_path / "test_file.txt"
    file_path.write_text("first line abc\nsecond ABC line\nthird abc\n", encoding="utf-8")
    return file_path


class TestCli:
    def test_demo_run(self, capsys):
        assert main(["--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Pattern found 1 time at positions:" in out
        assert "│ 10 " in out
        assert "Text:    " + " ".join(DEMO_TEXT) in out
        assert " ".join(DEMO_PATTERN) in out

    def test_text_run(self, capsys):
        assert main(["-t", "AAAA", "-p", "AA", "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Pattern found 3 times at positions:" in out
        assert "│ 0 1 2 " in out

    def test_no_match(self, capsys):
        assert main(["-t", "ABCDEF", "-p", "XYZ", "--no-color"]) == 0
        assert "Pattern not found" in capsys.readouterr().out

    def test_file_ignore_case_last(self, capsys, temp_text_file):
        assert main(["-f", str(temp_text_file), "-p", "abc", "-c", "-m", "last", "-n", "2",
                     "--no-color", "--highlight"]) == 0
        out = capsys.readouterr().out
        assert "Pattern found 2 times at positions:" in out
        assert "│ 37 22 " in out
        assert "first line abc\nsecond ABC line\nthird abc" in out

    def test_lines_limit(self, capsys, temp_text_file):
        assert main(["-f", str(temp_text_file), "-p", "abc", "-l", "1", "--no-color"]) == 0
        assert "Pattern found 1 time at positions:" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["-f", str(tmp_path / "missing.txt"), "-p", "abc"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_empty_text(self, capsys):
        assert main(["-t", "   ", "-p", "abc"]) == 1
        assert "empty" in capsys.readouterr().err

    def test_empty_pattern(self, capsys):
        assert main(["-t", "abc", "-p", ""]) == 1
        assert "non-empty pattern" in capsys.readouterr().err

    def test_negative_count(self, capsys):
        assert main(["-t", "abc", "-p", "a", "-n", "-1"]) == 1
        assert "count must be non-negative" in capsys.readouterr().err

    def test_pattern_required_with_text(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["-t", "abc"])
        assert exc_info.value.code == 2

    def test_text_and_file_are_exclusive(self, temp_text_file):
        with pytest.raises(SystemExit):
            main(["-t", "abc", "-f", str(temp_text_file), "-p", "a"])


if __name__ == "__main__":
    pytest.main()
