"""Tests for the pathscrub command line."""

from pathlib import Path

import pytest

from pathscrub.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PLATFORM", "OPTIONS", "EXTRA_INVALID_CHARS", "LOG_LEVEL"):
        monkeypatch.delenv(f"PATHSCRUB_{name}", raising=False)


class TestNameCommand:
    """Tests for `pathscrub name`."""

    def test_reserved_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--options limits the passes."""
        exit_code = main(["name", "report:final*.txt", "--options", "reserved"])
        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "report;final+.txt"

    def test_default_is_all(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without --options every pass runs."""
        assert main(["--platform", "posix", "name", "a:b@c"]) == 0
        assert capsys.readouterr().out.strip() == "a_b_c"

    def test_unknown_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unknown pass names fail with exit code 1."""
        assert main(["name", "x", "--options", "bogus"]) == 1
        assert "Error:" in capsys.readouterr().err


class TestPathCommand:
    """Tests for `pathscrub path`."""

    def test_windows_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Windows paths split on backslashes."""
        raw = r"C:\Users\somaji\Desktop\web.config"
        assert main(["--platform", "windows", "path", raw]) == 0
        assert capsys.readouterr().out.strip() == raw

    def test_traversal_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Traversal attempts print an error and exit 1."""
        assert main(["--platform", "posix", "path", "../../etc/passwd"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "traversal" in captured.err

    def test_missing_directory(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A bare file name is not a valid path."""
        assert main(["--platform", "posix", "path", "onlyfilename"]) == 1
        assert "not valid" in capsys.readouterr().err

    def test_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Settings are read from --config."""
        config_file = tmp_path / "pathscrub.yaml"
        config_file.write_text("platform: posix\nextra_invalid_chars: '!'\n")
        assert main(["--config", str(config_file), "path", "/data/hi!.txt"]) == 0
        assert capsys.readouterr().out.strip() == "/data/hi_.txt"


class TestBadConfig:
    """Tests for config files the CLI cannot use."""

    @pytest.mark.parametrize(
        "content",
        ["platform: [posix\n", "options: 5\n", "options: [1]\n"],
    )
    def test_bad_config_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], content: str
    ) -> None:
        """Malformed or mistyped config prints an error instead of a traceback."""
        config_file = tmp_path / "pathscrub.yaml"
        config_file.write_text(content)
        assert main(["--config", str(config_file), "name", "x"]) == 1
        assert "Error:" in capsys.readouterr().err
