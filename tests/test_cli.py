# tests/test_cli.py
from pathlib import Path

import pytest

from treemd import cli


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


@pytest.fixture(autouse=True)
def offline(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("treemd.cli.count_tokens", lambda text: 42)
    monkeypatch.setattr("treemd.scanner.resolve", lambda root: frozenset())


def test_prints_document_and_token_count(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    _make_file(tmp_path / "a.txt", "hello")

    assert cli.main([str(tmp_path)]) == 0

    captured = capsys.readouterr()
    assert captured.out.startswith("# File tree\n```\n" + tmp_path.name + "\n└── a.txt\n```\n")
    assert "**a.txt:**\n```\nhello\n```\n" in captured.out
    assert captured.err == "Token count: 42\n"


def test_silent_suppresses_token_count(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    _make_file(tmp_path / "a.txt", "hello")

    assert cli.main([str(tmp_path), "-s"]) == 0

    captured = capsys.readouterr()
    assert "hello" in captured.out
    assert captured.err == ""


def test_extensions_option(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    _make_file(tmp_path / "a.js", "js")
    _make_file(tmp_path / "b.ts", "ts")
    _make_file(tmp_path / "c.md", "md")

    assert cli.main([str(tmp_path), "-e", "js,ts", "--silent", "--sort"]) == 0

    out = capsys.readouterr().out
    assert "**a.js:**" in out
    assert "**b.ts:**" in out
    assert "c.md" not in out
    assert out.index("**a.js:**") < out.index("**b.ts:**")


def test_default_directory_is_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    _make_file(tmp_path / "here.txt", "here")
    monkeypatch.chdir(tmp_path)

    assert cli.main(["-s"]) == 0
    assert "**here.txt:**" in capsys.readouterr().out


def test_error_is_reported_with_non_zero_status(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    missing = tmp_path / "missing"

    assert cli.main([str(missing)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert missing.name in captured.err


def test_split_extensions():
    assert cli.split_extensions(None) == []
    assert cli.split_extensions("") == []
    assert cli.split_extensions("py,,md, ") == ["py", "md"]


def test_help_lists_caveats(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as info:
        cli.main(["--help"])
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "Caveats:" in out
    assert "package-lock.json" in out


def test_token_count_failure_is_reported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    _make_file(tmp_path / "a.txt", "hello")

    def offline_encoder(text):
        raise ConnectionError("could not download encoding")

    monkeypatch.setattr("treemd.cli.count_tokens", offline_encoder)

    assert cli.main([str(tmp_path)]) == 1

    captured = capsys.readouterr()
    assert "**a.txt:**" in captured.out
    assert captured.err == "Error: Cannot count tokens: could not download encoding\n"
