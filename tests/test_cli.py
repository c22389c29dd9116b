"""Tests for the ``md-deploy`` Cyclopts commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from md_deploy.cli import app


def _invoke(tokens: list[str]) -> int:
    """Run the app and return its exit status whether or not it calls exit."""
    try:
        app(tokens)
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for name in ("ROOT", "CONFIG", "ACCENT_COLOR", "SITE_TITLE", "FOOTER_TEXT"):
        monkeypatch.delenv(f"INPUT_{name}", raising=False)
    root = tmp_path / "ws"
    (root / "docs").mkdir(parents=True)
    (root / "guide").mkdir()
    (root / "docs" / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (root / "guide" / "setup.md").write_text("# Setup\n", encoding="utf-8")
    monkeypatch.chdir(root)
    return root


def test_generate_explicit_paths_reports_written_files(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = _invoke(
        [
            "generate",
            "docs/intro.md",
            "guide/setup.md",
            "--accent-color",
            "#ff0000",
            "--site-title",
            "Docs",
            "--footer-text",
            "© 2024",
        ]
    )
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "wrote docs/css/styles.css",
        "wrote docs/html/docs/intro.html",
        "wrote docs/html/guide/setup.html",
        "wrote docs/index.html",
        "Site generated in docs",
    ]
    soup = BeautifulSoup(
        (workspace / "docs" / "index.html").read_text(encoding="utf-8"), "html.parser"
    )
    assert soup.title.get_text() == "Home - Docs"
    assert soup.select_one("footer p").get_text() == "© 2024"


def test_generate_discovers_sources_when_none_given(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _invoke(["generate"]) == 0
    out = capsys.readouterr().out
    assert "wrote docs/html/docs/intro.html" in out
    assert "wrote docs/html/guide/setup.html" in out


def test_generate_reads_workspace_config_and_cli_overrides(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (workspace / "md-deploy.yaml").write_text(
        'site:\n  title: From Config\n  accent_color: "#000080"\noutput_dir: public\n',
        encoding="utf-8",
    )
    assert _invoke(["generate", "--footer-text", "cli footer"]) == 0
    html = (workspace / "public" / "index.html").read_text(encoding="utf-8")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one("header h1").get_text() == "From Config"
    assert soup.select_one("footer p").get_text() == "cli footer"
    assert "--accent-text-color: #ffffff;" in html
    assert "Site generated in public" in capsys.readouterr().out


def test_generate_invalid_color_exits_non_zero(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _invoke(["generate", "--accent-color", "#12"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: ")
    assert "#12" in captured.err
    assert not (workspace / "docs" / "index.html").exists()


def test_generate_missing_root_reports_single_error(
    workspace: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing"
    assert _invoke(["generate", "--root", str(missing)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert len(captured.err.strip().splitlines()) == 1
    assert "does not exist" in captured.err
    assert not missing.exists()


def test_generate_missing_explicit_config_fails(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _invoke(["generate", "--config", "absent.yaml"]) == 1
    assert "absent.yaml" in capsys.readouterr().err


def test_discover_lists_sources(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _invoke(["discover"]) == 0
    assert capsys.readouterr().out.splitlines() == ["docs/intro.md", "guide/setup.md"]


def test_generate_rejects_nested_output_dir(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _invoke(["generate", "--output-dir", "out/site"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: ")
    assert "out/site" in captured.err
    assert not (workspace / "out").exists()


def test_generate_reports_malformed_config(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (workspace / "md-deploy.yaml").write_text("site: [unclosed\n", encoding="utf-8")
    assert _invoke(["generate"]) == 1
    assert capsys.readouterr().err.startswith("error: ")
    assert not (workspace / "docs" / "index.html").exists()


@pytest.mark.parametrize("source", ["flag", "config"])
def test_generate_reports_unknown_pygments_style(
    workspace: Path, capsys: pytest.CaptureFixture[str], source: str
) -> None:
    tokens = ["generate"]
    if source == "flag":
        tokens += ["--pygments-style", "nosuchstyle"]
    else:
        (workspace / "md-deploy.yaml").write_text(
            "pygments_style: nosuchstyle\n", encoding="utf-8"
        )
    assert _invoke(tokens) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: ")
    assert "nosuchstyle" in captured.err
    assert not (workspace / "docs" / "css").exists()
