"""Tests for stylesheet resolution and its built-in fallback."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from md_deploy.generator import stylesheet
from md_deploy.generator.stylesheet import (
    BUILTIN_SOURCE,
    DEFAULT_STYLESHEET,
    TEMPLATE_SOURCE,
    StylesheetSource,
    default_sources,
    read_template_resource,
    resolve_stylesheet,
)


def test_packaged_template_is_preferred() -> None:
    resolved = resolve_stylesheet()
    assert resolved.source == TEMPLATE_SOURCE
    assert resolved.css == read_template_resource("styles.css").decode("utf-8")
    assert "--accent-text-color" in resolved.css


def test_missing_template_falls_back_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger=stylesheet.__name__):
        resolved = resolve_stylesheet(default_sources(tmp_path))
    assert resolved.source == BUILTIN_SOURCE
    assert resolved.css == DEFAULT_STYLESHEET
    assert any("template" in record.getMessage() for record in caplog.records)


def test_undecodable_template_falls_back(tmp_path: Path) -> None:
    (tmp_path / "styles.css").write_bytes(b"\xff\xfe\x00broken")
    resolved = resolve_stylesheet(default_sources(tmp_path))
    assert resolved.source == BUILTIN_SOURCE


def test_permission_error_falls_back(mocker: object) -> None:
    mocker.patch(  # type: ignore[attr-defined]
        "md_deploy.generator.stylesheet.read_template_resource",
        side_effect=PermissionError("denied"),
    )
    assert resolve_stylesheet().source == BUILTIN_SOURCE


def test_sources_are_tried_in_order() -> None:
    calls: list[str] = []

    def _failing() -> str:
        calls.append("first")
        raise OSError("nope")

    def _working() -> str:
        calls.append("second")
        return "body {}"

    resolved = resolve_stylesheet(
        [StylesheetSource("first", _failing), StylesheetSource("second", _working)]
    )
    assert resolved.source == "second"
    assert resolved.css == "body {}"
    assert calls == ["first", "second"]


def test_exhausted_sources_yield_builtin() -> None:
    def _failing() -> str:
        raise OSError("nope")

    assert resolve_stylesheet([StylesheetSource("only", _failing)]).css == DEFAULT_STYLESHEET
