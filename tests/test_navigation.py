"""Unit tests for sidebar navigation hrefs."""

from __future__ import annotations

from pathlib import Path

from md_deploy.generator import GeneratedPage, build_nav

SITE = Path("/ws/docs")


def _pages() -> list[GeneratedPage]:
    return [
        GeneratedPage(Path("/ws/docs/intro.md"), "html/docs/intro.html", "intro"),
        GeneratedPage(Path("/ws/guide/setup.md"), "html/guide/setup.html", "setup"),
        GeneratedPage(Path("/ws/README.md"), "html/README.html", "README"),
    ]


def test_home_first_then_pages_in_input_order() -> None:
    entries = build_nav(_pages(), SITE / "html/docs/intro.html", SITE)
    assert [entry.label for entry in entries] == ["Home", "intro", "setup", "README"]
    assert entries[0].is_home
    assert not any(entry.is_home for entry in entries[1:])


def test_hrefs_are_relative_to_the_current_page_directory() -> None:
    entries = build_nav(_pages(), SITE / "html/docs/intro.html", SITE)
    assert [entry.href for entry in entries] == [
        "../../index.html",
        "intro.html",
        "../guide/setup.html",
        "../README.html",
    ]


def test_index_sees_site_relative_hrefs() -> None:
    entries = build_nav(_pages(), SITE / "index.html", SITE)
    assert [entry.href for entry in entries] == [
        "index.html",
        "html/docs/intro.html",
        "html/guide/setup.html",
        "html/README.html",
    ]
    assert entries[0].is_current


def test_only_the_current_page_is_marked() -> None:
    entries = build_nav(_pages(), SITE / "html/guide/setup.html", SITE)
    assert [entry.label for entry in entries if entry.is_current] == ["setup"]


def test_every_page_gets_the_same_structure() -> None:
    pages = _pages()
    listings = [
        [entry.label for entry in build_nav(pages, page.output_path(SITE), SITE)]
        for page in pages
    ]
    assert all(listing == listings[0] for listing in listings)
    assert len(listings[0]) == len(pages) + 1


def test_href_does_not_depend_on_page_order() -> None:
    pages = _pages()
    current = SITE / "html/docs/intro.html"
    forward = {entry.label: entry.href for entry in build_nav(pages, current, SITE)}
    backward = {
        entry.label: entry.href for entry in build_nav(pages[::-1], current, SITE)
    }
    assert forward == backward
