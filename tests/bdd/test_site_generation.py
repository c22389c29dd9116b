"""Behaviour tests for generating a site from workspace documents."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from md_deploy.config import SiteOptions
from md_deploy.generator import SiteGenerator
from md_deploy.theme import BLACK

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "site_generation.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    return {}


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


@given(parsers.parse('a workspace with "{first}" and "{second}"'))
def given_workspace(
    tmp_path: Path, scenario_state: dict[str, object], first: str, second: str
) -> None:
    workspace = tmp_path / "ws"
    sources = []
    for relative in (first, second):
        source = workspace / relative
        source.parent.mkdir(parents=True, exist_ok=True)
        source.write_text(f"# {source.stem}\n\nBody of {relative}.\n", encoding="utf-8")
        sources.append(source)
    scenario_state["workspace"] = workspace
    scenario_state["sources"] = sources


@given(
    parsers.parse(
        'site options with accent "{accent}", title "{title}" and footer "{footer}"'
    )
)
def given_options(
    scenario_state: dict[str, object], accent: str, title: str, footer: str
) -> None:
    scenario_state["options"] = SiteOptions(
        accent_color=accent, site_title=title, footer_text=footer
    )


@when("I generate the site")
def when_generate(scenario_state: dict[str, object]) -> None:
    generator = SiteGenerator(scenario_state["workspace"], scenario_state["options"])
    scenario_state["result"] = generator.run(scenario_state["sources"])


@then(
    parsers.parse(
        'the output contains "{first}", "{second}", "{third}" and "{fourth}"'
    )
)
def then_output_contains(
    scenario_state: dict[str, object],
    first: str,
    second: str,
    third: str,
    fourth: str,
) -> None:
    result = scenario_state["result"]
    written = {
        path.relative_to(result.output_root).as_posix() for path in result.written
    }
    assert written == {first, second, third, fourth}
    for relative in written:
        assert (result.output_root / relative).is_file()


@then("the index lists both pages with site-relative links")
def then_index_lists_pages(scenario_state: dict[str, object]) -> None:
    result = scenario_state["result"]
    soup = _soup(result.index_path)
    links = soup.select("main ul li a")
    assert [link["href"] for link in links] == [
        page.output_relative_path for page in result.pages
    ]
    assert [link.get_text() for link in links] == [page.title for page in result.pages]


@then("every navigation link resolves to a written page")
def then_nav_links_resolve(scenario_state: dict[str, object]) -> None:
    result = scenario_state["result"]
    written = {path.resolve() for path in result.written}
    for path in result.written:
        if path.suffix != ".html":
            continue
        soup = _soup(path)
        stylesheet = soup.select_one('link[rel="stylesheet"]')["href"]
        assert (path.parent / stylesheet).resolve() in written
        for link in soup.select("nav#sidebar a"):
            assert (path.parent / link["href"]).resolve() in written


@then("the pages use black accent text")
def then_black_accent_text(scenario_state: dict[str, object]) -> None:
    result = scenario_state["result"]
    for path in result.written:
        if path.suffix == ".html":
            style = str(_soup(path).select_one("head style").string)
            assert f"--accent-text-color: {BLACK};" in style
