"""Behaviour tests for nav tree localization.

The scenario loads a small ``site.yaml`` where only some entries carry a
Japanese title, renders the tree for a page two levels deep, and checks the
visible label of each entry along with the root-prefixed links. Backed by
``features/nav_tree_language.feature``.

Usage:
    pytest tests/bdd/test_nav_tree_language.py -v
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from devguide_pages.config import SiteConfig, load_site_config
from devguide_pages.navtree import NavTreeRenderer

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "nav_tree_language.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a site config with the Japanese title "{label}" for "{title}"'))
def given_site_config(
    label: str, title: str, tmp_path: Path, scenario_state: dict[str, object]
) -> None:
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        f"""
toc:
  - title: App Components
    link: guide/components/index.html
    children:
      - title: {title}
        link: guide/components/services.html
        labels:
          ja: {label}
      - title: Intents
        link: guide/components/intents.html
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    scenario_state["config"] = load_site_config(config_path)


@when(parsers.parse('I render the nav tree at "{toroot}" in "{language}"'))
def when_render_tree(
    toroot: str, language: str, scenario_state: dict[str, object]
) -> None:
    config = scenario_state["config"]
    assert isinstance(config, SiteConfig)
    html = NavTreeRenderer(languages=config.languages).render(
        config.toc, toroot=toroot, language=language
    )
    scenario_state["soup"] = BeautifulSoup(html, "html.parser")


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    soup = scenario_state["soup"]
    assert isinstance(soup, BeautifulSoup)
    return soup


@then(parsers.parse('the "{title}" entry shows "{text}"'))
def then_entry_shows(title: str, text: str, scenario_state: dict[str, object]) -> None:
    for anchor in _soup(scenario_state).select("#nav a"):
        english = anchor.find("span", class_="en")
        if english is not None and english.get_text() == title:
            visible = [s for s in anchor.find_all("span") if not s.get("style")]
            assert [s.get_text() for s in visible] == [text]
            return
    msg = f"no nav entry titled {title!r}"
    raise AssertionError(msg)


@then(parsers.parse('every nav link starts with "{toroot}"'))
def then_links_prefixed(toroot: str, scenario_state: dict[str, object]) -> None:
    hrefs = [anchor["href"] for anchor in _soup(scenario_state).select("#nav a")]
    assert hrefs, "expected rendered nav links"
    assert all(href.startswith(toroot) for href in hrefs), hrefs
