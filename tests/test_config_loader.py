"""Unit tests for loading ``site.yaml`` into typed configuration.

The tests load the checked-in configuration and small YAML snippets written
to ``tmp_path`` to cover defaults, translation handling, flag parsing, and
the validation errors raised for malformed entries.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from devguide_pages._constants import REFERENCE_CARVE_OUTS, X_NAV_FLAGS
from devguide_pages.config import SiteConfig, SiteConfigError, load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path

MINIMAL_TOC = """
toc:
  - title: App Components
    link: guide/components/index.html
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_checked_in_config_loads(site_config: SiteConfig) -> None:
    """The repository configuration describes the guide tree and masthead."""
    assert [node.title for node in site_config.toc] == ["App Components", "Data Storage"]
    components = site_config.toc[0]
    assert components.is_section
    assert [child.title for child in components.children][:2] == [
        "App Fundamentals",
        "Services",
    ]
    manifest = components.children[-1]
    assert manifest.children[0].title == "<application>"
    reference = site_config.masthead.secondary[1]
    assert reference.excluded_by == REFERENCE_CARVE_OUTS
    assert site_config.masthead.primary[0].translations["ja"] == "開発"
    assert site_config.get_page("reference/packages.html").flags.get("reference")


def test_defaults_apply_when_sections_omitted(tmp_path: Path) -> None:
    config = load_site_config(_write(tmp_path, MINIMAL_TOC))
    assert config.language == "en"
    assert config.pages == {}
    assert config.output_dir.as_posix() == "public"
    assert [entry.label for entry in config.masthead.primary] == ["Develop"]
    assert [entry.label for entry in config.masthead.secondary] == [
        "Guides",
        "Reference",
    ]
    assert config.masthead.x_nav_flags == X_NAV_FLAGS


def test_english_label_promoted_to_title(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        toc:
          - link: guide/components/index.html
            labels:
              en: App Components
              ja: アプリ コンポーネント
              ko: ""
        """,
    )
    node = load_site_config(path).toc[0]
    assert node.title == "App Components"
    assert node.labels == {"ja": "アプリ コンポーネント"}


def test_leading_slash_stripped_from_links(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        toc:
          - title: Data Storage
            link: /guide/topics/data/index.html
        """,
    )
    assert load_site_config(path).toc[0].link == "guide/topics/data/index.html"


@pytest.mark.parametrize(
    ("snippet", "message"),
    [
        ("toc: []", "at least one entry"),
        ("toc:\n  - link: a.html", "requires 'title'"),
        ("toc:\n  - title: A", "requires 'link'"),
        ("toc:\n  - title: A\n    link: a.html\n    children: nope", "children must be a list"),
        ("toc:\n  - title: A\n    link: a.html\n    labels: [ja]", "translations must be a mapping"),
    ],
)
def test_invalid_toc_entries_raise(tmp_path: Path, snippet: str, message: str) -> None:
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write(tmp_path, snippet))


def test_page_flags_accept_mapping_with_sub_flags(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        MINIMAL_TOC
        + """
pages:
  reference/gcm/index.html:
    flags:
      reference: true
      reference.gcm: true
  guide/index.html: ~
""",
    )
    config = load_site_config(path)
    gcm = config.get_page("reference/gcm/index.html")
    assert gcm.flags.get("reference") and gcm.flags.get("reference.gcm")
    assert gcm.title == "Gcm"
    assert config.get_page("guide/index.html").title == "Guide"


def test_non_boolean_page_flag_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        MINIMAL_TOC
        + """
pages:
  guide/index.html:
    flags:
      guide: "yes"
""",
    )
    with pytest.raises(SiteConfigError, match="guide/index.html"):
        load_site_config(path)


def test_masthead_overrides_replace_entries(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        MINIMAL_TOC
        + """
masthead:
  x_nav_flags: [guide, distribute]
  secondary:
    - label: Guides
      link: /guide/components/index.html
      selected_by: guide
  logo:
    width: 200
""",
    )
    masthead = load_site_config(path).masthead
    assert masthead.x_nav_flags == ("guide", "distribute")
    assert [entry.link for entry in masthead.secondary] == [
        "guide/components/index.html"
    ]
    assert masthead.secondary[0].selected_by == ("guide",)
    assert masthead.logo.width == 200
    assert masthead.logo.height == 25
    assert [entry.label for entry in masthead.quicknav] == ["Guides", "Reference"]


def test_masthead_entry_without_link_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        MINIMAL_TOC
        + """
masthead:
  primary:
    - label: Develop
""",
    )
    with pytest.raises(SiteConfigError, match="require 'label' and 'link'"):
        load_site_config(path)


def test_unknown_page_lookup_raises(site_config: SiteConfig) -> None:
    with pytest.raises(SiteConfigError, match="Unknown page 'missing.html'"):
        site_config.get_page("missing.html")


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_site_config(path)


def test_page_flag_string_splits_like_entry_names(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        MINIMAL_TOC
        + """
masthead:
  secondary:
    - label: Guides
      link: guide/components/index.html
      selected_by: guide reference
pages:
  guide/index.html:
    flags: guide reference
""",
    )
    config = load_site_config(path)
    flags = config.get_page("guide/index.html").flags
    assert flags.get("guide") and flags.get("reference")
    assert config.masthead.secondary[0].selected_by == ("guide", "reference")
    assert config.masthead.shows_x_nav(flags)


@pytest.mark.parametrize("page_path", ["../x.html", "guide/../../x.html"])
def test_page_path_escaping_output_dir_raises(tmp_path: Path, page_path: str) -> None:
    path = _write(
        tmp_path,
        MINIMAL_TOC + f"\npages:\n  {page_path}: ~\n",
    )
    with pytest.raises(SiteConfigError, match="inside the output directory"):
        load_site_config(path)
