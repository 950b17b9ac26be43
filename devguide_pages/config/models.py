"""Typed dataclasses describing developer-guide site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from devguide_pages._constants import (
    DEFAULT_LANGUAGE,
    DEVELOP_LINK,
    GUIDES_LINK,
    INDEX_PAGE,
    LANGUAGE_ORDER,
    REFERENCE_CARVE_OUTS,
    REFERENCE_LINK,
    X_NAV_FLAGS,
)
from devguide_pages.flags import SectionFlags


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class NavNode:
    """One entry in the table-of-contents tree.

    Attributes
    ----------
    title : str
        Default (``"en"``) label.
    link : str
        Target path relative to the site root.
    labels : dict[str, str]
        Localized labels keyed by language code.
    children : tuple[NavNode, ...]
        Ordered child entries; a node with children renders as a section.
    """

    title: str
    link: str
    labels: dict[str, str] = dc.field(default_factory=dict)
    children: tuple[NavNode, ...] = ()

    @property
    def is_section(self) -> bool:
        """Return ``True`` when the node renders as a collapsible section."""
        return bool(self.children)

    def label_variants(self) -> dict[str, str]:
        """Return every label keyed by language.

        ``title`` is always the default-language label, even when ``labels``
        also carries an entry for that language.
        """
        variants = {DEFAULT_LANGUAGE: self.title}
        for code, text in self.labels.items():
            variants.setdefault(code, text)
        return variants

    def label_for(self, language: str) -> str:
        """Return the label for ``language``, falling back to the default title."""
        return self.label_variants().get(language, self.title)


@dc.dataclass(frozen=True, slots=True)
class NavBarEntry:
    """A masthead navigation entry with its selection rule and translations."""

    label: str
    link: str
    selected_by: tuple[str, ...] = ()
    excluded_by: tuple[str, ...] = ()
    translations: dict[str, str] = dc.field(default_factory=dict)
    css_class: str | None = None

    def is_selected(self, flags: SectionFlags) -> bool:
        """Return whether the entry is highlighted for the given flags.

        An entry is selected when any of ``selected_by`` is set and none of
        ``excluded_by`` is set.
        """
        return flags.any_of(self.selected_by) and not flags.any_of(self.excluded_by)

    def label_for(self, language: str) -> str:
        """Return the translated label, defaulting to the untranslated one."""
        return self.translations.get(language) or self.label


@dc.dataclass(slots=True)
class LogoConfig:
    """Site logo shown in the masthead."""

    src: str = "assets/images/dac_logo.png"
    alt: str = "Mindroid Developers"
    width: int = 123
    height: int = 25
    link: str = INDEX_PAGE


@dc.dataclass(slots=True)
class ExternalLinkConfig:
    """Absolute link listed in the masthead "more" menu."""

    label: str
    href: str


@dc.dataclass(slots=True)
class MastheadConfig:
    """Static structure of the page header."""

    logo: LogoConfig = dc.field(default_factory=LogoConfig)
    primary: list[NavBarEntry] = dc.field(default_factory=list)
    secondary: list[NavBarEntry] = dc.field(default_factory=list)
    quicknav: list[NavBarEntry] = dc.field(default_factory=list)
    more_heading: str = "Links"
    more_links: list[ExternalLinkConfig] = dc.field(default_factory=list)
    x_nav_flags: tuple[str, ...] = X_NAV_FLAGS
    section_class: str = "develop"

    def shows_x_nav(self, flags: SectionFlags) -> bool:
        """Return whether the secondary nav bar is rendered for ``flags``."""
        return flags.any_of(self.x_nav_flags)


def default_masthead() -> MastheadConfig:
    """Return the stock developer-guide masthead."""
    develop = NavBarEntry(
        label="Develop",
        link=DEVELOP_LINK,
        selected_by=X_NAV_FLAGS,
        translations={
            "es": "Desarrollar",
            "ja": "開発",
            "ko": "개발",
            "ru": "Разработка",
            "zh-CN": "开发",
            "zh-TW": "開發",
        },
        css_class="develop last",
    )
    guides = NavBarEntry(label="Guides", link=GUIDES_LINK, selected_by=("guide",))
    reference = NavBarEntry(
        label="Reference",
        link=REFERENCE_LINK,
        selected_by=("reference",),
        excluded_by=REFERENCE_CARVE_OUTS,
    )
    return MastheadConfig(
        primary=[develop],
        secondary=[guides, reference],
        quicknav=[
            NavBarEntry(label="Guides", link=GUIDES_LINK),
            NavBarEntry(label="Reference", link=REFERENCE_LINK),
        ],
        more_links=[ExternalLinkConfig(label="ESR Labs", href="http://esrlabs.com/")],
    )


@dc.dataclass(slots=True)
class PageConfig:
    """A page whose chrome is rendered by the site host."""

    path: str
    title: str
    flags: SectionFlags = dc.field(default_factory=SectionFlags)
    language: str | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Navigation tree, masthead, and page definitions for one site."""

    toc: list[NavNode]
    masthead: MastheadConfig = dc.field(default_factory=default_masthead)
    pages: dict[str, PageConfig] = dc.field(default_factory=dict)
    output_dir: Path = Path("public")
    language: str = DEFAULT_LANGUAGE
    site_name: str = "Mindroid Developers"
    languages: tuple[str, ...] = LANGUAGE_ORDER

    def get_page(self, path: str) -> PageConfig:
        """Return the page configured at ``path``."""
        try:
            return self.pages[path]
        except KeyError as exc:
            available = ", ".join(sorted(self.pages)) or "none"
            msg = f"Unknown page '{path}'. Known pages: {available}"
            raise SiteConfigError(msg) from exc


__all__ = [
    "ExternalLinkConfig",
    "LogoConfig",
    "MastheadConfig",
    "NavBarEntry",
    "NavNode",
    "PageConfig",
    "SiteConfig",
    "SiteConfigError",
    "default_masthead",
]
