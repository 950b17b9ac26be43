"""Masthead-specific configuration builders.

Every masthead block is optional; omitted blocks keep the stock values from
:func:`~devguide_pages.config.models.default_masthead`.
"""

from __future__ import annotations

import typing as typ

from .helpers import (
    _normalize_labels,
    _optional_str,
    _required_str,
    _string_tuple,
)
from .models import (
    ExternalLinkConfig,
    LogoConfig,
    MastheadConfig,
    NavBarEntry,
    SiteConfigError,
    default_masthead,
)


def _build_masthead_config(payload: object | None) -> MastheadConfig:
    """Build the masthead configuration, merging overrides onto the defaults."""
    base = default_masthead()
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "Masthead configuration must be a mapping."
            raise SiteConfigError(msg)

    logo = _build_logo(data.get("logo"), base.logo)
    primary = _build_entries(data.get("primary"), base.primary, context="primary")
    secondary = _build_entries(
        data.get("secondary"), base.secondary, context="secondary"
    )
    quicknav = _build_entries(data.get("quicknav"), base.quicknav, context="quicknav")
    more_links = _build_external_links(data.get("more_links"), base.more_links)
    x_nav_flags = _string_tuple(data.get("x_nav_flags")) or base.x_nav_flags

    return MastheadConfig(
        logo=logo,
        primary=primary,
        secondary=secondary,
        quicknav=quicknav,
        more_heading=_optional_str(data.get("more_heading")) or base.more_heading,
        more_links=more_links,
        x_nav_flags=x_nav_flags,
        section_class=_optional_str(data.get("section_class")) or base.section_class,
    )


def _build_logo(payload: object | None, base: LogoConfig) -> LogoConfig:
    """Merge a logo override mapping into the base logo."""
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "Masthead logo must be a mapping."
            raise SiteConfigError(msg)
    try:
        width = int(data.get("width", base.width))
        height = int(data.get("height", base.height))
    except (TypeError, ValueError) as exc:
        msg = "Masthead logo width and height must be integers."
        raise SiteConfigError(msg) from exc
    return LogoConfig(
        src=_optional_str(data.get("src")) or base.src,
        alt=_optional_str(data.get("alt")) or base.alt,
        width=width,
        height=height,
        link=_optional_str(data.get("link")) or base.link,
    )


def _build_entries(
    entries: object | None, base: list[NavBarEntry], *, context: str
) -> list[NavBarEntry]:
    """Build masthead nav entries, keeping ``base`` when the block is absent."""
    match entries:
        case None:
            return list(base)
        case list() as items:
            pass
        case _:
            msg = f"Masthead '{context}' entries must be a list."
            raise SiteConfigError(msg)
    return [_build_entry(entry, context=context) for entry in items]


def _build_entry(entry: object, *, context: str) -> NavBarEntry:
    """Build a single :class:`NavBarEntry` from its mapping."""
    match entry:
        case {"label": label, "link": link, **rest}:
            pass
        case _:
            msg = f"Masthead '{context}' entries require 'label' and 'link'."
            raise SiteConfigError(msg)
    text = _required_str(label, field="label", context=f"Masthead '{context}' entry")
    target = _required_str(link, field="link", context=f"Masthead entry '{text}'")
    rest_map: typ.Mapping[str, typ.Any] = rest
    return NavBarEntry(
        label=text,
        link=target.lstrip("/"),
        selected_by=_string_tuple(rest_map.get("selected_by")),
        excluded_by=_string_tuple(rest_map.get("excluded_by")),
        translations=_normalize_labels(
            rest_map.get("translations"), context=f"Masthead entry '{text}'"
        ),
        css_class=_optional_str(rest_map.get("css_class")),
    )


def _build_external_links(
    entries: object | None, base: list[ExternalLinkConfig]
) -> list[ExternalLinkConfig]:
    """Build the "more" menu links, keeping ``base`` when the block is absent."""
    match entries:
        case None:
            return list(base)
        case list() as items:
            pass
        case _:
            msg = "Masthead 'more_links' must be a list."
            raise SiteConfigError(msg)
    links: list[ExternalLinkConfig] = []
    for entry in items:
        match entry:
            case {"label": label, "href": href}:
                pass
            case _:
                msg = "Masthead 'more_links' entries require 'label' and 'href'."
                raise SiteConfigError(msg)
        links.append(
            ExternalLinkConfig(
                label=_required_str(label, field="label", context="Masthead link"),
                href=_required_str(href, field="href", context="Masthead link"),
            )
        )
    return links


__all__ = ["_build_masthead_config"]
