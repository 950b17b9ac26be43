"""Table-of-contents configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import _normalize_labels, _optional_str, _required_str
from .models import NavNode, SiteConfigError


def _build_toc(entries: object | None) -> list[NavNode]:
    """Build the navigation tree from the ``toc`` list."""
    match entries:
        case list() as items:
            pass
        case _:
            msg = "The 'toc' section must be a list of navigation entries."
            raise SiteConfigError(msg)
    if not items:
        msg = "The 'toc' section requires at least one entry."
        raise SiteConfigError(msg)
    return [_build_nav_node(entry, trail=(str(index),)) for index, entry in enumerate(items)]


def _build_nav_node(entry: object, *, trail: tuple[str, ...]) -> NavNode:
    """Build a single :class:`NavNode`, recursing into ``children``."""
    context = f"TOC entry {'/'.join(trail)}"
    match entry:
        case dict() as data:
            pass
        case _:
            msg = f"{context} must be a mapping."
            raise SiteConfigError(msg)

    labels = _normalize_labels(data.get("labels"), context=context)
    title = _optional_str(data.get("title")) or labels.pop("en", None)
    if title is None:
        msg = f"{context} requires 'title'."
        raise SiteConfigError(msg)
    labels.pop("en", None)
    link = _required_str(data.get("link"), field="link", context=f"TOC entry '{title}'")

    children_raw: typ.Any = data.get("children") or []
    if not isinstance(children_raw, list):
        msg = f"TOC entry '{title}' children must be a list."
        raise SiteConfigError(msg)
    children = tuple(
        _build_nav_node(child, trail=(*trail, str(index)))
        for index, child in enumerate(children_raw)
    )
    return NavNode(title=title, link=link.lstrip("/"), labels=labels, children=children)


__all__ = ["_build_toc"]
