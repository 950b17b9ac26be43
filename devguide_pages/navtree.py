"""Render the developer-guide table of contents as nested list markup.

The tree is static: :class:`NavTreeRenderer` walks the configured
:class:`~devguide_pages.config.NavNode` entries and emits ``<ul id="nav">``
with one ``<li>`` per node. Nodes with children become collapsible
``nav-section`` blocks. Every href is the page's ``toroot`` prefix followed by
the node's stored link, so the same tree renders correctly at any directory
depth.

Each label is written once per available language as
``<span class="<lang>">``; only the span for the requested language (or the
default English title when the node has no such translation) is visible. The
trailing script block lets the client collapse sections and switch languages
later without a re-render.

Examples
--------
>>> from devguide_pages.config import NavNode
>>> renderer = NavTreeRenderer()
>>> html = renderer.render(
...     [NavNode(title="Services", link="guide/components/services.html")],
...     toroot="../",
... )
>>> 'href="../guide/components/services.html"' in html
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup

from ._constants import DEFAULT_LANGUAGE, LANGUAGE_ORDER
from .behaviors import NavigationBehavior, ScriptNavigationBehavior
from .config.helpers import language_sort_key
from .templating import build_environment

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import NavNode


@dc.dataclass(frozen=True, slots=True)
class LabelSpan:
    """One language variant of a nav label."""

    language: str
    text: str
    visible: bool


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """Template-ready view of a :class:`NavNode`."""

    href: str
    spans: tuple[LabelSpan, ...]
    section: bool = False
    children: tuple[NavItem, ...] = ()


class NavTreeRenderer:
    """Render a static navigation tree for a given root path and language."""

    def __init__(
        self,
        *,
        languages: typ.Sequence[str] = LANGUAGE_ORDER,
        navigation: NavigationBehavior | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and load the ``nav_tree.jinja`` template.

        Parameters
        ----------
        languages : Sequence[str], optional
            Preferred ordering of language spans within each label.
        navigation : NavigationBehavior, optional
            Collaborator producing the collapse and language-switch call
            sites; defaults to :class:`ScriptNavigationBehavior`.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self._sort_key = language_sort_key(languages)
        self.navigation = navigation or ScriptNavigationBehavior()
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("nav_tree.jinja")

    def render(
        self,
        nodes: cabc.Sequence[NavNode],
        *,
        toroot: str = "",
        language: str = DEFAULT_LANGUAGE,
    ) -> str:
        """Return the ``<ul id="nav">`` markup followed by its script block.

        Parameters
        ----------
        nodes : Sequence[NavNode]
            Top-level entries of the tree.
        toroot : str, optional
            Relative prefix to the site root; prepended verbatim to every link.
        language : str, optional
            Language whose labels are shown; nodes without a translation show
            their default title.
        """
        items = self.build_items(nodes, toroot=toroot, language=language)
        return self.template.render(
            items=items,
            toggle_lists=Markup(self.navigation.build_toggle_lists()),
            change_language=Markup(self.navigation.change_nav_language()),
        )

    def build_items(
        self,
        nodes: cabc.Iterable[NavNode],
        *,
        toroot: str,
        language: str,
    ) -> tuple[NavItem, ...]:
        """Convert ``nodes`` into template-ready items, recursing into children."""
        return tuple(
            NavItem(
                href=f"{toroot}{node.link}",
                spans=self.label_spans(node, language),
                section=node.is_section,
                children=self.build_items(
                    node.children, toroot=toroot, language=language
                ),
            )
            for node in nodes
        )

    def label_spans(self, node: NavNode, language: str) -> tuple[LabelSpan, ...]:
        """Return the label variants of ``node`` with exactly one visible."""
        variants = node.label_variants()
        shown = language if language in variants else DEFAULT_LANGUAGE
        return tuple(
            LabelSpan(language=code, text=variants[code], visible=code == shown)
            for code in sorted(variants, key=self._sort_key)
        )


__all__ = ["LabelSpan", "NavItem", "NavTreeRenderer"]
