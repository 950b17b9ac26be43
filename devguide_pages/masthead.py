"""Render the page masthead: logo, nav bars, search box, and quicknav.

Which entries are highlighted depends only on the page's
:class:`~devguide_pages.flags.SectionFlags`. The secondary ``nav-x`` bar is
emitted only for pages inside one of the masthead's ``x_nav_flags`` sections,
and the Reference entry stays unselected for the ``reference.gcm`` and
``reference.gms`` subsections.

Examples
--------
>>> from devguide_pages.config import default_masthead
>>> from devguide_pages.flags import SectionFlags
>>> renderer = MastheadRenderer(default_masthead())
>>> html = renderer.render(toroot="../", flags=SectionFlags.from_names(["guide"]))
>>> 'id="nav-x"' in html
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import DEFAULT_LANGUAGE, LANGUAGE_ORDER
from .behaviors import ScriptSearchBehavior, SearchBehavior
from .config.helpers import language_sort_key
from .flags import SectionFlags
from .templating import build_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import MastheadConfig, NavBarEntry


@dc.dataclass(frozen=True, slots=True)
class NavBarItem:
    """Template-ready view of a masthead nav entry."""

    label: str
    href: str
    selected: bool
    css_class: str | None
    lang_attributes: tuple[tuple[str, str], ...]


@dc.dataclass(frozen=True, slots=True)
class SearchHandlers:
    """Client handlers wired into the search form."""

    submit: str
    focus: str
    blur: str
    key_down: str
    key_up: str


class MastheadRenderer:
    """Render the masthead markup for one page."""

    def __init__(
        self,
        masthead: MastheadConfig,
        *,
        languages: typ.Sequence[str] = LANGUAGE_ORDER,
        search: SearchBehavior | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and load the ``masthead.jinja`` template.

        Parameters
        ----------
        masthead : MastheadConfig
            Static masthead structure (entries, translations, quicknav).
        languages : Sequence[str], optional
            Ordering of the per-language attributes on translated entries.
        search : SearchBehavior, optional
            Collaborator producing the search call sites; defaults to
            :class:`ScriptSearchBehavior`.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.masthead = masthead
        self.search = search or ScriptSearchBehavior()
        self._sort_key = language_sort_key(languages)
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("masthead.jinja")

    def render(
        self,
        *,
        toroot: str = "",
        flags: SectionFlags | None = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> str:
        """Return the masthead HTML for the given page context.

        Parameters
        ----------
        toroot : str, optional
            Relative prefix to the site root; prepended to every internal link
            and handed to the search call sites.
        flags : SectionFlags, optional
            Sections the page belongs to; ``None`` means no section.
        language : str, optional
            Language used for translated entry labels.
        """
        snapshot = flags or SectionFlags()
        masthead = self.masthead
        context = {
            "toroot": toroot,
            "logo": masthead.logo,
            "primary": self._items(masthead.primary, snapshot, toroot, language),
            "secondary": self._items(masthead.secondary, snapshot, toroot, language),
            "quicknav": self._items(masthead.quicknav, snapshot, toroot, language),
            "show_x_nav": masthead.shows_x_nav(snapshot),
            "section_class": masthead.section_class,
            "more_heading": masthead.more_heading,
            "more_links": masthead.more_links,
            "search": self.search_handlers(toroot),
        }
        return self.template.render(**context)

    def search_handlers(self, toroot: str) -> SearchHandlers:
        """Return the search form handlers for ``toroot``."""
        return SearchHandlers(
            submit=self.search.submit(),
            focus=self.search.focus_changed(has_focus=True),
            blur=self.search.focus_changed(has_focus=False),
            key_down=self.search.key_changed(key_down=True, toroot=toroot),
            key_up=self.search.key_changed(key_down=False, toroot=toroot),
        )

    def _items(
        self,
        entries: typ.Iterable[NavBarEntry],
        flags: SectionFlags,
        toroot: str,
        language: str,
    ) -> list[NavBarItem]:
        """Build nav bar items, resolving selection and translated labels."""
        items: list[NavBarItem] = []
        for entry in entries:
            attributes = tuple(
                (f"{code}-lang", entry.translations[code])
                for code in sorted(entry.translations, key=self._sort_key)
            )
            items.append(
                NavBarItem(
                    label=entry.label_for(language),
                    href=f"{toroot}{entry.link}",
                    selected=entry.is_selected(flags),
                    css_class=entry.css_class,
                    lang_attributes=attributes,
                )
            )
        return items


__all__ = ["MastheadRenderer", "NavBarItem", "SearchHandlers"]
