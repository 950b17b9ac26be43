"""Client-side call sites wired into the rendered chrome.

The masthead and nav tree never implement search or collapsing themselves;
they emit calls into browser-side behaviour. These collaborators decide what
those calls look like. The defaults target the site's global JavaScript
functions (``search_changed``, ``buildToggleLists`` and friends); a site with
a different client bundle can inject its own implementation.
"""

from __future__ import annotations

import json
import typing as typ


class SearchBehavior(typ.Protocol):
    """Call sites for the masthead search box."""

    def key_changed(self, *, key_down: bool, toroot: str) -> str:
        """Return the handler invoked on key-down or key-up."""
        ...

    def submit(self) -> str:
        """Return the handler invoked when the search form is submitted."""
        ...

    def focus_changed(self, *, has_focus: bool) -> str:
        """Return the handler invoked when the input gains or loses focus."""
        ...


class NavigationBehavior(typ.Protocol):
    """Call sites for the navigation tree script block."""

    def build_toggle_lists(self) -> str:
        """Return the statement that makes nav sections collapsible."""
        ...

    def change_nav_language(self) -> str:
        """Return the statement that re-applies the preferred language."""
        ...


class ScriptSearchBehavior:
    """Emit calls to the global search functions of the site script."""

    def key_changed(self, *, key_down: bool, toroot: str) -> str:
        flag = "true" if key_down else "false"
        return f"return search_changed(event, {flag}, {_js_string(toroot)})"

    def submit(self) -> str:
        return "return submit_search()"

    def focus_changed(self, *, has_focus: bool) -> str:
        flag = "true" if has_focus else "false"
        return f"search_focus_changed(this, {flag})"


class ScriptNavigationBehavior:
    """Emit calls to the global navigation functions of the site script.

    Parameters
    ----------
    language_lookup : str, optional
        Expression yielding the preferred language on the client. Defaults to
        ``getLangPref()``.
    """

    def __init__(self, language_lookup: str = "getLangPref()") -> None:
        self.language_lookup = language_lookup

    def build_toggle_lists(self) -> str:
        return "buildToggleLists();"

    def change_nav_language(self) -> str:
        return f"changeNavLang({self.language_lookup});"


def _js_string(value: str) -> str:
    """Return ``value`` as a single-quoted JavaScript string literal."""
    encoded = json.dumps(value)[1:-1]
    return "'" + encoded.replace("'", "\\'") + "'"


__all__ = [
    "NavigationBehavior",
    "ScriptNavigationBehavior",
    "ScriptSearchBehavior",
    "SearchBehavior",
]
