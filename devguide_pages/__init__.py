"""Utilities for rendering developer-guide navigation chrome.

This package renders the table-of-contents tree and the page masthead that
frame every developer-guide page, and exposes the CLI entry points used by
``pages`` to build page shells and check link targets.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from devguide_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
