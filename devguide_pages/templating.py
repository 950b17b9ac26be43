"""Jinja environment shared by the chrome renderers."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATES_DIR = Path(__file__).parent / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment over ``templates_dir``.

    Autoescaping is always on; call-site snippets that must reach the page
    verbatim are passed in as :class:`markupsafe.Markup`.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


__all__ = ["TEMPLATES_DIR", "build_environment"]
