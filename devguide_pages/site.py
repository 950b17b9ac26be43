"""Developer-guide page shell rendering pipeline.

This module is the host that feeds the chrome renderers. For every page in
``site.yaml`` it works out the relative ``toroot`` prefix from the page's
depth, expands the masthead and navigation tree with that page's section
flags and language, and writes the combined ``guide_page.jinja`` shell to the
output directory.

Typical usage mirrors the ``pages generate`` command:

>>> from pathlib import Path
>>> from devguide_pages.config import load_site_config
>>> builder = GuidePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/index.html'), PosixPath('public/guide/components/index.html'), ...]

Rendering holds no per-page state, so building the same configuration twice
writes byte-identical files.
"""

from __future__ import annotations

import posixpath
import typing as typ

from markupsafe import Markup

from .masthead import MastheadRenderer
from .navtree import NavTreeRenderer
from .templating import build_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .behaviors import NavigationBehavior, SearchBehavior
    from .config import PageConfig, SiteConfig


def compute_toroot(page_path: str) -> str:
    """Return the relative prefix leading from ``page_path`` to the site root.

    Parameters
    ----------
    page_path : str
        Site-relative path of the page, such as ``guide/components/index.html``.

    Returns
    -------
    str
        ``"../"`` repeated once per directory level; ``""`` for pages at the
        site root.

    Examples
    --------
    >>> compute_toroot("index.html")
    ''
    >>> compute_toroot("guide/components/index.html")
    '../../'
    """
    normalized = posixpath.normpath(page_path.strip().lstrip("/"))
    directory = posixpath.dirname(normalized)
    if not directory or directory == ".":
        return ""
    depth = len([part for part in directory.split("/") if part])
    return "../" * depth


class GuidePageBuilder:
    """Render configured pages with their masthead and navigation chrome."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        search: SearchBehavior | None = None,
        navigation: NavigationBehavior | None = None,
    ) -> None:
        """Initialize the builder, its renderers, and the page template.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed configuration produced by
            :func:`devguide_pages.config.load_site_config`.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``devguide_pages/templates``.
        search : SearchBehavior, optional
            Search call-site collaborator handed to the masthead renderer.
        navigation : NavigationBehavior, optional
            Navigation call-site collaborator handed to the nav tree renderer.
        """
        self.site_config = site_config
        self.masthead = MastheadRenderer(
            site_config.masthead,
            languages=site_config.languages,
            search=search,
            templates_dir=templates_dir,
        )
        self.navtree = NavTreeRenderer(
            languages=site_config.languages,
            navigation=navigation,
            templates_dir=templates_dir,
        )
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("guide_page.jinja")

    def run(
        self, *, output_dir: Path | None = None, pages: list[str] | None = None
    ) -> list[Path]:
        """Render pages to disk and return the written paths.

        Parameters
        ----------
        output_dir : Path, optional
            Override for the configured ``output_dir``.
        pages : list[str], optional
            Restrict the build to these page paths; defaults to every
            configured page, in configuration order.

        Returns
        -------
        list[Path]
            Paths of the written HTML files.

        Raises
        ------
        SiteConfigError
            If ``pages`` names a path that is not configured.
        """
        out_dir = output_dir or self.site_config.output_dir
        selected = (
            [self.site_config.get_page(path) for path in pages]
            if pages is not None
            else list(self.site_config.pages.values())
        )
        written: list[Path] = []
        for page in selected:
            html = self.render(page)
            output_path = out_dir / page.path
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def render_page(self, path: str) -> str:
        """Return the HTML for the page configured at ``path``."""
        return self.render(self.site_config.get_page(path))

    def render(self, page: PageConfig) -> str:
        """Return the HTML shell for ``page``, always ending with a newline."""
        toroot = compute_toroot(page.path)
        language = page.language or self.site_config.language
        masthead_html = self.masthead.render(
            toroot=toroot, flags=page.flags, language=language
        )
        nav_html = self.navtree.render(
            self.site_config.toc, toroot=toroot, language=language
        )
        html = self.template.render(
            page=page,
            site_name=self.site_config.site_name,
            toroot=toroot,
            language=language,
            masthead=Markup(masthead_html),
            navigation=Markup(nav_html),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["GuidePageBuilder", "compute_toroot"]
