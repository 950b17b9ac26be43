"""Cyclopts CLI entrypoint for rendering developer-guide navigation chrome.

The ``pages`` console script defined here can build the page shells listed in
``site.yaml``, print the nav tree or masthead fragment for an arbitrary root
path and section, and verify that every internal link target exists in a
built site directory or on a live server. Typical usage involves running
``pages generate`` locally or in CI and ``pages links --site-dir public``
before publishing.

Examples
--------
Generate every configured page:

>>> from devguide_pages.cli import main
>>> main()  # doctest: +SKIP

Render the masthead for a reference page two levels deep:

>>> from devguide_pages.cli import app
>>> app(
...     ["masthead", "--toroot", "../../", "--flag", "reference"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .flags import SectionFlags
from .links import LinkChecker
from .masthead import MastheadRenderer
from .navtree import NavTreeRenderer
from .site import GuidePageBuilder

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _emit(html: str, output: Path | None) -> None:
    """Write ``html`` to ``output`` or print it when no output is given."""
    if output is None:
        print(html, end="" if html.endswith("\n") else "\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Render every configured page shell with its navigation chrome.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    page: typ.Annotated[
        list[str] | None,
        Parameter(help="Page path to render (repeatable)", env_var="INPUT_PAGE"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Generate page shells for the requested site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    page : list[str] or None, optional
        Specific page paths to render; when ``None`` (default) all configured
        pages are rendered.
    output_dir : Path or None, optional
        Override the configured output directory.

    Raises
    ------
    SiteConfigError
        If ``page`` names a path missing from the configuration.
    """
    site_config = load_site_config(config)
    builder = GuidePageBuilder(site_config)
    for path in builder.run(output_dir=output_dir, pages=page):
        print(f"wrote {_format_path(path)}")


@app.command(help="Render the table-of-contents navigation fragment.")
def nav(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    toroot: typ.Annotated[str, Parameter(help="Relative prefix to the site root")] = "",
    language: typ.Annotated[
        str | None, Parameter(help="Language of the visible labels")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the fragment here instead of stdout")
    ] = None,
) -> None:
    """Render the nav tree for ``toroot`` and ``language``."""
    site_config = load_site_config(config)
    renderer = NavTreeRenderer(languages=site_config.languages)
    html = renderer.render(
        site_config.toc,
        toroot=toroot,
        language=language or site_config.language,
    )
    _emit(html, output)


@app.command(help="Render the masthead fragment for a page context.")
def masthead(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    toroot: typ.Annotated[str, Parameter(help="Relative prefix to the site root")] = "",
    flag: typ.Annotated[
        list[str] | None,
        Parameter(help="Section flag set for the page (repeatable, e.g. reference.gcm)"),
    ] = None,
    language: typ.Annotated[
        str | None, Parameter(help="Language of translated labels")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the fragment here instead of stdout")
    ] = None,
) -> None:
    """Render the masthead for ``toroot``, section flags, and ``language``."""
    site_config = load_site_config(config)
    renderer = MastheadRenderer(site_config.masthead, languages=site_config.languages)
    html = renderer.render(
        toroot=toroot,
        flags=SectionFlags.from_names(flag or []),
        language=language or site_config.language,
    )
    _emit(html, output)


@app.command(help="Check that every internal link target exists.")
def links(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    site_dir: typ.Annotated[
        Path | None, Parameter(help="Built site directory to check")
    ] = None,
    base_url: typ.Annotated[
        str | None, Parameter(help="Published site URL to check")
    ] = None,
) -> None:
    """Report missing link targets and exit non-zero when any are found.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    site_dir : Path or None, optional
        Local directory to check; defaults to the configured output directory
        when ``base_url`` is not given.
    base_url : str or None, optional
        Root URL of a published site to check over HTTP instead.

    Raises
    ------
    ValueError
        If both ``site_dir`` and ``base_url`` are supplied.
    SystemExit
        With status 1 when at least one target is missing.
    """
    if site_dir and base_url:
        msg = "Pass either --site-dir or --base-url, not both."
        raise ValueError(msg)
    site_config = load_site_config(config)
    checker = LinkChecker(site_config)
    if base_url:
        missing = checker.check_remote(base_url)
    else:
        missing = checker.check_directory(site_dir or site_config.output_dir)
    for target in missing:
        print(f"missing {target}")
    if missing:
        raise SystemExit(1)
    print(f"checked {len(checker.targets())} links")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
