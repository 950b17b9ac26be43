"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from devguide_pages._constants import DEFAULT_LANGUAGE, LANGUAGE_ORDER

from .helpers import _build_flags, _optional_str, _string_tuple
from .masthead import _build_masthead_config
from .models import PageConfig, SiteConfig, SiteConfigError
from .toc import _build_toc


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the guide's navigation chrome.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site configuration (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration holding the TOC tree, the masthead structure,
        the pages to build, and site-wide defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the TOC, masthead, or page definitions are missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from devguide_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.toc[0].title  # doctest: +SKIP
    'App Components'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "The 'defaults' section must be a mapping."
        raise SiteConfigError(msg)

    toc = _build_toc(raw.get("toc"))
    masthead = _build_masthead_config(raw.get("masthead"))
    language = _optional_str(defaults.get("language")) or DEFAULT_LANGUAGE
    pages = _build_pages(raw.get("pages"))

    return SiteConfig(
        toc=toc,
        masthead=masthead,
        pages=pages,
        output_dir=Path(defaults.get("output_dir", "public")),
        language=language,
        site_name=_optional_str(defaults.get("site_name")) or "Mindroid Developers",
        languages=_string_tuple(defaults.get("languages")) or LANGUAGE_ORDER,
    )


def _build_pages(payload: object | None) -> dict[str, PageConfig]:
    """Build page definitions keyed by their site-relative output path."""
    match payload:
        case None:
            return {}
        case dict() as entries:
            pass
        case _:
            msg = "The 'pages' section must be a mapping of path to page settings."
            raise SiteConfigError(msg)

    pages: dict[str, PageConfig] = {}
    for raw_path, settings in entries.items():
        page_path = str(raw_path).strip().lstrip("/")
        if not page_path:
            msg = "Page paths must not be empty."
            raise SiteConfigError(msg)
        if ".." in page_path.split("/"):
            msg = f"Page '{page_path}' must stay inside the output directory."
            raise SiteConfigError(msg)
        match settings:
            case None:
                data: dict[str, typ.Any] = {}
            case dict():
                data = settings
            case _:
                msg = f"Page '{page_path}' settings must be a mapping."
                raise SiteConfigError(msg)
        pages[page_path] = PageConfig(
            path=page_path,
            title=_optional_str(data.get("title")) or _title_from_path(page_path),
            flags=_build_flags(data.get("flags"), context=f"Page '{page_path}'"),
            language=_optional_str(data.get("language")),
        )
    return pages


def _title_from_path(page_path: str) -> str:
    """Derive a readable title from the page's file or directory name."""
    parts = Path(page_path).with_suffix("").parts
    stem = parts[-1]
    if stem == "index" and len(parts) > 1:
        stem = parts[-2]
    return stem.replace("-", " ").replace("_", " ").title()


__all__ = ["load_site_config"]
