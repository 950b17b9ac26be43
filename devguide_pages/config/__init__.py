"""Load and validate site configuration YAML for developer-guide builds.

This subpackage parses the project's ``site.yaml`` file into the static
navigation tree, the masthead structure (nav entries, translations, quicknav
shortcuts), and the pages whose chrome the host renders. The primary entry
point is :func:`load_site_config`, which applies defaults and returns a
:class:`SiteConfig` ready for rendering.

Examples
--------
>>> from pathlib import Path
>>> from devguide_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_page("guide/components/index.html").flags.get("guide")  # doctest: +SKIP
True
"""

from .loader import load_site_config
from .models import (
    ExternalLinkConfig,
    LogoConfig,
    MastheadConfig,
    NavBarEntry,
    NavNode,
    PageConfig,
    SiteConfig,
    SiteConfigError,
    default_masthead,
)

__all__ = [
    "ExternalLinkConfig",
    "LogoConfig",
    "MastheadConfig",
    "NavBarEntry",
    "NavNode",
    "PageConfig",
    "SiteConfig",
    "SiteConfigError",
    "default_masthead",
    "load_site_config",
]
