"""Catalogue and verify the internal link targets referenced by the chrome.

Every href the nav tree and masthead emit is ``toroot`` followed by a fixed
site-relative suffix. Those suffixes form a static catalogue of pages that
must exist in the published site. A broken target is a content defect, so the
checker reports missing targets rather than raising.

Examples
--------
>>> from pathlib import Path
>>> from devguide_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> LinkChecker(site).check_directory(Path("public"))  # doctest: +SKIP
['reference/packages.html']
"""

from __future__ import annotations

import typing as typ
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import NavNode, SiteConfig


def collect_internal_links(site_config: SiteConfig) -> list[str]:
    """Return the sorted, de-duplicated site-relative targets of the chrome.

    The catalogue covers the TOC tree, the logo link and image, and every
    primary, secondary, and quicknav entry. The "more" menu links are
    absolute and excluded.
    """
    masthead = site_config.masthead
    targets: set[str] = set(_walk_links(site_config.toc))
    targets.update({masthead.logo.link, masthead.logo.src})
    for entry in (*masthead.primary, *masthead.secondary, *masthead.quicknav):
        targets.add(entry.link)
    return sorted(target for target in targets if target)


def _walk_links(nodes: cabc.Iterable[NavNode]) -> cabc.Iterator[str]:
    for node in nodes:
        yield node.link
        yield from _walk_links(node.children)


class LinkChecker:
    """Report catalogue targets missing from a built or published site."""

    def __init__(self, site_config: SiteConfig, *, timeout: float = 15) -> None:
        self.site_config = site_config
        self.timeout = timeout

    def targets(self) -> list[str]:
        """Return the link catalogue for the configured site."""
        return collect_internal_links(self.site_config)

    def check_directory(self, site_dir: Path) -> list[str]:
        """Return targets with no matching file under ``site_dir``.

        Fragment identifiers (``page.html#anchor``) are ignored.
        """
        missing: list[str] = []
        for target in self.targets():
            relative = target.split("#", 1)[0]
            if not (site_dir / relative).is_file():
                missing.append(target)
        return missing

    def check_remote(self, base_url: str) -> list[str]:
        """Return targets that do not resolve on the site served at ``base_url``.

        Each target is requested with ``HEAD`` through a session that retries
        transient server errors. Any final HTTP error status or request failure
        marks the target as missing.
        """
        root = base_url if base_url.endswith("/") else f"{base_url}/"
        session = _build_session()
        missing: list[str] = []
        try:
            for target in self.targets():
                url = urljoin(root, target)
                try:
                    resp = session.head(url, timeout=self.timeout, allow_redirects=True)
                    resp.raise_for_status()
                except requests.RequestException:
                    missing.append(target)
        finally:
            session.close()
        return missing


def _build_session() -> requests.Session:
    """Return a session that retries idempotent requests on server errors."""
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


__all__ = ["LinkChecker", "collect_internal_links"]
