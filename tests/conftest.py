"""Shared fixtures for the devguide_pages test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from devguide_pages.config import NavNode, SiteConfig, load_site_config

REPO_ROOT = Path(__file__).resolve().parents[1]
SITE_CONFIG_PATH = REPO_ROOT / "config" / "site.yaml"


@pytest.fixture
def site_config() -> SiteConfig:
    """Load the checked-in developer-guide site configuration."""
    return load_site_config(SITE_CONFIG_PATH)


@pytest.fixture
def sample_tree() -> list[NavNode]:
    """Return a three-level tree with partial translations."""
    return [
        NavNode(
            title="App Components",
            link="guide/components/index.html",
            labels={"ja": "アプリ コンポーネント", "es": "Componentes"},
            children=(
                NavNode(
                    title="App Fundamentals",
                    link="guide/components/fundamentals.html",
                    labels={"ja": "アプリの基礎"},
                ),
                NavNode(
                    title="Services",
                    link="guide/components/services.html",
                    children=(
                        NavNode(
                            title="Bound Services",
                            link="guide/components/bound-services.html",
                            labels={"zh-CN": "绑定服务"},
                        ),
                    ),
                ),
            ),
        ),
        NavNode(title="<manifest>", link="guide/topics/manifest/manifest-element.html"),
    ]
