"""Common literal values used across devguide_pages.

These constants keep language codes, section flag names, and default link
targets centralized so templates, renderers, and tests can import the same
values without drifting. Intended for internal use within the devguide_pages
package.

Examples
--------
>>> from devguide_pages import _constants
>>> _constants.DEFAULT_LANGUAGE
'en'
>>> "guide" in _constants.X_NAV_FLAGS
True
"""

DEFAULT_LANGUAGE = "en"

# Localized labels are emitted in this order; unknown codes sort after these.
LANGUAGE_ORDER: tuple[str, ...] = ("en", "es", "ja", "ko", "ru", "zh-CN", "zh-TW")

# Any of these flags places a page inside the developer section.
X_NAV_FLAGS: tuple[str, ...] = (
    "training",
    "guide",
    "reference",
    "tools",
    "develop",
    "google",
)

REFERENCE_CARVE_OUTS: tuple[str, ...] = ("reference.gcm", "reference.gms")

INDEX_PAGE = "index.html"
GUIDES_LINK = "guide/components/index.html"
REFERENCE_LINK = "reference/packages.html"
DEVELOP_LINK = "develop/index.html"
