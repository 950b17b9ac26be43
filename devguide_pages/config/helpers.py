"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ

from devguide_pages.flags import FlagValueError, SectionFlags

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(value: object | None, *, field: str, context: str) -> str:
    """Return a stripped string value or raise when it is missing."""
    text = _optional_str(value)
    if text is None:
        msg = f"{context} requires '{field}'."
        raise SiteConfigError(msg)
    return text


def _string_tuple(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize a name or list of names into a tuple of non-empty strings."""
    if isinstance(value, str):
        return tuple(segment for segment in value.split() if segment)
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return tuple(normalized)
    return ()


def _normalize_labels(value: object | None, *, context: str) -> dict[str, str]:
    """Return a ``language -> text`` mapping with empty entries dropped."""
    match value:
        case None:
            return {}
        case dict() as payload:
            labels: dict[str, str] = {}
            for language, text in payload.items():
                code = _optional_str(language)
                label = _optional_str(text)
                if code and label:
                    labels[code] = label
            return labels
        case _:
            msg = f"{context} translations must be a mapping of language to text."
            raise SiteConfigError(msg)


def _build_flags(value: object | None, *, context: str) -> SectionFlags:
    """Build :class:`SectionFlags` from a list of names or a name/bool mapping."""
    match value:
        case None:
            return SectionFlags()
        case str() | list() | dict():
            try:
                return SectionFlags.coerce(value)
            except FlagValueError as exc:
                msg = f"{context}: {exc}"
                raise SiteConfigError(msg) from exc
        case _:
            msg = f"{context} flags must be a list of names or a mapping."
            raise SiteConfigError(msg)


def language_sort_key(
    order: typ.Sequence[str],
) -> typ.Callable[[str], tuple[int, str]]:
    """Return a sort key placing known languages first, in ``order``."""
    positions = {code: index for index, code in enumerate(order)}

    def _key(code: str) -> tuple[int, str]:
        return (positions.get(code, len(positions)), code)

    return _key


__all__ = [
    "_build_flags",
    "_normalize_labels",
    "_optional_str",
    "_required_str",
    "_string_tuple",
    "language_sort_key",
]
