"""Section flags describing where a page sits within the developer site.

Pages declare which top-level sections they belong to (``guide``,
``reference``, ``training`` and so on). Sub-flags are addressed with dotted
names such as ``reference.gcm``. Lookups are explicit optional-boolean reads:
a flag that was never set reads as ``False``.

Examples
--------
>>> flags = SectionFlags.from_names(["reference", "reference.gcm"])
>>> flags.get("reference"), flags.get("guide")
(True, False)
>>> flags.any_of(("training", "reference"))
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ


class FlagValueError(ValueError):
    """Raised when a section flag is given a non-boolean value."""


@dc.dataclass(frozen=True, slots=True)
class SectionFlags:
    """Immutable snapshot of the section flags set for one page."""

    enabled: frozenset[str] = frozenset()

    @classmethod
    def from_names(cls, names: cabc.Iterable[str]) -> SectionFlags:
        """Build flags from an iterable of enabled flag names."""
        cleaned = {str(name).strip() for name in names}
        return cls(frozenset(name for name in cleaned if name))

    @classmethod
    def from_mapping(cls, payload: cabc.Mapping[str, typ.Any]) -> SectionFlags:
        """Build flags from a ``name -> bool`` mapping.

        Nested mappings address sub-flags, so ``{"reference": {"gcm": True}}``
        enables ``reference.gcm``. A nested mapping may carry its own value
        under the ``enabled`` key (``{"reference": {"enabled": True}}``).
        ``None`` reads as ``False``; any other non-boolean value raises
        :class:`FlagValueError`.
        """
        enabled: set[str] = set()
        _collect_enabled(payload, prefix="", into=enabled)
        return cls(frozenset(enabled))

    @classmethod
    def coerce(
        cls, value: SectionFlags | cabc.Mapping[str, typ.Any] | cabc.Iterable[str] | None
    ) -> SectionFlags:
        """Return ``value`` as :class:`SectionFlags`, accepting mappings or names.

        A bare string is a whitespace-separated list of names, matching how
        nav entries spell ``selected_by``.
        """
        match value:
            case None:
                return cls()
            case SectionFlags():
                return value
            case str():
                return cls.from_names(value.split())
            case cabc.Mapping():
                return cls.from_mapping(value)
            case _:
                return cls.from_names(value)

    def get(self, name: str) -> bool:
        """Return whether ``name`` is set; absent flags read as ``False``."""
        return name in self.enabled

    def any_of(self, names: cabc.Iterable[str]) -> bool:
        """Return ``True`` when at least one of ``names`` is set."""
        return any(self.get(name) for name in names)


def _collect_enabled(
    payload: cabc.Mapping[str, typ.Any], *, prefix: str, into: set[str]
) -> None:
    for raw_key, value in payload.items():
        key = f"{prefix}{str(raw_key).strip()}"
        if isinstance(value, cabc.Mapping):
            if _as_bool(key, value.get("enabled")):
                into.add(key)
            nested = {k: v for k, v in value.items() if k != "enabled"}
            _collect_enabled(nested, prefix=f"{key}.", into=into)
            continue
        if _as_bool(key, value):
            into.add(key)


def _as_bool(name: str, value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    msg = f"Section flag '{name}' must be a boolean, got {value!r}."
    raise FlagValueError(msg)


__all__ = ["FlagValueError", "SectionFlags"]
