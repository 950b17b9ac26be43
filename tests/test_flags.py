"""Unit tests for ``SectionFlags`` lookups and coercion."""

from __future__ import annotations

import pytest

from devguide_pages.flags import FlagValueError, SectionFlags


def test_absent_flag_reads_false() -> None:
    flags = SectionFlags()
    assert flags.get("reference") is False
    assert flags.get("reference.gcm") is False
    assert flags.any_of(("guide", "reference")) is False


def test_from_names_strips_blanks() -> None:
    flags = SectionFlags.from_names([" guide ", "", "reference.gms"])
    assert flags.enabled == frozenset({"guide", "reference.gms"})


def test_from_mapping_supports_dotted_and_nested_names() -> None:
    flags = SectionFlags.from_mapping(
        {
            "guide": False,
            "reference": {"enabled": True, "gcm": True, "gms": None},
            "reference.extra": True,
        }
    )
    assert flags.enabled == frozenset({"reference", "reference.gcm", "reference.extra"})


def test_nested_mapping_without_enabled_only_sets_sub_flags() -> None:
    flags = SectionFlags.from_mapping({"reference": {"gcm": True}})
    assert flags.get("reference") is False
    assert flags.get("reference.gcm") is True


def test_non_boolean_value_is_rejected() -> None:
    with pytest.raises(FlagValueError, match="reference.gcm"):
        SectionFlags.from_mapping({"reference": {"gcm": "yes"}})


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, frozenset()),
        ("guide", frozenset({"guide"})),
        ("guide  reference", frozenset({"guide", "reference"})),
        (["guide", "tools"], frozenset({"guide", "tools"})),
        ({"tools": True, "google": False}, frozenset({"tools"})),
    ],
)
def test_coerce_accepts_supported_shapes(
    value: object, expected: frozenset[str]
) -> None:
    assert SectionFlags.coerce(value).enabled == expected  # type: ignore[arg-type]


def test_coerce_returns_existing_instance() -> None:
    flags = SectionFlags.from_names(["guide"])
    assert SectionFlags.coerce(flags) is flags
