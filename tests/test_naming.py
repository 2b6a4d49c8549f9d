"""Tests for nativegen.codegen.core.naming."""

from __future__ import annotations

import pytest

from nativegen.codegen.core.naming import NameSanitizer, NamingCase


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (NamingCase.ORIGINAL, "GET_LABEL_TEXT"),
        (NamingCase.SNAKE_CASE, "get_label_text"),
        (NamingCase.CAMEL_CASE, "getLabelText"),
        (NamingCase.PASCAL_CASE, "GetLabelText"),
        (NamingCase.SCREAMING_SNAKE, "GET_LABEL_TEXT"),
    ],
)
def test_case_conversion(case: NamingCase, expected: str) -> None:
    assert NameSanitizer().sanitize_name("GET_LABEL_TEXT", case) == expected


def test_mixed_case_names_convert() -> None:
    assert NameSanitizer.convert_case("labelName", NamingCase.SNAKE_CASE) == "label_name"
    assert NameSanitizer.convert_case("labelName", NamingCase.PASCAL_CASE) == "LabelName"
    assert (
        NameSanitizer.convert_case("GET_GROUND_Z_FOR_3D_COORD", NamingCase.PASCAL_CASE)
        == "GetGroundZFor3dCoord"
    )


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (NamingCase.SNAKE_CASE, "get_ground_z_for_3d_coord"),
        (NamingCase.CAMEL_CASE, "getGroundZFor3dCoord"),
        (NamingCase.PASCAL_CASE, "GetGroundZFor3dCoord"),
        (NamingCase.SCREAMING_SNAKE, "GET_GROUND_Z_FOR_3D_COORD"),
    ],
)
def test_digits_stay_with_their_word_in_upper_snake(case: NamingCase, expected: str) -> None:
    assert NameSanitizer().sanitize_name("GET_GROUND_Z_FOR_3D_COORD", case) == expected


def test_mixed_case_humps_after_digits_still_split() -> None:
    assert NameSanitizer.convert_case("vector3Length", NamingCase.SNAKE_CASE) == "vector3_length"


@pytest.mark.parametrize("name", ["_0x4ede34fbadd967a6", "0x4EDE34FBADD967A6"])
def test_hash_names_are_kept(name: str) -> None:
    sanitizer = NameSanitizer()

    assert sanitizer.sanitize_name(name, NamingCase.PASCAL_CASE) == "_0x4EDE34FBADD967A6"


def test_invalid_characters_and_leading_digits() -> None:
    sanitizer = NameSanitizer()

    assert sanitizer.sanitize_name("p-1") == "p_1"
    assert sanitizer.sanitize_name("3dCoord") == "_3dCoord"
    assert sanitizer.sanitize_name("__") == "unnamed"


def test_reserved_words_use_conflict_format() -> None:
    sanitizer = NameSanitizer({"end"}, {"string"}, conflict_format="@{name}")

    assert sanitizer.sanitize_name("end") == "@end"
    assert sanitizer.sanitize_name("string") == "@string"
    assert sanitizer.sanitize_name("End") == "End"


def test_sanitizing_is_deterministic() -> None:
    first = NameSanitizer({"end"})
    second = NameSanitizer({"end"})
    names = ["GET_LABEL_TEXT", "end", "labelName", "_0xABC"]

    results = [first.sanitize_name(n, NamingCase.CAMEL_CASE) for n in names]

    assert results == [second.sanitize_name(n, NamingCase.CAMEL_CASE) for n in names]
    assert results == [first.sanitize_name(n, NamingCase.CAMEL_CASE) for n in names]
