# tests/test_colors.py

import pytest

from portal.colors import (
    DEFAULT_SUBJECT_COLOR,
    INT32_MIN,
    NOTICE_CARD_COLORS,
    SUBJECT_COLORS,
    hash_identifier,
    index_for_hash,
    notice_card_color,
    palette_index,
    subject_color,
    to_int32,
)


def token(name):
    return f"bg-{name}-100 border-l-4 border-{name}-500"


def test_palette_order():
    names = [
        "blue", "purple", "pink", "green", "yellow", "orange",
        "teal", "indigo", "cyan", "rose", "emerald", "violet",
    ]
    assert NOTICE_CARD_COLORS == tuple(token(n) for n in names)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (2 ** 31 - 1, 2 ** 31 - 1),
        (2 ** 31, INT32_MIN),
        (2 ** 32, 0),
        (2 ** 32 + 5, 5),
        (-1, -1),
        (-(2 ** 31) - 1, 2 ** 31 - 1),
    ],
)
def test_to_int32_wraps(value, expected):
    assert to_int32(value) == expected


def test_empty_identifier_is_blue():
    assert hash_identifier("") == 0
    assert palette_index("") == 0
    assert notice_card_color("") == token("blue")


def test_single_char():
    assert hash_identifier("a") == 97
    assert palette_index("a") == 1
    assert notice_card_color("a") == token("purple")


def test_abc_golden_value():
    assert hash_identifier("abc") == 96354
    assert palette_index("abc") == 6
    assert notice_card_color("abc") == token("teal")


def test_collisions_are_tolerated():
    # 97 and 109 differ by exactly one palette length
    assert hash_identifier("a") != hash_identifier("m")
    assert notice_card_color("a") == notice_card_color("m")


def test_long_identifier_stays_in_range():
    ident = "x" * 50_000
    assert hash_identifier(ident) == -1066674176
    assert palette_index(ident) == 8
    assert notice_card_color(ident) in NOTICE_CARD_COLORS


def test_uuid_hash_fits_int32():
    h = hash_identifier("9f1c2d3e-4b5a-6789-abcd-ef0123456789")
    assert -(2 ** 31) <= h < 2 ** 31


def test_int32_min_edge():
    # 2325*31^4 + 9*31^3 + 30*31^2 + 12*31 + 2 == 2**31
    ident = "क\t\x1e\x0c\x02"
    assert hash_identifier(ident) == INT32_MIN
    assert index_for_hash(INT32_MIN) == 8
    assert notice_card_color(ident) == token("cyan")


def test_index_for_hash_sign_agnostic():
    assert index_for_hash(-97) == index_for_hash(97) == 1
    assert index_for_hash(INT32_MIN, size=20) == 2 ** 31 % 20


def test_astral_characters_hash_as_surrogate_pairs():
    # U+1F600 is D83D DE00 in UTF-16
    assert hash_identifier("\U0001F600") == to_int32(0xD83D * 31 + 0xDE00)


def test_lone_surrogate_does_not_raise():
    assert notice_card_color("\ud800") in NOTICE_CARD_COLORS


def test_deterministic():
    ident = "2b0f6c1e-8f7e-4a52-9a0b-5c7d9e1f2a3b"
    first = notice_card_color(ident)
    assert all(notice_card_color(ident) == first for _ in range(100))


@pytest.mark.parametrize("ident", ["", "a", "Z", "notice-42", "ü", "x" * 1000, "\x00"])
def test_bounded(ident):
    assert 0 <= palette_index(ident) < len(NOTICE_CARD_COLORS)


def test_subject_color_wraps():
    assert len(SUBJECT_COLORS) == 20
    assert subject_color(0) == SUBJECT_COLORS[0]
    assert subject_color(20) == SUBJECT_COLORS[0]
    assert subject_color(23) == SUBJECT_COLORS[3]
    assert "red" in subject_color(7)


def test_subject_without_index_is_gray():
    assert subject_color(None) == DEFAULT_SUBJECT_COLOR
    assert DEFAULT_SUBJECT_COLOR not in SUBJECT_COLORS
