from __future__ import annotations

import pytest

from spiderchart.colors import BLACK, RGBA, TRANSPARENT, parse_color, resolve_with_opacity


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", TRANSPARENT),
        (None, TRANSPARENT),
        ("transparent", TRANSPARENT),
        ("#ff8000", RGBA(255, 128, 0, 255)),
        ("#FF800080", RGBA(255, 128, 0, 128)),
        ("#ff80zz", BLACK),
        ("#fff", BLACK),
        ("Red", RGBA(255, 0, 0, 255)),
        ("cornflowerblue", RGBA(100, 149, 237, 255)),
        ("not-a-color", TRANSPARENT),
    ],
)
def test_parse_color(value, expected) -> None:
    assert parse_color(value) == expected


def test_parse_color_passes_rgba_through() -> None:
    color = RGBA(1, 2, 3, 4)
    assert parse_color(color) is color


def test_resolve_with_opacity_overwrites_alpha() -> None:
    assert resolve_with_opacity("#102030", 0.5) == RGBA(16, 32, 48, 127)
    assert resolve_with_opacity("#10203040", 1.0).a == 255


@pytest.mark.parametrize("opacity, alpha", [(-1.0, 0), (0.0, 0), (1.0, 255), (7.5, 255)])
def test_resolve_with_opacity_clamps(opacity: float, alpha: int) -> None:
    assert resolve_with_opacity("black", opacity).a == alpha


def test_rgba_helpers() -> None:
    color = RGBA(0x67, 0x7A, 0xD1)
    assert color.to_hex() == "#677ad1"
    assert color.to_tuple() == (0x67, 0x7A, 0xD1, 255)
    assert not color.is_transparent
    assert TRANSPARENT.is_transparent
