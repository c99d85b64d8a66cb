"""Tests for `lifx_cloud.Color`."""

from __future__ import annotations

import pytest

from lifx_cloud import Color, NamedColor
from lifx_cloud.color import to_color
from lifx_cloud.exceptions import LIFXInvalidParameterError


@pytest.mark.parametrize(
    ("color", "expected"),
    [
        (Color.from_name(NamedColor.RED), "red"),
        (Color.from_name("white"), "white"),
        (Color.from_hsbk(hue=120, saturation=1.0), "hue:120 saturation:1"),
        (Color.from_hsbk(brightness=0.25), "brightness:0.25"),
        (Color.from_hsbk(kelvin=3500), "kelvin:3500"),
        (Color.from_rgb(255, 0, 0), "rgb:255,0,0"),
        (Color.from_hex("FF0000"), "#ff0000"),
        (Color.from_hex("#00ff00"), "#00ff00"),
        (Color(name=NamedColor.BLUE, saturation=0.5), "blue saturation:0.5"),
        (Color(rgb_hex="#0000ff", brightness=1.0), "brightness:1 #0000ff"),
        (Color.from_custom("hue:120 flux:2"), "hue:120 flux:2"),
    ],
)
def test_color_string(color: Color, expected: str) -> None:
    """Test colors render to the color string format."""
    assert str(color) == expected


@pytest.mark.parametrize(
    ("components", "message"),
    [
        ({}, "at least one component"),
        ({"hue": 361}, "Hue 361 is too large"),
        ({"hue": -1}, "Hue -1 is too small"),
        ({"saturation": 1.5}, "Saturation 1.5 is too large"),
        ({"brightness": -0.1}, "Brightness -0.1 is too small"),
        ({"kelvin": 1000}, "Temperature 1000 K is too small"),
        ({"kelvin": 10000}, "Temperature 10000 K is too large"),
        ({"kelvin": "3000"}, "must be an integer"),
        ({"kelvin": 3000.5}, "must be an integer"),
        ({"kelvin": True}, "must be an integer"),
        ({"rgb": (256, 0, 0)}, "three components"),
        ({"rgb": (255, 0)}, "three components"),
        ({"rgb": (255, 0.5, 0)}, "three components"),
        ({"rgb": (255, "0", 0)}, "three components"),
        ({"rgb": 255}, "three components"),
        ({"rgb_hex": "#ff00"}, "is too short"),
        ({"rgb_hex": "ff00000"}, "is too long"),
        ({"rgb_hex": "zzzzzz"}, "non-hexadecimal"),
        ({"name": "magenta"}, "Unknown color name"),
        ({"name": "red", "rgb": (255, 0, 0)}, "Only one of"),
        ({"custom": "  "}, "can not be empty"),
        ({"custom": "red", "hue": 20}, "can not be combined"),
    ],
)
def test_invalid_color(components: dict[str, object], message: str) -> None:
    """Test invalid colors are rejected on construction."""
    with pytest.raises(LIFXInvalidParameterError, match=message):
        Color(**components)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("red", Color(name=NamedColor.RED)),
        ("RED saturation:0.5", Color(name=NamedColor.RED, saturation=0.5)),
        ("hue:120 saturation:1", Color.from_hsbk(hue=120, saturation=1)),
        ("kelvin:2700 brightness:0.5", Color.from_hsbk(kelvin=2700, brightness=0.5)),
        ("rgb:0,255,0", Color.from_rgb(0, 255, 0)),
        ("#00FF00", Color.from_hex("#00ff00")),
        ("00ff00", Color.from_hex("#00ff00")),
    ],
)
def test_from_string(text: str, expected: Color) -> None:
    """Test parsing color strings."""
    assert Color.from_string(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "   ", "hue:", "hue:red", "rgb:1,2", "kelvin:warm", "sparkle:1", "magenta"],
)
def test_from_string_invalid(text: str) -> None:
    """Test parsing invalid color strings."""
    with pytest.raises(LIFXInvalidParameterError):
        Color.from_string(text)


def test_to_color() -> None:
    """Test all accepted color notations end up as a color."""
    color = Color.from_hsbk(hue=30)
    assert to_color(color) is color
    assert to_color(NamedColor.PINK) == Color(name=NamedColor.PINK)
    assert to_color("pink") == Color(name=NamedColor.PINK)
    assert to_color("hue:30") == color
