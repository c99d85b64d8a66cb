"""Colors, in the color string format understood by LIFX."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Self

from mashumaro.types import SerializableType

from .const import HUE_MAX, KELVIN_MAX, KELVIN_MIN, NamedColor
from .exceptions import LIFXInvalidParameterError
from .utils import check_range, format_number


def _normalize_hex(value: str) -> str:
    digits = value.removeprefix("#")
    expected = 7 if value.startswith("#") else 6
    if len(digits) < 6:  # noqa: PLR2004
        msg = f"RGB string {value} is too short ({len(value)} chars; expected {expected})"
        raise LIFXInvalidParameterError(msg)
    if len(digits) > 6:  # noqa: PLR2004
        msg = f"RGB string {value} is too long ({len(value)} chars; expected {expected})"
        raise LIFXInvalidParameterError(msg)
    if any(char not in string.hexdigits for char in digits):
        msg = f"RGB string {value} contains non-hexadecimal characters"
        raise LIFXInvalidParameterError(msg)
    return f"#{digits.lower()}"


@dataclass(frozen=True, kw_only=True)
class Color(SerializableType):
    """Object describing the desired color of a light.

    HSBK is the preferred way of specifying colors, RGB represents color
    poorly on LIFX hardware; RGB colors are converted by the API. A color
    may combine a base (a name, an RGB value or a hex string) with any of
    the HSBK components, for example `red saturation:0.5`.

    A custom color string is passed through as-is and cannot be combined
    with other components.
    """

    name: NamedColor | None = None
    """Named color, setting hue and saturation."""

    hue: float | None = None
    """Hue in degrees, between 0 and 360."""

    saturation: float | None = None
    """Saturation, between 0.0 and 1.0."""

    brightness: float | None = None
    """Brightness, between 0.0 and 1.0."""

    kelvin: int | None = None
    """Color temperature, between 1500 and 9000. Sets saturation to 0."""

    rgb: tuple[int, int, int] | None = None
    """Red, green and blue components, each between 0 and 255."""

    rgb_hex: str | None = None
    """RGB as a hex string, normalized to `#rrggbb`."""

    custom: str | None = None
    """Custom color string, for undocumented color specifiers."""

    def __post_init__(self) -> None:  # noqa: PLR0912
        """Validate the color components."""
        components = (
            self.name,
            self.hue,
            self.saturation,
            self.brightness,
            self.kelvin,
            self.rgb,
            self.rgb_hex,
        )
        if self.custom is not None:
            if not self.custom.strip():
                msg = "A custom color string can not be empty"
                raise LIFXInvalidParameterError(msg)
            if any(component is not None for component in components):
                msg = "A custom color can not be combined with other components"
                raise LIFXInvalidParameterError(msg)
            return

        if all(component is None for component in components):
            msg = "A color needs at least one component"
            raise LIFXInvalidParameterError(msg)

        if sum(base is not None for base in (self.name, self.rgb, self.rgb_hex)) > 1:
            msg = "Only one of name, rgb or rgb_hex can be set on a color"
            raise LIFXInvalidParameterError(msg)

        if self.name is not None:
            try:
                object.__setattr__(self, "name", NamedColor(self.name))
            except ValueError as exception:
                msg = f"Unknown color name: {self.name!r}"
                raise LIFXInvalidParameterError(msg) from exception

        if self.hue is not None:
            check_range("Hue", self.hue, 0, HUE_MAX)

        if self.saturation is not None:
            check_range("Saturation", self.saturation, 0.0, 1.0)

        if self.brightness is not None:
            check_range("Brightness", self.brightness, 0.0, 1.0)

        if self.kelvin is not None:
            if isinstance(self.kelvin, bool) or not isinstance(self.kelvin, int):
                msg = f"Temperature must be an integer, got {self.kelvin!r}"
                raise LIFXInvalidParameterError(msg)
            if self.kelvin < KELVIN_MIN:
                msg = f"Temperature {self.kelvin} K is too small (min: {KELVIN_MIN} K)"
                raise LIFXInvalidParameterError(msg)
            if self.kelvin > KELVIN_MAX:
                msg = f"Temperature {self.kelvin} K is too large (max: {KELVIN_MAX} K)"
                raise LIFXInvalidParameterError(msg)

        if self.rgb is not None:
            if (
                not isinstance(self.rgb, tuple | list)
                or len(self.rgb) != 3  # noqa: PLR2004
                or any(
                    isinstance(component, bool)
                    or not isinstance(component, int)
                    or not 0 <= component <= 255  # noqa: PLR2004
                    for component in self.rgb
                )
            ):
                msg = f"RGB value {self.rgb} needs three components between 0 and 255"
                raise LIFXInvalidParameterError(msg)
            object.__setattr__(self, "rgb", tuple(self.rgb))

        if self.rgb_hex is not None:
            object.__setattr__(self, "rgb_hex", _normalize_hex(self.rgb_hex))

    def __str__(self) -> str:
        """Return the color string as understood by the LIFX API."""
        if self.custom is not None:
            return self.custom

        parts: list[str] = []
        if self.name is not None:
            parts.append(str(self.name))
        if self.hue is not None:
            parts.append(f"hue:{format_number(self.hue)}")
        if self.saturation is not None:
            parts.append(f"saturation:{format_number(self.saturation)}")
        if self.brightness is not None:
            parts.append(f"brightness:{format_number(self.brightness)}")
        if self.kelvin is not None:
            parts.append(f"kelvin:{self.kelvin}")
        if self.rgb is not None:
            parts.append("rgb:{},{},{}".format(*self.rgb))
        if self.rgb_hex is not None:
            parts.append(self.rgb_hex)
        return " ".join(parts)

    @classmethod
    def from_name(cls, name: NamedColor | str) -> Self:
        """Return a named color, e.g. `Color.from_name(NamedColor.RED)`."""
        return cls(name=name)  # type: ignore[arg-type]

    @classmethod
    def from_hsbk(
        cls,
        *,
        hue: float | None = None,
        saturation: float | None = None,
        brightness: float | None = None,
        kelvin: int | None = None,
    ) -> Self:
        """Return a color from its HSBK components."""
        return cls(
            hue=hue,
            saturation=saturation,
            brightness=brightness,
            kelvin=kelvin,
        )

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Self:
        """Return a color from its RGB components."""
        return cls(rgb=(red, green, blue))

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Return a color from a `#rrggbb` or `rrggbb` string."""
        return cls(rgb_hex=value)

    @classmethod
    def from_custom(cls, value: str) -> Self:
        """Return a color from a custom color string, passed through as-is."""
        return cls(custom=value)

    @classmethod
    def from_string(cls, value: str) -> Self:  # noqa: PLR0912
        """Parse a color string, as produced by `str()`.

        Args:
        ----
            value: The color string, e.g. `hue:120 saturation:1`.

        Returns:
        -------
            The parsed color.

        Raises:
        ------
            LIFXInvalidParameterError: The string is not a valid color.

        """
        components: dict[str, object] = {}
        tokens = value.lower().split()
        if not tokens:
            msg = "An empty color string is not valid"
            raise LIFXInvalidParameterError(msg)

        for token in tokens:
            label, separator, amount = token.partition(":")
            try:
                if not separator:
                    if token in NamedColor.__members__.values():
                        components["name"] = NamedColor(token)
                    else:
                        components["rgb_hex"] = token
                elif not amount:
                    msg = f"Expected a value after {label}: in color {value!r}"
                    raise LIFXInvalidParameterError(msg)
                elif label in ("hue", "saturation", "brightness"):
                    components[label] = float(amount)
                elif label == "kelvin":
                    components["kelvin"] = int(amount)
                elif label == "rgb":
                    red, green, blue = (int(part) for part in amount.split(","))
                    components["rgb"] = (red, green, blue)
                else:
                    msg = f"Unknown color component {label!r} in color {value!r}"
                    raise LIFXInvalidParameterError(msg)
            except ValueError as exception:
                msg = f"Failed to parse {token!r} in color {value!r}"
                raise LIFXInvalidParameterError(msg) from exception

        return cls(**components)  # type: ignore[arg-type]

    def _serialize(self) -> str:
        return str(self)

    @classmethod
    def _deserialize(cls, value: str) -> Color:
        return cls.from_string(value)


def to_color(color: Color | NamedColor | str) -> Color:
    """Return a Color object for any of the accepted color notations."""
    if isinstance(color, Color):
        return color
    if isinstance(color, NamedColor):
        return Color.from_name(color)
    return Color.from_string(color)
