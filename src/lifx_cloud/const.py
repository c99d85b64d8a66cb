"""Asynchronous Python client for the LIFX cloud API."""

from __future__ import annotations

from enum import IntEnum, StrEnum

API_BASE_URL = "https://api.lifx.com/v1"

HUE_MAX = 360
KELVIN_MIN = 1500
KELVIN_MAX = 9000
ZONE_MAX = 255

# The API accepts durations up to 100 years.
DURATION_MAX = 3155760000.0

CYCLE_STATES_MAX = 5
CYCLE_STATES_MIN = 2
SET_STATES_MAX = 50


class Reachability(StrEnum):
    """Enumeration representing the outcome of a request for a single light."""

    OK = "ok"
    """The light is reachable and has received the request."""

    TIMED_OUT = "timed_out"
    """The light did not acknowledge the request."""

    OFFLINE = "offline"
    """The light is powered off or unreachable over the network."""


class NamedColor(StrEnum):
    """Enumeration representing the color names understood by LIFX.

    A named color sets hue and saturation, leaving brightness untouched.
    """

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    WHITE = "white"


class CycleDirection(StrEnum):
    """Enumeration representing the direction a cycle moves in."""

    FORWARD = "forward"
    BACKWARD = "backward"


class Product(IntEnum):
    """Enumeration representing the known LIFX products, by product ID."""

    ORIGINAL_1000 = 1
    COLOR_650 = 3
    WHITE_800_LV = 10
    WHITE_800_HV = 11
    WHITE_900_BR30 = 18
    COLOR_1000_BR30 = 20
    COLOR_1000 = 22
    LIFX_A19 = 27
    LIFX_BR30 = 28
    LIFX_PLUS_A19 = 29
    LIFX_PLUS_BR30 = 30
    LIFX_Z = 31
    LIFX_Z_2 = 32
    LIFX_DOWNLIGHT = 36
    LIFX_BEAM = 38
    LIFX_MINI = 49
    LIFX_MINI_DAY_AND_DUSK = 50
    LIFX_MINI_WHITE = 51
    LIFX_GU10 = 52
    LIFX_TILE = 55

    @property
    def vendor_id(self) -> int:
        """Return the vendor ID, which is 1 for all LIFX products."""
        return 1

    @property
    def display_name(self) -> str:
        """Return the consumer-friendly name of this product."""
        return _PRODUCT_NAMES[self]

    @property
    def has_color(self) -> bool:
        """Return if this product supports colors."""
        return self not in {
            Product.WHITE_800_LV,
            Product.WHITE_800_HV,
            Product.WHITE_900_BR30,
            Product.LIFX_MINI_DAY_AND_DUSK,
            Product.LIFX_MINI_WHITE,
        }

    @property
    def has_infrared(self) -> bool:
        """Return if this product supports infrared."""
        return self in {Product.LIFX_PLUS_A19, Product.LIFX_PLUS_BR30}

    @property
    def has_multizone(self) -> bool:
        """Return if this product supports multiple zones."""
        return self in {Product.LIFX_Z, Product.LIFX_Z_2, Product.LIFX_BEAM}


_PRODUCT_NAMES = {
    Product.ORIGINAL_1000: "Original 1000",
    Product.COLOR_650: "Color 650",
    Product.WHITE_800_LV: "White 800 (Low Voltage)",
    Product.WHITE_800_HV: "White 800 (High Voltage)",
    Product.WHITE_900_BR30: "White 900 BR30 (Low Voltage)",
    Product.COLOR_1000_BR30: "Color 1000 BR30",
    Product.COLOR_1000: "Color 1000",
    Product.LIFX_A19: "LIFX A19",
    Product.LIFX_BR30: "LIFX BR30",
    Product.LIFX_PLUS_A19: "LIFX+ A19",
    Product.LIFX_PLUS_BR30: "LIFX+ BR30",
    Product.LIFX_Z: "LIFX Z",
    Product.LIFX_Z_2: "LIFX Z 2",
    Product.LIFX_DOWNLIGHT: "LIFX Downlight",
    Product.LIFX_BEAM: "LIFX Beam",
    Product.LIFX_MINI: "LIFX Mini",
    Product.LIFX_MINI_DAY_AND_DUSK: "LIFX Mini Day and Dusk",
    Product.LIFX_MINI_WHITE: "LIFX Mini White",
    Product.LIFX_GU10: "LIFX GU10",
    Product.LIFX_TILE: "LIFX Tile",
}
