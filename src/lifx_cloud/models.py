"""Models for LIFX."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from mashumaro import field_options
from mashumaro.config import BaseConfig
from mashumaro.mixins.orjson import DataClassORJSONMixin
from mashumaro.types import SerializationStrategy

from .color import Color, to_color
from .const import (
    DURATION_MAX,
    HUE_MAX,
    CycleDirection,
    Product,
    Reachability,
)
from .exceptions import LIFXInvalidParameterError
from .utils import check_range

SCENE_IGNORABLE_FIELDS = frozenset(
    {
        "power",
        "infrared",
        "duration",
        "intensity",
        "hue",
        "saturation",
        "brightness",
        "kelvin",
    }
)


class DurationSerializationStrategy(SerializationStrategy, use_annotations=True):
    """Serialization strategy for durations, which LIFX expresses in seconds."""

    def serialize(self, value: timedelta) -> float:
        """Serialize timedelta object to (fractional) seconds."""
        return value.total_seconds()

    def deserialize(self, value: float) -> timedelta:
        """Deserialize seconds to timedelta object."""
        return timedelta(seconds=value)


class TimestampSerializationStrategy(SerializationStrategy, use_annotations=True):
    """Serialization strategy for datetime objects."""

    def serialize(self, value: datetime) -> float:
        """Serialize datetime object to timestamp."""
        return value.timestamp()

    def deserialize(self, value: float) -> datetime:
        """Deserialize timestamp to datetime object."""
        return datetime.fromtimestamp(value, tz=UTC)


def to_duration(label: str, value: float | timedelta) -> timedelta:
    """Return a validated duration, given in seconds or as a timedelta."""
    seconds = value.total_seconds() if isinstance(value, timedelta) else value
    check_range(label, seconds, 0.0, DURATION_MAX)
    return timedelta(seconds=seconds)


def _power_from_api(value: Any) -> Any:
    """Return the API power state ("on" or "off") as a boolean."""
    if isinstance(value, str):
        return value.lower() == "on"
    return value


class BaseModel(DataClassORJSONMixin):
    """Base model for all LIFX models."""

    # pylint: disable-next=too-few-public-methods
    class Config(BaseConfig):
        """Mashumaro configuration."""

        omit_none = True
        serialization_strategy = {  # noqa: RUF012
            timedelta: DurationSerializationStrategy(),
        }
        serialize_by_alias = True


@dataclass(frozen=True, kw_only=True)
class State(BaseModel):
    """Object describing a desired final state of one or more lights.

    Only the fields that are set are sent to the API; the rest of the
    light state is left untouched. Values are validated on construction.
    """

    power: bool | None = None
    """The desired power state."""

    color: Color | None = None
    """The desired color."""

    brightness: float | None = None
    """The desired brightness, between 0.0 and 1.0.

    Takes priority over any brightness specified in the color.
    """

    duration: timedelta | None = None
    """How long the transition to the new state should take."""

    infrared: float | None = None
    """The desired maximum infrared level, between 0.0 and 1.0."""

    def __post_init__(self) -> None:
        """Validate and normalize the state."""
        if self.power is not None and not isinstance(self.power, bool):
            msg = f"Power must be a boolean, got {self.power!r}"
            raise LIFXInvalidParameterError(msg)
        if self.color is not None:
            object.__setattr__(self, "color", to_color(self.color))
        if self.brightness is not None:
            check_range("Brightness", self.brightness, 0.0, 1.0)
        if self.duration is not None:
            object.__setattr__(self, "duration", to_duration("Duration", self.duration))
        if self.infrared is not None:
            check_range("Infrared", self.infrared, 0.0, 1.0)


@dataclass(frozen=True, kw_only=True)
class SelectorState(State):
    """Object holding a desired state, for the lights matching a selector."""

    selector: str


@dataclass(frozen=True, kw_only=True)
class StateDelta(BaseModel):
    """Object describing a relative change of the state of lights."""

    power: bool | None = None
    """The desired power state."""

    duration: timedelta | None = None
    """How long the transition should take."""

    infrared: float | None = None
    """Change in infrared level, between -1.0 and 1.0."""

    hue: float | None = None
    """Change in hue, between -360 and 360 degrees."""

    saturation: float | None = None
    """Change in saturation, between -1.0 and 1.0."""

    brightness: float | None = None
    """Change in brightness, between -1.0 and 1.0."""

    kelvin: int | None = None
    """Change in color temperature, in kelvin."""

    def __post_init__(self) -> None:
        """Validate and normalize the state change."""
        if self.power is not None and not isinstance(self.power, bool):
            msg = f"Power must be a boolean, got {self.power!r}"
            raise LIFXInvalidParameterError(msg)
        if self.duration is not None:
            object.__setattr__(self, "duration", to_duration("Duration", self.duration))
        if self.infrared is not None:
            check_range("Infrared change", self.infrared, -1.0, 1.0)
        if self.hue is not None:
            check_range("Hue change", self.hue, -HUE_MAX, HUE_MAX)
        if self.saturation is not None:
            check_range("Saturation change", self.saturation, -1.0, 1.0)
        if self.brightness is not None:
            check_range("Brightness change", self.brightness, -1.0, 1.0)
        if self.kelvin is not None and (
            isinstance(self.kelvin, bool) or not isinstance(self.kelvin, int)
        ):
            msg = f"Kelvin change must be an integer, got {self.kelvin!r}"
            raise LIFXInvalidParameterError(msg)


@dataclass(frozen=True, kw_only=True)
class PulsePayload(BaseModel):
    """Object describing a pulse effect, where the color changes abruptly."""

    color: Color
    """The color to use for the effect."""

    from_color: Color | None = None
    """The color to start from. Defaults to the current color of the light."""

    period: timedelta | None = None
    """The duration of a single cycle."""

    cycles: float | None = None
    """The number of cycles to execute."""

    persist: bool | None = None
    """Keep the light at the last color of the effect when done."""

    power_on: bool | None = None
    """Turn the light on if it is off."""

    def __post_init__(self) -> None:
        """Validate and normalize the effect."""
        object.__setattr__(self, "color", to_color(self.color))
        if self.from_color is not None:
            object.__setattr__(self, "from_color", to_color(self.from_color))
        if self.period is not None:
            period = to_duration("Period", self.period)
            if not period:
                msg = "Period must be larger than zero"
                raise LIFXInvalidParameterError(msg)
            object.__setattr__(self, "period", period)
        if self.cycles is not None:
            check_range("Cycles", self.cycles, 0.0, float("inf"))
            if not self.cycles:
                msg = "Cycles must be larger than zero"
                raise LIFXInvalidParameterError(msg)


@dataclass(frozen=True, kw_only=True)
class BreathePayload(PulsePayload):
    """Object describing a breathe effect, where the color fades smoothly."""

    peak: float | None = None
    """Where in a period the target color is at its maximum, 0.0 to 1.0."""

    def __post_init__(self) -> None:
        """Validate and normalize the effect."""
        super().__post_init__()
        if self.peak is not None:
            check_range("Peak", self.peak, 0.0, 1.0)


@dataclass(frozen=True, kw_only=True)
class CyclePayload(BaseModel):
    """Object describing a set of states to cycle through."""

    states: list[State] = field(default_factory=list)
    defaults: State | None = None
    direction: CycleDirection = CycleDirection.FORWARD


@dataclass(frozen=True, kw_only=True)
class SetStatesPayload(BaseModel):
    """Object describing different states for different selectors."""

    states: list[SelectorState] = field(default_factory=list)
    defaults: State | None = None


@dataclass(frozen=True, kw_only=True)
class ActivateScenePayload(BaseModel):
    """Object describing how to activate a scene."""

    duration: timedelta | None = None
    """How long the transition to the scene should take."""

    ignore: list[str] | None = None
    """Properties of the scene to ignore."""

    overrides: State | None = None
    """State that takes priority over all scene properties."""

    def __post_init__(self) -> None:
        """Validate and normalize the activation."""
        if self.duration is not None:
            object.__setattr__(self, "duration", to_duration("Duration", self.duration))
        for name in self.ignore or []:
            if name not in SCENE_IGNORABLE_FIELDS:
                msg = (
                    f"Can not ignore {name!r} when activating a scene, expected "
                    f"one of: {', '.join(sorted(SCENE_IGNORABLE_FIELDS))}"
                )
                raise LIFXInvalidParameterError(msg)


@dataclass(frozen=True, kw_only=True)
class Result(BaseModel):
    """Object holding the outcome of a request for a single light."""

    light_id: str = field(default="", metadata=field_options(alias="id"))
    """The ID of the light."""

    label: str = ""
    """The label of the light."""

    status: Reachability = Reachability.OK
    """Whether the light received the request."""

    @property
    def ok(self) -> bool:
        """Return if the light acknowledged the request."""
        return self.status is Reachability.OK


@dataclass(frozen=True, kw_only=True)
class Results(BaseModel):
    """Object holding the outcome of a request, per light."""

    results: list[Result] = field(default_factory=list)

    @classmethod
    def __pre_deserialize__(cls, d: dict[Any, Any]) -> dict[Any, Any]:
        """Pre deserialize hook for Results object."""
        # Requests doing multiple operations at once (like setting states
        # for multiple selectors) nest the results per operation. We flatten
        # those, as callers care about the outcome for each light.
        results = []
        for result in d.get("results", []):
            if "results" in result:
                results.extend(result["results"])
            else:
                results.append(result)
        return d | {"results": results}

    @property
    def successful(self) -> list[Result]:
        """Return the results of the lights that acknowledged the request."""
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> list[Result]:
        """Return the results of the lights that did not acknowledge."""
        return [result for result in self.results if not result.ok]

    @property
    def ok(self) -> bool:
        """Return if all lights acknowledged the request."""
        return not self.failed


@dataclass(frozen=True, kw_only=True)
class HSBK(BaseModel):
    """Object holding a color as reported by LIFX."""

    hue: float = 0.0
    saturation: float = 0.0
    kelvin: int = 3500


@dataclass(frozen=True, kw_only=True)
class ColorValidation(BaseModel):
    """Object holding the result of validating a color string."""

    hue: float | None = None
    saturation: float | None = None
    brightness: float | None = None
    kelvin: int | None = None


@dataclass(frozen=True, kw_only=True)
class Group(BaseModel):
    """Object holding a group of lights."""

    group_id: str = field(metadata=field_options(alias="id"))
    name: str = ""


@dataclass(frozen=True, kw_only=True)
class Location(BaseModel):
    """Object holding a location of lights."""

    location_id: str = field(metadata=field_options(alias="id"))
    name: str = ""


@dataclass(frozen=True, kw_only=True)
class Capabilities(BaseModel):
    """Object holding the capabilities of a LIFX product."""

    has_color: bool = False
    has_variable_color_temp: bool = False
    has_ir: bool = False
    has_chain: bool = False
    has_multizone: bool = False
    min_kelvin: int | None = None
    max_kelvin: int | None = None


@dataclass(frozen=True, kw_only=True)
class LightProduct(BaseModel):
    """Object holding the product information of a light."""

    name: str = "Unknown"
    identifier: str = ""
    company: str = "LIFX"
    vendor_id: int | None = None
    product_id: int | None = None
    capabilities: Capabilities = field(default_factory=Capabilities)

    @property
    def product(self) -> Product | None:
        """Return the known product, if the product ID is recognized.

        Returns
        -------
            The product, or None if this library does not know it.

        """
        if self.product_id is None:
            return None
        try:
            return Product(self.product_id)
        except ValueError:
            return None


@dataclass(frozen=True, kw_only=True)
class Light(BaseModel):  # pylint: disable=too-many-instance-attributes
    """Object holding a light, as listed by LIFX."""

    light_id: str = field(metadata=field_options(alias="id"))
    """The ID (serial number) of the light."""

    uuid: str = ""
    label: str = ""

    connected: bool = False
    """Whether the light is connected to the LIFX cloud."""

    power: bool = False
    """The on/off state of the light."""

    brightness: float = 0.0
    """Brightness of the light, between 0.0 and 1.0."""

    color: HSBK = field(default_factory=HSBK)

    infrared: float | None = None
    """Maximum infrared level, for lights supporting it."""

    group: Group | None = None
    location: Location | None = None
    product: LightProduct = field(default_factory=LightProduct)

    last_seen: datetime | None = None
    seconds_since_seen: float = 0.0

    @classmethod
    def __pre_deserialize__(cls, d: dict[Any, Any]) -> dict[Any, Any]:
        """Pre deserialize hook for Light object."""
        # The API reports power as "on" or "off".
        if "power" in d:
            d = d | {"power": _power_from_api(d["power"])}
        return d


@dataclass(frozen=True, kw_only=True)
class SceneState(BaseModel):
    """Object holding the state a scene applies to its selector."""

    selector: str
    power: bool | None = None
    brightness: float | None = None
    color: HSBK | None = None

    @classmethod
    def __pre_deserialize__(cls, d: dict[Any, Any]) -> dict[Any, Any]:
        """Pre deserialize hook for SceneState object."""
        if "power" in d:
            d = d | {"power": _power_from_api(d["power"])}
        return d


@dataclass(frozen=True, kw_only=True)
class Scene(BaseModel):
    """Object holding a scene stored in the LIFX account."""

    uuid: str
    name: str = ""
    states: list[SceneState] = field(default_factory=list)

    created_at: datetime | None = None
    updated_at: datetime | None = None

    # pylint: disable-next=too-few-public-methods
    class Config(BaseModel.Config):
        """Mashumaro configuration, scenes use Unix timestamps."""

        serialization_strategy = {  # noqa: RUF012
            timedelta: DurationSerializationStrategy(),
            datetime: TimestampSerializationStrategy(),
        }
