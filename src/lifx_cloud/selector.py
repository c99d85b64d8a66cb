"""Selectors, identifying the lights a request acts on."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Self, TypeAlias

from .const import ZONE_MAX
from .exceptions import LIFXInvalidParameterError

RANDOM_SUFFIX = ":random"


class SelectorKind(StrEnum):
    """Enumeration representing the ways LIFX can select lights."""

    ALL = "all"
    LABEL = "label"
    ID = "id"
    GROUP_ID = "group_id"
    GROUP = "group"
    LOCATION_ID = "location_id"
    LOCATION = "location"
    SCENE_ID = "scene_id"


@dataclass(frozen=True)
class Selector:
    """Object identifying one or more lights belonging to an account.

    All resolutions of selectors are treated as sets by the API, even if
    they logically match a single device.

    A selector can be constrained to specific zones with `zoned`, and can
    be told to pick a single random device from its matches with `random`.
    Selectors are immutable; both methods return a new selector.
    """

    kind: SelectorKind
    value: str = ""
    zones: tuple[int, ...] = ()
    randomize: bool = False

    def __post_init__(self) -> None:
        """Validate the selector."""
        try:
            object.__setattr__(self, "kind", SelectorKind(self.kind))
        except ValueError as exception:
            msg = f"Unknown selector kind: {self.kind!r}"
            raise LIFXInvalidParameterError(msg) from exception

        if self.kind is SelectorKind.ALL:
            if self.value:
                msg = "The 'all' selector does not take a value"
                raise LIFXInvalidParameterError(msg)
        elif not self.value:
            msg = f"A {self.kind} selector needs a non-empty value"
            raise LIFXInvalidParameterError(msg)

        for zone in self.zones:
            if isinstance(zone, bool) or not isinstance(zone, int):
                msg = f"Zone {zone!r} is not an integer"
                raise LIFXInvalidParameterError(msg)
            if not 0 <= zone <= ZONE_MAX:
                msg = f"Zone {zone} is out of range (0-{ZONE_MAX})"
                raise LIFXInvalidParameterError(msg)

    def __str__(self) -> str:
        """Return the selector as used in the API path."""
        if self.kind is SelectorKind.ALL:
            selector = str(self.kind)
        else:
            selector = f"{self.kind}:{self.value}"
        selector += "".join(f"|{zone}" for zone in self.zones)
        if self.randomize:
            selector += RANDOM_SUFFIX
        return selector

    @classmethod
    def all(cls) -> Self:
        """Select all lights on the account."""
        return cls(SelectorKind.ALL)

    @classmethod
    def label(cls, label: str) -> Self:
        """Select the light with the given label."""
        return cls(SelectorKind.LABEL, label)

    @classmethod
    def id(cls, light_id: str) -> Self:  # noqa: A003
        """Select the light with the given ID (serial number)."""
        return cls(SelectorKind.ID, light_id)

    @classmethod
    def group(cls, label: str) -> Self:
        """Select the lights in the group with the given label."""
        return cls(SelectorKind.GROUP, label)

    @classmethod
    def group_id(cls, group_id: str) -> Self:
        """Select the lights in the group with the given ID."""
        return cls(SelectorKind.GROUP_ID, group_id)

    @classmethod
    def location(cls, label: str) -> Self:
        """Select the lights in the location with the given label."""
        return cls(SelectorKind.LOCATION, label)

    @classmethod
    def location_id(cls, location_id: str) -> Self:
        """Select the lights in the location with the given ID."""
        return cls(SelectorKind.LOCATION_ID, location_id)

    @classmethod
    def scene_id(cls, scene_id: str) -> Self:
        """Select the lights that are part of the scene with the given ID."""
        return cls(SelectorKind.SCENE_ID, scene_id)

    def zoned(self, zones: int | Iterable[int]) -> Selector:
        """Constrain the selector to the given zone(s).

        Args:
        ----
            zones: A single zone, or an iterable of zones (a `range` works
                well), between 0 and 255.

        Returns:
        -------
            A new selector, only matching the given zones.

        Examples:
        --------
            >>> str(Selector.group("Living Room").zoned(range(0, 2)))
            'group:Living Room|0|1'

        """
        if isinstance(zones, int):
            zones = (zones,)
        return replace(self, zones=tuple(zones))

    def random(self) -> Selector:
        """Return a selector choosing a random light from the matches.

        Examples
        --------
            >>> str(Selector.group("Living Room").zoned(1).random())
            'group:Living Room|1:random'

        """
        return replace(self, randomize=True)

    @staticmethod
    def combine(*selectors: Selector | CombinedSelector) -> CombinedSelector:
        """Combine selectors, matching the lights of any of them."""
        flattened: list[Selector] = []
        for selector in selectors:
            if isinstance(selector, CombinedSelector):
                flattened.extend(selector.selectors)
            else:
                flattened.append(selector)
        return CombinedSelector(tuple(flattened))

    @classmethod
    def from_string(cls, text: str) -> Selector:
        """Parse a single selector from its string representation.

        Args:
        ----
            text: The selector, as it would appear in the API path.

        Returns:
        -------
            The parsed selector.

        Raises:
        ------
            LIFXInvalidParameterError: The text is not a valid selector.

        """
        text = text.strip()
        randomize = text.endswith(RANDOM_SUFFIX)
        if randomize:
            text = text[: -len(RANDOM_SUFFIX)]

        base, *zones = text.split("|")
        try:
            parsed_zones = tuple(int(zone) for zone in zones)
        except ValueError as exception:
            msg = f"Selector {text!r} contains an invalid zone"
            raise LIFXInvalidParameterError(msg) from exception

        if base == SelectorKind.ALL:
            return cls(SelectorKind.ALL, zones=parsed_zones, randomize=randomize)

        kind, separator, value = base.partition(":")
        if not separator:
            msg = f"Selector {text!r} is missing a kind (e.g. 'label:')"
            raise LIFXInvalidParameterError(msg)
        return cls(kind, value, zones=parsed_zones, randomize=randomize)  # type: ignore[arg-type]


@dataclass(frozen=True)
class CombinedSelector:
    """Object matching the lights of any of the given selectors."""

    selectors: tuple[Selector, ...]

    def __post_init__(self) -> None:
        """Validate the combination."""
        if not self.selectors:
            msg = "At least one selector is needed to combine"
            raise LIFXInvalidParameterError(msg)

    def __str__(self) -> str:
        """Return the combined selector as used in the API path."""
        return ",".join(str(selector) for selector in self.selectors)


AnySelector: TypeAlias = Selector | CombinedSelector


def parse_selector(text: str) -> AnySelector:
    """Parse a (possibly comma separated) selector string."""
    parts = [part for part in text.split(",") if part.strip()]
    if not parts:
        msg = "An empty selector string is not valid"
        raise LIFXInvalidParameterError(msg)
    if len(parts) == 1:
        return Selector.from_string(parts[0])
    return CombinedSelector(tuple(Selector.from_string(part) for part in parts))
