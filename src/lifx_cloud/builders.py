"""Request builders for the LIFX cloud API.

A builder collects the parameters of a single request. Setters validate
their input immediately and return the builder, so calls can be chained.
The request is done by awaiting `send()`, after which the builder is spent.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

import backoff
from mashumaro.exceptions import MissingField

from .color import Color, to_color
from .const import (
    CYCLE_STATES_MAX,
    CYCLE_STATES_MIN,
    SET_STATES_MAX,
    CycleDirection,
    NamedColor,
)
from .exceptions import (
    LIFXConnectionError,
    LIFXInvalidParameterError,
    LIFXPartialFailureError,
    LIFXRateLimitError,
    LIFXRequestConsumedError,
    LIFXResponseError,
    LIFXServerError,
)
from .models import (
    ActivateScenePayload,
    BaseModel,
    BreathePayload,
    ColorValidation,
    CyclePayload,
    Light,
    PulsePayload,
    Results,
    Scene,
    SelectorState,
    SetStatesPayload,
    State,
    StateDelta,
)
from .selector import Selector, parse_selector
from .utils import quote_segment

if TYPE_CHECKING:
    from collections.abc import Generator

    from .lifx import LIFX
    from .selector import AnySelector

_LOGGER = logging.getLogger(__name__)

_ResultT = TypeVar("_ResultT")

# Errors that may go away when the same request is done again.
RETRYABLE_ERRORS = (LIFXConnectionError, LIFXServerError, LIFXRateLimitError)


def retry_wait() -> Generator[float | None, Exception | None, None]:
    """Yield the seconds to wait before retrying, given the failure.

    Rate limited requests wait until the limit resets, as told by the API.
    Other failures wait with a jittered exponential backoff.
    """
    exponential = backoff.expo()
    exponential.send(None)
    exception = yield None
    while True:
        if isinstance(exception, LIFXRateLimitError) and exception.reset is not None:
            wait = max((exception.reset - datetime.now(UTC)).total_seconds(), 0.0)
        else:
            wait = backoff.full_jitter(next(exponential))
        exception = yield wait


class Request(Generic[_ResultT]):
    """Base class for a single request to the LIFX API."""

    method = "GET"

    def __init__(self, client: LIFX) -> None:
        """Initialize the request, for the given client."""
        self._client = client
        self._payload: BaseModel | None = None
        self._tries = 1
        self._sent = False

    @property
    def path(self) -> str:
        """Return the path of the request, relative to the API base."""
        raise NotImplementedError

    @property
    def params(self) -> dict[str, str] | None:
        """Return the query string parameters of the request."""
        return None

    @property
    def payload(self) -> dict[str, Any] | None:
        """Return the JSON body of the request, with only the set fields."""
        if self._payload is None:
            return None
        return self._payload.to_dict()

    def retries(self, count: int) -> Self:
        """Retry the request on transient failures.

        Connection errors, server errors and rate limiting are retried with
        an exponential backoff. Nothing is retried unless asked for.

        Args:
        ----
            count: The number of retries after the first attempt.

        Returns:
        -------
            The request builder.

        """
        self._ensure_unsent()
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            msg = f"Retry count must be a non-negative integer, got {count!r}"
            raise LIFXInvalidParameterError(msg)
        self._tries = count + 1
        return self

    def retry(self) -> Self:
        """Retry the request once on a transient failure."""
        return self.retries(1)

    def _ensure_unsent(self) -> None:
        if self._sent:
            msg = f"This {type(self).__name__} request has already been sent"
            raise LIFXRequestConsumedError(msg)

    def _update(self, **changes: Any) -> Self:
        """Return the builder, after updating (and validating) its payload."""
        self._ensure_unsent()
        self._payload = replace(self._payload, **changes)  # type: ignore[type-var]
        return self

    def _validate(self) -> None:
        """Check the request is complete, right before sending it."""

    def _parse(self, data: Any) -> _ResultT:
        raise NotImplementedError

    async def send(self) -> _ResultT:
        """Send the request to the LIFX API.

        Returns
        -------
            The response of the API.

        Raises
        ------
            LIFXRequestConsumedError: The request has been sent before.
            LIFXConfigurationError: The request is incomplete.
            LIFXConnectionError: The API could not be reached.
            LIFXApiError: The API responded with an error.

        """
        self._ensure_unsent()
        self._validate()
        self._sent = True

        request = self._client.request
        if self._tries > 1:
            request = backoff.on_exception(
                retry_wait,
                RETRYABLE_ERRORS,
                max_tries=self._tries,
                jitter=None,
                logger=_LOGGER,
            )(request)

        data = await request(
            self.path,
            method=self.method,
            data=self.payload,
            params=self.params,
        )
        try:
            return self._parse(data)
        except (MissingField, AttributeError, TypeError, ValueError) as exception:
            msg = f"Unexpected response from the LIFX API for {self.path}"
            raise LIFXResponseError(msg) from exception


class ResultsRequest(Request[Results]):
    """Request to change lights, answered with the outcome per light."""

    def _parse(self, data: Any) -> Results:
        # Nothing is reported back when the API is asked not to wait.
        if not isinstance(data, dict):
            return Results()

        results = Results.from_dict(data)
        if not results.ok:
            _LOGGER.debug(
                "Lights did not acknowledge the request: %s",
                ", ".join(result.label or result.light_id for result in results.failed),
            )
            raise LIFXPartialFailureError(HTTPStatus.MULTI_STATUS, data, results)
        return results


class ListLights(Request[list[Light]]):
    """Request listing the selected lights, with their state."""

    def __init__(self, client: LIFX, selector: AnySelector) -> None:
        """Initialize the request, for the selected lights."""
        super().__init__(client)
        self._selector = selector

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return f"/lights/{quote_segment(self._selector)}"

    def _parse(self, data: Any) -> list[Light]:
        return [Light.from_dict(light) for light in data]


class SetState(ResultsRequest):
    """Request to set the state of the selected lights.

    Fields that are not set are left untouched on the lights. Sending a
    request without setting anything is valid.
    """

    method = "PUT"

    def __init__(self, client: LIFX, selector: AnySelector) -> None:
        """Initialize the request, for the selected lights."""
        super().__init__(client)
        self._selector = selector
        self._payload = State()

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return f"/lights/{quote_segment(self._selector)}/state"

    def power(self, on: bool) -> Self:
        """Turn the lights on or off."""
        return self._update(power=on)

    def color(self, color: Color | NamedColor | str) -> Self:
        """Set the color of the lights."""
        return self._update(color=to_color(color))

    def brightness(self, brightness: float) -> Self:
        """Set the brightness of the lights, between 0.0 and 1.0."""
        return self._update(brightness=brightness)

    def duration(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, in seconds."""
        return self._update(duration=duration)

    def transition(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, alias of `duration`."""
        return self.duration(duration)

    def infrared(self, infrared: float) -> Self:
        """Set the maximum infrared level, between 0.0 and 1.0."""
        return self._update(infrared=infrared)


class ChangeState(ResultsRequest):
    """Request to change the state of the selected lights, relatively."""

    method = "POST"

    def __init__(self, client: LIFX, selector: AnySelector) -> None:
        """Initialize the request, for the selected lights."""
        super().__init__(client)
        self._selector = selector
        self._payload = StateDelta()

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return f"/lights/{quote_segment(self._selector)}/state/delta"

    def power(self, on: bool) -> Self:
        """Turn the lights on or off."""
        return self._update(power=on)

    def duration(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, in seconds."""
        return self._update(duration=duration)

    def transition(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, alias of `duration`."""
        return self.duration(duration)

    def hue(self, degrees: float) -> Self:
        """Rotate the hue by the given amount of degrees."""
        return self._update(hue=degrees)

    def saturation(self, change: float) -> Self:
        """Change the saturation, between -1.0 and 1.0."""
        return self._update(saturation=change)

    def brightness(self, change: float) -> Self:
        """Change the brightness, between -1.0 and 1.0."""
        return self._update(brightness=change)

    def kelvin(self, change: int) -> Self:
        """Change the color temperature by the given amount of kelvin."""
        return self._update(kelvin=change)

    def infrared(self, change: float) -> Self:
        """Change the maximum infrared level, between -1.0 and 1.0."""
        return self._update(infrared=change)


class Toggle(ResultsRequest):
    """Request to turn off the selected lights if any is on, or on otherwise."""

    method = "POST"

    def __init__(self, client: LIFX, selector: AnySelector) -> None:
        """Initialize the request, for the selected lights."""
        super().__init__(client)
        self._selector = selector
        self._payload = State()

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return f"/lights/{quote_segment(self._selector)}/toggle"

    def duration(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, in seconds."""
        return self._update(duration=duration)

    def transition(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, alias of `duration`."""
        return self.duration(duration)


class Pulse(ResultsRequest):
    """Request to quickly flash the selected lights between two colors."""

    method = "POST"
    effect = "pulse"

    def __init__(
        self,
        client: LIFX,
        selector: AnySelector,
        color: Color | NamedColor | str,
    ) -> None:
        """Initialize the effect, for the selected lights."""
        super().__init__(client)
        self._selector = selector
        self._payload = self._create_payload(to_color(color))

    def _create_payload(self, color: Color) -> PulsePayload:
        return PulsePayload(color=color)

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return f"/lights/{quote_segment(self._selector)}/effects/{self.effect}"

    def from_color(self, color: Color | NamedColor | str) -> Self:
        """Set the color to start from, instead of the current color."""
        return self._update(from_color=to_color(color))

    def period(self, period: float | timedelta) -> Self:
        """Set the duration of a single cycle, in seconds."""
        return self._update(period=period)

    def cycles(self, cycles: float) -> Self:
        """Set the number of times to repeat the effect."""
        return self._update(cycles=cycles)

    def persist(self, persist: bool) -> Self:
        """Keep the last color of the effect when done."""
        return self._update(persist=persist)

    def power_on(self, power_on: bool) -> Self:
        """Turn on lights that are off, to show the effect."""
        return self._update(power_on=power_on)


class Breathe(Pulse):
    """Request to slowly fade the selected lights between two colors."""

    effect = "breathe"

    def _create_payload(self, color: Color) -> BreathePayload:
        return BreathePayload(color=color)

    def peak(self, peak: float) -> Self:
        """Set where in a period the color is at its maximum, 0.0 to 1.0."""
        return self._update(peak=peak)


class Cycle(ResultsRequest):
    """Request to move the selected lights to the next state of a cycle.

    The API looks at the current state of the lights, and moves them to
    the state following the first matching one.
    """

    method = "POST"

    def __init__(self, client: LIFX, selector: AnySelector) -> None:
        """Initialize the request, for the selected lights."""
        super().__init__(client)
        self._selector = selector
        self._payload: CyclePayload = CyclePayload()

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return f"/lights/{quote_segment(self._selector)}/cycle"

    def add(self, state: State) -> Self:
        """Add a state to the cycle.

        Raises
        ------
            LIFXInvalidParameterError: The cycle is already full.

        """
        if len(self._payload.states) >= CYCLE_STATES_MAX:
            msg = f"A cycle can hold at most {CYCLE_STATES_MAX} states"
            raise LIFXInvalidParameterError(msg)
        return self._update(states=[*self._payload.states, state])

    def defaults(self, state: State) -> Self:
        """Set the defaults, applied to states that lack a field."""
        return self._update(defaults=state)

    def reverse(self) -> Self:
        """Move through the states backwards."""
        return self._update(direction=CycleDirection.BACKWARD)

    def _validate(self) -> None:
        if len(self._payload.states) < CYCLE_STATES_MIN:
            msg = f"A cycle needs at least {CYCLE_STATES_MIN} states"
            raise LIFXInvalidParameterError(msg)


class SetStates(ResultsRequest):
    """Request to set different states on different lights, all at once."""

    method = "PUT"

    def __init__(self, client: LIFX) -> None:
        """Initialize the request."""
        super().__init__(client)
        self._payload: SetStatesPayload = SetStatesPayload()

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return "/lights/states"

    def add(self, selector: AnySelector | str, state: State) -> Self:
        """Add the state for the lights matching the selector.

        Raises
        ------
            LIFXInvalidParameterError: The request already holds the maximum
                number of states.

        """
        if len(self._payload.states) >= SET_STATES_MAX:
            msg = f"At most {SET_STATES_MAX} states can be set at once"
            raise LIFXInvalidParameterError(msg)
        if isinstance(selector, str):
            selector = parse_selector(selector)
        selector_state = SelectorState(
            selector=str(selector),
            power=state.power,
            color=state.color,
            brightness=state.brightness,
            duration=state.duration,
            infrared=state.infrared,
        )
        return self._update(states=[*self._payload.states, selector_state])

    def defaults(self, state: State) -> Self:
        """Set the defaults, applied to states that lack a field."""
        return self._update(defaults=state)

    def _validate(self) -> None:
        if not self._payload.states:
            msg = "At least one state is needed to set states"
            raise LIFXInvalidParameterError(msg)


class ActivateScene(ResultsRequest):
    """Request to activate a scene stored in the account."""

    method = "PUT"

    def __init__(self, client: LIFX, scene_id: str) -> None:
        """Initialize the request, for the scene with the given UUID."""
        super().__init__(client)
        self._selector = Selector.scene_id(scene_id)
        self._payload: ActivateScenePayload = ActivateScenePayload()

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return f"/scenes/{quote_segment(self._selector)}/activate"

    def duration(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, in seconds."""
        return self._update(duration=duration)

    def transition(self, duration: float | timedelta) -> Self:
        """Set how long the transition should take, alias of `duration`."""
        return self.duration(duration)

    def ignore(self, *fields: str) -> Self:
        """Leave the given properties of the lights as they are.

        Args:
        ----
            fields: Names of the properties, e.g. `"power"` or `"kelvin"`.

        Returns:
        -------
            The request builder.

        """
        return self._update(ignore=[*(self._payload.ignore or []), *fields])

    def overrides(self, state: State) -> Self:
        """Set a state that takes priority over the scene."""
        return self._update(overrides=state)


class ListScenes(Request[list[Scene]]):
    """Request listing the scenes in the account."""

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return "/scenes"

    def _parse(self, data: Any) -> list[Scene]:
        return [Scene.from_dict(scene) for scene in data]


class ValidateColor(Request[ColorValidation]):
    """Request letting the API check and interpret a color string."""

    def __init__(self, client: LIFX, color: Color | NamedColor | str) -> None:
        """Initialize the request, for the given color."""
        super().__init__(client)
        # Strings are left for the API to judge.
        if isinstance(color, str) and not isinstance(color, NamedColor):
            color = Color.from_custom(color)
        self._color = to_color(color)

    @property
    def path(self) -> str:
        """Return the path of the request."""
        return "/color"

    @property
    def params(self) -> dict[str, str]:
        """Return the query string parameters of the request."""
        return {"string": str(self._color)}

    def _parse(self, data: Any) -> ColorValidation:
        return ColorValidation.from_dict(data)


class Selected:
    """Scope holding the selected lights, to create requests for."""

    def __init__(self, client: LIFX, selector: AnySelector) -> None:
        """Initialize the scope."""
        self._client = client
        self.selector = selector

    def __repr__(self) -> str:
        """Return a representation of the scope."""
        return f"Selected({str(self.selector)!r})"

    def list(self) -> ListLights:  # noqa: A003
        """Create a request listing the selected lights."""
        return ListLights(self._client, self.selector)

    def set_state(self) -> SetState:
        """Create a request setting the state of the selected lights."""
        return SetState(self._client, self.selector)

    def change_state(self) -> ChangeState:
        """Create a request changing the state of the selected lights."""
        return ChangeState(self._client, self.selector)

    def toggle(self) -> Toggle:
        """Create a request toggling the power of the selected lights."""
        return Toggle(self._client, self.selector)

    def breathe(self, color: Color | NamedColor | str) -> Breathe:
        """Create a breathe effect, fading to the given color and back."""
        return Breathe(self._client, self.selector, color)

    def pulse(self, color: Color | NamedColor | str) -> Pulse:
        """Create a pulse effect, switching to the given color and back."""
        return Pulse(self._client, self.selector, color)

    def cycle(self) -> Cycle:
        """Create a request cycling the selected lights through states."""
        return Cycle(self._client, self.selector)


class Scenes:
    """Scope for the scenes in the account."""

    def __init__(self, client: LIFX) -> None:
        """Initialize the scope."""
        self._client = client

    def list(self) -> ListScenes:  # noqa: A003
        """Create a request listing the scenes in the account."""
        return ListScenes(self._client)

    def activate(self, scene: Scene | str) -> ActivateScene:
        """Create a request activating the given scene (or scene UUID)."""
        if isinstance(scene, Scene):
            scene = scene.uuid
        return ActivateScene(self._client, scene)
