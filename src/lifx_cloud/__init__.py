"""Asynchronous Python client for the LIFX cloud API."""

from .builders import (
    ActivateScene,
    Breathe,
    ChangeState,
    Cycle,
    ListLights,
    ListScenes,
    Pulse,
    Scenes,
    Selected,
    SetState,
    SetStates,
    Toggle,
    ValidateColor,
)
from .color import Color
from .const import CycleDirection, NamedColor, Product, Reachability
from .exceptions import (
    LIFXApiError,
    LIFXAuthenticationError,
    LIFXBadRequestError,
    LIFXConfigurationError,
    LIFXConnectionError,
    LIFXConnectionTimeoutError,
    LIFXError,
    LIFXForbiddenError,
    LIFXInvalidParameterError,
    LIFXNotFoundError,
    LIFXPartialFailureError,
    LIFXRateLimitError,
    LIFXRequestConsumedError,
    LIFXResponseError,
    LIFXServerError,
)
from .lifx import LIFX
from .models import (
    HSBK,
    ColorValidation,
    Light,
    Result,
    Results,
    Scene,
    SceneState,
    State,
    StateDelta,
)
from .selector import CombinedSelector, Selector, SelectorKind, parse_selector

__all__ = [
    "HSBK",
    "LIFX",
    "ActivateScene",
    "Breathe",
    "ChangeState",
    "Color",
    "ColorValidation",
    "CombinedSelector",
    "Cycle",
    "CycleDirection",
    "LIFXApiError",
    "LIFXAuthenticationError",
    "LIFXBadRequestError",
    "LIFXConfigurationError",
    "LIFXConnectionError",
    "LIFXConnectionTimeoutError",
    "LIFXError",
    "LIFXForbiddenError",
    "LIFXInvalidParameterError",
    "LIFXNotFoundError",
    "LIFXPartialFailureError",
    "LIFXRateLimitError",
    "LIFXRequestConsumedError",
    "LIFXResponseError",
    "LIFXServerError",
    "Light",
    "ListLights",
    "ListScenes",
    "NamedColor",
    "Product",
    "Pulse",
    "Reachability",
    "Result",
    "Results",
    "Scene",
    "SceneState",
    "Scenes",
    "Selected",
    "Selector",
    "SelectorKind",
    "SetState",
    "SetStates",
    "State",
    "StateDelta",
    "Toggle",
    "ValidateColor",
    "parse_selector",
]
