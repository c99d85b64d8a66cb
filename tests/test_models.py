"""Tests for the LIFX models."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from lifx_cloud import (
    HSBK,
    Color,
    Light,
    NamedColor,
    Product,
    Reachability,
    Results,
    Scene,
    State,
    StateDelta,
)
from lifx_cloud.exceptions import LIFXInvalidParameterError
from lifx_cloud.models import ActivateScenePayload, BreathePayload, PulsePayload

LIGHT: dict[str, Any] = {
    "id": "d3b2f2d97452",
    "uuid": "8fa5f072-af97-44ed-ae54-e70fd7bd9d20",
    "label": "Left Lamp",
    "connected": True,
    "power": "on",
    "color": {"hue": 250.0, "saturation": 0.5, "kelvin": 3500},
    "brightness": 0.5,
    "infrared": 0.25,
    "group": {"id": "1c8de82b81f445e7cfaafae49b259c71", "name": "Lounge"},
    "location": {"id": "1d6fe8ef0fde4c6d77b0012dc736662c", "name": "Home"},
    "last_seen": "2015-03-02T08:53:02+00:00",
    "seconds_since_seen": 0.002869418,
    "product": {
        "name": "LIFX+ A19",
        "identifier": "lifx_plus_a19",
        "company": "LIFX",
        "vendor_id": 1,
        "product_id": 29,
        "capabilities": {
            "has_color": True,
            "has_variable_color_temp": True,
            "has_ir": True,
            "has_chain": False,
            "has_multizone": False,
            "min_kelvin": 1500,
            "max_kelvin": 9000,
        },
    },
}


def test_state_only_set_fields() -> None:
    """Test a state only serializes the fields that are set."""
    assert State().to_dict() == {}
    assert State(power=True, brightness=0.4).to_dict() == {
        "power": True,
        "brightness": 0.4,
    }


def test_state_all_fields() -> None:
    """Test serializing a state with all fields set."""
    state = State(
        power=False,
        color=Color.from_hsbk(hue=120, saturation=1),
        brightness=1.0,
        duration=timedelta(milliseconds=1500),
        infrared=0.0,
    )
    assert state.to_dict() == {
        "power": False,
        "color": "hue:120 saturation:1",
        "brightness": 1.0,
        "duration": 1.5,
        "infrared": 0.0,
    }


def test_state_color_notations() -> None:
    """Test a state accepts colors in any notation."""
    assert State(color="red").color == Color(name=NamedColor.RED)  # type: ignore[arg-type]
    assert State(color=NamedColor.RED).color == Color(name=NamedColor.RED)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "fields",
    [
        {"brightness": 1.01},
        {"brightness": -0.01},
        {"brightness": float("nan")},
        {"brightness": "bright"},
        {"infrared": 2},
        {"duration": -1},
        {"power": "on"},
        {"color": "hue:400"},
    ],
)
def test_state_invalid(fields: dict[str, Any]) -> None:
    """Test invalid states are rejected on construction."""
    with pytest.raises(LIFXInvalidParameterError):
        State(**fields)


@pytest.mark.parametrize("brightness", [0.0, 0.4, 1.0, 0, 1])
def test_state_brightness_bounds(brightness: float) -> None:
    """Test the full brightness range is accepted."""
    assert State(brightness=brightness).brightness == brightness


def test_state_delta() -> None:
    """Test serializing a relative state change."""
    delta = StateDelta(hue=-90, brightness=0.1, kelvin=-500, duration=2)  # type: ignore[arg-type]
    assert delta.to_dict() == {
        "hue": -90,
        "brightness": 0.1,
        "kelvin": -500,
        "duration": 2.0,
    }

    with pytest.raises(LIFXInvalidParameterError):
        StateDelta(brightness=1.5)
    with pytest.raises(LIFXInvalidParameterError):
        StateDelta(hue=-361)
    with pytest.raises(LIFXInvalidParameterError):
        StateDelta(kelvin=1.5)  # type: ignore[arg-type]


def test_effect_payloads() -> None:
    """Test serializing effects."""
    pulse = PulsePayload(
        color=Color.from_name(NamedColor.GREEN),
        from_color=Color.from_name(NamedColor.BLUE),
        period=timedelta(seconds=2),
        cycles=3,
        power_on=True,
    )
    assert pulse.to_dict() == {
        "color": "green",
        "from_color": "blue",
        "period": 2.0,
        "cycles": 3,
        "power_on": True,
    }

    breathe = BreathePayload(color=Color.from_name(NamedColor.RED), peak=0.2)
    assert breathe.to_dict() == {"color": "red", "peak": 0.2}


@pytest.mark.parametrize(
    "fields",
    [{"period": 0}, {"cycles": 0}, {"cycles": -1}, {"peak": 1.5}],
)
def test_effect_invalid(fields: dict[str, Any]) -> None:
    """Test invalid effects are rejected on construction."""
    with pytest.raises(LIFXInvalidParameterError):
        BreathePayload(color=Color.from_name(NamedColor.RED), **fields)


def test_activate_scene_payload() -> None:
    """Test serializing a scene activation."""
    payload = ActivateScenePayload(
        duration=5,  # type: ignore[arg-type]
        ignore=["power", "kelvin"],
        overrides=State(brightness=0.5),
    )
    assert payload.to_dict() == {
        "duration": 5.0,
        "ignore": ["power", "kelvin"],
        "overrides": {"brightness": 0.5},
    }

    with pytest.raises(LIFXInvalidParameterError, match="Can not ignore 'color'"):
        ActivateScenePayload(ignore=["color"])


def test_results() -> None:
    """Test per light results."""
    results = Results.from_dict(
        {
            "results": [
                {"id": "d073d5000001", "label": "Kitchen", "status": "ok"},
                {"id": "d073d5000002", "label": "Hall", "status": "timed_out"},
                {"id": "d073d5000003", "label": "Porch", "status": "offline"},
            ]
        }
    )
    assert len(results.results) == 3
    assert not results.ok
    assert [result.label for result in results.successful] == ["Kitchen"]
    assert [result.status for result in results.failed] == [
        Reachability.TIMED_OUT,
        Reachability.OFFLINE,
    ]
    assert results.results[0].light_id == "d073d5000001"


def test_results_nested() -> None:
    """Test results of multiple operations are flattened."""
    results = Results.from_dict(
        {
            "results": [
                {
                    "operation": {"selector": "label:Kitchen", "power": "on"},
                    "results": [
                        {"id": "d073d5000001", "label": "Kitchen", "status": "ok"},
                    ],
                },
                {
                    "operation": {"selector": "label:Hall", "power": "off"},
                    "results": [
                        {"id": "d073d5000002", "label": "Hall", "status": "ok"},
                    ],
                },
            ]
        }
    )
    assert results.ok
    assert [result.label for result in results.results] == ["Kitchen", "Hall"]


def test_light() -> None:
    """Test a light as listed by the API."""
    light = Light.from_dict(LIGHT)
    assert light.light_id == "d3b2f2d97452"
    assert light.label == "Left Lamp"
    assert light.connected
    assert light.power is True
    assert light.brightness == 0.5
    assert light.color == HSBK(hue=250.0, saturation=0.5, kelvin=3500)
    assert light.infrared == 0.25
    assert light.group is not None
    assert light.group.name == "Lounge"
    assert light.location is not None
    assert light.location.location_id == "1d6fe8ef0fde4c6d77b0012dc736662c"
    assert light.last_seen == datetime(2015, 3, 2, 8, 53, 2, tzinfo=UTC)
    assert light.product.product is Product.LIFX_PLUS_A19
    assert light.product.capabilities.has_ir
    assert light.product.capabilities.max_kelvin == 9000


def test_light_minimal() -> None:
    """Test a light with only the bare minimum of information."""
    light = Light.from_dict({"id": "d073d5000001", "power": "off"})
    assert light.power is False
    assert light.group is None
    assert light.product.product is None
    assert light.last_seen is None


def test_scene() -> None:
    """Test a scene as listed by the API."""
    scene = Scene.from_dict(
        {
            "uuid": "036fc6e0-2a33-4e37-bbbd-6a1a4bb0b9c5",
            "name": "Evening",
            "account": {"uuid": "8fa5f072-af97-44ed-ae54-e70fd7bd9d20"},
            "states": [
                {
                    "selector": "id:d073d5000001",
                    "power": "on",
                    "brightness": 0.8,
                    "color": {"hue": 30.0, "saturation": 0.5, "kelvin": 3500},
                },
                {"selector": "id:d073d5000002", "power": "off"},
            ],
            "created_at": 1450000000,
            "updated_at": 1450000500,
        }
    )
    assert scene.name == "Evening"
    assert scene.states[0].power is True
    assert scene.states[0].color == HSBK(hue=30.0, saturation=0.5, kelvin=3500)
    assert scene.states[1].power is False
    assert scene.states[1].brightness is None
    assert scene.created_at == datetime.fromtimestamp(1450000000, tz=UTC)
    assert scene.updated_at == datetime.fromtimestamp(1450000500, tz=UTC)


def test_products() -> None:
    """Test the known products and their capabilities."""
    assert Product(29).display_name == "LIFX+ A19"
    assert Product.LIFX_PLUS_A19.has_infrared
    assert Product.LIFX_Z.has_multizone
    assert not Product.LIFX_MINI_WHITE.has_color
    assert Product.LIFX_TILE.vendor_id == 1
