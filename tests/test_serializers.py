"""Tests for the command encoder."""

from __future__ import annotations

import pytest

from pytuyalights.commands import (
    Discover,
    QueryDevice,
    SetBrightness,
    SetColor,
    SetColorTemperature,
    TurnOnOff,
)
from pytuyalights.models import AccessToken, Credentials, HsbColor, PowerState
from pytuyalights.serializers import WireRequest, encode_command, serialize_credentials


TOKEN = AccessToken("tok123")


class TestEncodeCommand:
    """Tests for encode_command function."""

    def test_discover(self) -> None:
        """Test Discover has no device and no extra fields."""
        request = encode_command(Discover(), TOKEN)

        assert request.to_dict() == {
            "header": {"payloadVersion": 1, "namespace": "discovery", "name": "Discovery"},
            "payload": {"accessToken": "tok123"},
        }

    def test_turn_on(self) -> None:
        """Test TurnOnOff ON encodes value "1"."""
        request = encode_command(TurnOnOff("dev1", PowerState.ON), TOKEN)

        assert request.header.namespace == "control"
        assert request.header.name == "turnOnOff"
        assert request.payload == {"accessToken": "tok123", "devId": "dev1", "value": "1"}

    def test_turn_off(self) -> None:
        """Test TurnOnOff OFF encodes value "0"."""
        request = encode_command(TurnOnOff("dev1", PowerState.OFF), TOKEN)

        assert request.payload["value"] == "0"

    def test_set_brightness(self) -> None:
        """Test SetBrightness sends the percent as an integer."""
        request = encode_command(SetBrightness("dev1", 50), TOKEN)

        assert request.to_dict() == {
            "header": {"payloadVersion": 1, "namespace": "control", "name": "brightnessSet"},
            "payload": {"accessToken": "tok123", "devId": "dev1", "value": 50},
        }

    def test_query_device(self) -> None:
        """Test QueryDevice uses the query namespace and no extra fields."""
        request = encode_command(QueryDevice("dev1"), TOKEN)

        assert request.header.namespace == "query"
        assert request.header.name == "QueryDevice"
        assert request.payload == {"accessToken": "tok123", "devId": "dev1"}

    def test_set_color(self) -> None:
        """Test SetColor nests the color object."""
        request = encode_command(SetColor("dev1", HsbColor(hue=240, saturation=80, brightness=60)), TOKEN)

        assert request.header.name == "colorSet"
        assert request.payload == {
            "accessToken": "tok123",
            "devId": "dev1",
            "color": {"hue": 240, "saturation": 80, "brightness": 60},
        }

    def test_set_color_temperature(self) -> None:
        """Test SetColorTemperature sends vendor units as value."""
        request = encode_command(SetColorTemperature("dev1", 5500), TOKEN)

        assert request.header.name == "colorTemperatureSet"
        assert request.payload == {"accessToken": "tok123", "devId": "dev1", "value": 5500}

    def test_deterministic(self) -> None:
        """Test encoding the same command twice yields identical requests."""
        command = SetColor("dev1", HsbColor(hue=10, saturation=20, brightness=30))

        first = encode_command(command, TOKEN)
        second = encode_command(command, TOKEN)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_to_dict_copies_payload(self) -> None:
        """Test mutating the JSON body does not change the request."""
        request = encode_command(QueryDevice("dev1"), TOKEN)

        request.to_dict()["payload"]["devId"] = "other"

        assert request.payload["devId"] == "dev1"

    def test_requires_access_token(self) -> None:
        """Test a bare string is rejected in place of an AccessToken."""
        with pytest.raises(TypeError, match="AccessToken"):
            encode_command(Discover(), "tok123")  # type: ignore[arg-type]

    def test_rejects_unknown_command(self) -> None:
        """Test objects outside the command union are rejected."""
        with pytest.raises(TypeError, match="Unsupported command"):
            encode_command(object(), TOKEN)  # type: ignore[arg-type]

    def test_returns_wire_request(self) -> None:
        """Test the result type."""
        assert isinstance(encode_command(Discover(), TOKEN), WireRequest)


class TestSerializeCredentials:
    """Tests for serialize_credentials function."""

    def test_form_fields(self) -> None:
        """Test the login form carries the fixed vendor fields."""
        form = serialize_credentials(Credentials("user@example.com", "secret"))

        assert form == {
            "userName": "user@example.com",
            "password": "secret",
            "countryCode": "1",
            "bizType": "smart_life",
            "from": "tuya",
        }

    def test_password_not_in_repr(self) -> None:
        """Test the password is hidden from repr."""
        assert "secret" not in repr(Credentials("user@example.com", "secret"))
