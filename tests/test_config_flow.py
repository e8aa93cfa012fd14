"""Tests for the Daikin IR Config Flow."""

from unittest.mock import AsyncMock, Mock

import pytest
from homeassistant.const import CONF_NAME
from homeassistant.data_entry_flow import FlowResultType

from custom_components.daikin_ir.config_flow import (
    DaikinIrConfigFlow,
    is_valid_api_url,
    validate_user_input,
)
from custom_components.daikin_ir.const import (
    CONF_API_URL,
    CONF_BOOST,
    CONF_DEFAULT_MODE,
    CONF_MODES,
    CONF_PROFILE,
    ERROR_INVALID_DEFAULT_MODE,
    ERROR_INVALID_URL,
    ERROR_NO_MODES,
    PROFILE_HEATER_COOLER,
    PROFILE_HEATER_COOLER_DEHUMIDIFIER,
)

from .conftest import API_URL


@pytest.fixture
def mock_hass() -> Mock:
    """Create a mock Home Assistant instance."""
    return Mock()


@pytest.fixture
def flow(mock_hass: Mock) -> DaikinIrConfigFlow:
    """Create a DaikinIrConfigFlow instance for testing."""
    flow_instance = DaikinIrConfigFlow()
    flow_instance.hass = mock_hass
    flow_instance.async_set_unique_id = AsyncMock()
    flow_instance._abort_if_unique_id_configured = Mock()
    flow_instance.async_create_entry = Mock(
        return_value={"type": FlowResultType.CREATE_ENTRY},
    )
    flow_instance.async_show_form = Mock(return_value={"type": FlowResultType.FORM})
    return flow_instance


@pytest.fixture
def user_input() -> dict:
    """Create a valid user input."""
    return {
        CONF_NAME: "Bedroom-AC",
        CONF_API_URL: API_URL,
        CONF_MODES: ["warm", "cold", "dry"],
        CONF_DEFAULT_MODE: "cold",
        CONF_PROFILE: PROFILE_HEATER_COOLER_DEHUMIDIFIER,
        CONF_BOOST: False,
    }


class TestIsValidApiUrl:
    """Tests for is_valid_api_url function."""

    @pytest.mark.parametrize(
        "url",
        [
            "http://bridge.local/daikin",
            "https://192.168.1.20:8443/ac",
        ],
    )
    def test_is_valid_api_url_accepts_http_urls(self, url: str) -> None:
        """Test that absolute http(s) URLs are accepted."""
        assert is_valid_api_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "bridge.local/daikin",
            "ftp://bridge.local/daikin",
            "http://",
        ],
    )
    def test_is_valid_api_url_rejects_other_urls(self, url: str) -> None:
        """Test that relative and non-http URLs are rejected."""
        assert is_valid_api_url(url) is False


class TestValidateUserInput:
    """Tests for validate_user_input function."""

    def test_validate_user_input_accepts_valid_input(self, user_input: dict) -> None:
        """Test that valid input yields no errors."""
        assert validate_user_input(user_input) == {}

    def test_validate_user_input_requires_a_mode(self, user_input: dict) -> None:
        """Test that at least one mode must be selected."""
        user_input[CONF_MODES] = []
        assert validate_user_input(user_input) == {CONF_MODES: ERROR_NO_MODES}

    def test_validate_user_input_requires_supported_default(
        self, user_input: dict
    ) -> None:
        """Test that the default mode must be one of the selected modes."""
        user_input[CONF_DEFAULT_MODE] = "auto"
        assert validate_user_input(user_input) == {
            CONF_DEFAULT_MODE: ERROR_INVALID_DEFAULT_MODE
        }

    def test_validate_user_input_reports_invalid_url(self, user_input: dict) -> None:
        """Test that an invalid URL is reported on its field."""
        user_input[CONF_API_URL] = "not a url"
        assert validate_user_input(user_input) == {CONF_API_URL: ERROR_INVALID_URL}


class TestDaikinIrConfigFlowAsyncStepUser:
    """Tests for async_step_user method."""

    @pytest.mark.asyncio
    async def test_async_step_user_shows_form_when_no_input(
        self,
        flow: DaikinIrConfigFlow,
    ) -> None:
        """Test that async_step_user shows form when no input provided."""
        result = await flow.async_step_user()
        flow.async_show_form.assert_called_once()
        assert result["type"] == FlowResultType.FORM

    @pytest.mark.asyncio
    async def test_async_step_user_shows_form_with_schema(
        self,
        flow: DaikinIrConfigFlow,
    ) -> None:
        """Test that async_step_user shows form with schema."""
        await flow.async_step_user()
        call_args = flow.async_show_form.call_args
        assert call_args[1]["step_id"] == "user"
        assert call_args[1]["errors"] == {}
        schema = call_args[1]["data_schema"]
        assert schema is not None
        defaults = schema({CONF_API_URL: API_URL})
        assert defaults[CONF_NAME] == "Daikin AC"
        assert defaults[CONF_MODES] == ["cold", "warm", "auto", "dry", "fan"]
        assert defaults[CONF_DEFAULT_MODE] == "auto"
        assert defaults[CONF_PROFILE] == PROFILE_HEATER_COOLER
        assert defaults[CONF_BOOST] is True

    @pytest.mark.asyncio
    async def test_async_step_user_creates_entry(
        self,
        flow: DaikinIrConfigFlow,
        user_input: dict,
    ) -> None:
        """Test that valid input creates an entry keyed by the bridge URL."""
        result = await flow.async_step_user(user_input)
        flow.async_set_unique_id.assert_called_once_with(API_URL)
        flow._abort_if_unique_id_configured.assert_called_once()
        flow.async_create_entry.assert_called_once()
        call_args = flow.async_create_entry.call_args
        assert call_args[1]["title"] == "Bedroom-AC"
        assert call_args[1]["data"] == {
            CONF_NAME: "Bedroom-AC",
            CONF_API_URL: API_URL,
            CONF_MODES: ["cold", "warm", "dry"],
            CONF_DEFAULT_MODE: "cold",
            CONF_PROFILE: PROFILE_HEATER_COOLER_DEHUMIDIFIER,
            CONF_BOOST: False,
        }
        assert result["type"] == FlowResultType.CREATE_ENTRY

    @pytest.mark.asyncio
    async def test_async_step_user_shows_error_on_invalid_url(
        self,
        flow: DaikinIrConfigFlow,
        user_input: dict,
    ) -> None:
        """Test that an invalid URL shows the form again with an error."""
        user_input[CONF_API_URL] = "bridge.local"
        result = await flow.async_step_user(user_input)
        flow.async_create_entry.assert_not_called()
        call_args = flow.async_show_form.call_args
        assert call_args[1]["errors"][CONF_API_URL] == ERROR_INVALID_URL
        assert result["type"] == FlowResultType.FORM

    @pytest.mark.asyncio
    async def test_async_step_user_shows_error_without_modes(
        self,
        flow: DaikinIrConfigFlow,
        user_input: dict,
    ) -> None:
        """Test that an empty mode selection shows an error."""
        user_input[CONF_MODES] = []
        result = await flow.async_step_user(user_input)
        flow.async_set_unique_id.assert_not_called()
        call_args = flow.async_show_form.call_args
        assert call_args[1]["errors"][CONF_MODES] == ERROR_NO_MODES
        assert result["type"] == FlowResultType.FORM

    @pytest.mark.asyncio
    async def test_async_step_user_shows_error_on_unsupported_default(
        self,
        flow: DaikinIrConfigFlow,
        user_input: dict,
    ) -> None:
        """Test that a default mode outside the selection shows an error."""
        user_input[CONF_DEFAULT_MODE] = "fan"
        result = await flow.async_step_user(user_input)
        call_args = flow.async_show_form.call_args
        assert call_args[1]["errors"][CONF_DEFAULT_MODE] == ERROR_INVALID_DEFAULT_MODE
        assert result["type"] == FlowResultType.FORM
