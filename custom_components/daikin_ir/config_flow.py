"""
Configuration flow for Daikin IR integration.

This module handles the setup and configuration of the Daikin IR
integration through Home Assistant's config flow system.
"""

import logging
from typing import Any

import httpx
import voluptuous as vol
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_NAME
from homeassistant.helpers import selector

from .const import (
    CONF_API_URL,
    CONF_BOOST,
    CONF_DEFAULT_MODE,
    CONF_MODES,
    CONF_PROFILE,
    DEFAULT_MODE,
    DEFAULT_MODES,
    DEFAULT_NAME,
    DOMAIN,
    ERROR_INVALID_DEFAULT_MODE,
    ERROR_INVALID_URL,
    ERROR_NO_MODES,
    PROFILE_CLIMATE,
    PROFILE_HEATER_COOLER,
    PROFILE_HEATER_COOLER_DEHUMIDIFIER,
)
from .models import AcMode

_LOGGER = logging.getLogger(__name__)

MODE_OPTIONS = [
    AcMode.COOL.value,
    AcMode.HEAT.value,
    AcMode.AUTO.value,
    AcMode.DRY.value,
    AcMode.FAN.value,
]
PROFILE_OPTIONS = [
    PROFILE_HEATER_COOLER,
    PROFILE_HEATER_COOLER_DEHUMIDIFIER,
    PROFILE_CLIMATE,
]


def is_valid_api_url(url: str) -> bool:
    """Check that a URL is an absolute http(s) URL.

    Args:
        url: URL entered by the user.

    Returns:
        True if the URL can be used to reach the bridge, False otherwise.

    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.host)


def validate_user_input(user_input: dict[str, Any]) -> dict[str, str]:
    """Validate the configuration entered by the user.

    Args:
        user_input: User input data.

    Returns:
        Errors keyed by form field, empty if the input is valid.

    """
    errors: dict[str, str] = {}

    if not is_valid_api_url(user_input[CONF_API_URL]):
        errors[CONF_API_URL] = ERROR_INVALID_URL

    modes = user_input[CONF_MODES]
    if not modes:
        errors[CONF_MODES] = ERROR_NO_MODES
    elif user_input[CONF_DEFAULT_MODE] not in modes:
        errors[CONF_DEFAULT_MODE] = ERROR_INVALID_DEFAULT_MODE

    return errors


class DaikinIrConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle configuration flow for Daikin IR integration."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """
        Handle the initial step of the config flow.

        Args:
            user_input: User input data describing the unit and its bridge.

        Returns:
            ConfigFlowResult indicating the next step or errors.

        """
        errors: dict[str, str] = {}

        if user_input is not None:
            errors = validate_user_input(user_input)

            if errors:
                _LOGGER.warning("Invalid configuration: %s", errors)
            else:
                api_url = user_input[CONF_API_URL]
                await self.async_set_unique_id(api_url)
                self._abort_if_unique_id_configured()

                # Offered modes follow MODE_OPTIONS order
                modes = [mode for mode in MODE_OPTIONS if mode in user_input[CONF_MODES]]
                return self.async_create_entry(
                    title=user_input[CONF_NAME],
                    data={
                        CONF_NAME: user_input[CONF_NAME],
                        CONF_API_URL: api_url,
                        CONF_MODES: modes,
                        CONF_DEFAULT_MODE: user_input[CONF_DEFAULT_MODE],
                        CONF_PROFILE: user_input[CONF_PROFILE],
                        CONF_BOOST: user_input[CONF_BOOST],
                    },
                )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
                    vol.Required(CONF_API_URL): str,
                    vol.Required(
                        CONF_MODES, default=DEFAULT_MODES
                    ): selector.SelectSelector(
                        selector.SelectSelectorConfig(
                            options=MODE_OPTIONS,
                            multiple=True,
                            translation_key=CONF_MODES,
                        )
                    ),
                    vol.Required(
                        CONF_DEFAULT_MODE, default=DEFAULT_MODE
                    ): selector.SelectSelector(
                        selector.SelectSelectorConfig(
                            options=MODE_OPTIONS,
                            translation_key=CONF_MODES,
                        )
                    ),
                    vol.Required(
                        CONF_PROFILE, default=PROFILE_HEATER_COOLER
                    ): selector.SelectSelector(
                        selector.SelectSelectorConfig(
                            options=PROFILE_OPTIONS,
                            translation_key=CONF_PROFILE,
                        )
                    ),
                    vol.Required(CONF_BOOST, default=True): bool,
                }
            ),
            errors=errors,
        )
