from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_NAME, Platform
from homeassistant.core import HomeAssistant

from .api import create_session_client
from .const import (
    CONF_API_URL,
    CONF_BOOST,
    CONF_DEFAULT_MODE,
    CONF_MODES,
    CONF_PROFILE,
    DEFAULT_NAME,
    DOMAIN,
    PROFILE_HEATER_COOLER,
)
from .controller import DaikinIrController
from .models import ModeCapabilities
from .profiles import get_profile

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.CLIMATE, Platform.HUMIDIFIER, Platform.SELECT]


def format_accessory_name(name: str) -> str:
    """Return the accessory label for a configured name."""
    return name.replace("-", " ")


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Setting up Daikin IR integration for entry %s", entry.entry_id)

    if CONF_API_URL not in entry.data:
        _LOGGER.error("Missing api_url in configuration for entry %s", entry.entry_id)
        return False

    try:
        capabilities = ModeCapabilities.from_config(
            entry.data[CONF_MODES],
            entry.data[CONF_DEFAULT_MODE],
            boost=entry.data.get(CONF_BOOST, True),
        )
        profile = get_profile(
            entry.data.get(CONF_PROFILE, PROFILE_HEATER_COOLER), capabilities
        )
    except (KeyError, ValueError) as err:
        _LOGGER.error("Invalid configuration for entry %s: %s", entry.entry_id, err)
        return False

    session = create_session_client(hass)
    controller = DaikinIrController(
        session,
        entry.data[CONF_API_URL],
        capabilities,
        name=format_accessory_name(entry.data.get(CONF_NAME, DEFAULT_NAME)),
        display_unit=hass.config.units.temperature_unit,
    )

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {
        "session": session,
        "controller": controller,
        "profile": profile,
    }
    _LOGGER.debug(
        "Stored data for entry %s: modes=%s, profile=%s",
        entry.entry_id,
        capabilities.modes,
        profile.name,
    )

    try:
        await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
        _LOGGER.info(
            "Successfully setup Daikin IR integration for entry %s", entry.entry_id
        )
        return True
    except Exception as err:
        _LOGGER.error("Failed to setup platforms for entry %s: %s", entry.entry_id, err)
        return False


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    _LOGGER.info("Unloading Daikin IR integration for entry %s", entry.entry_id)

    try:
        unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
        if unload_ok:
            if DOMAIN in hass.data and entry.entry_id in hass.data[DOMAIN]:
                entry_data = hass.data[DOMAIN].pop(entry.entry_id)
                await entry_data["session"].aclose()
                _LOGGER.debug("Cleaned up data for entry %s", entry.entry_id)
            _LOGGER.info(
                "Successfully unloaded Daikin IR integration for entry %s",
                entry.entry_id,
            )
        else:
            _LOGGER.warning(
                "Failed to unload some platforms for entry %s", entry.entry_id
            )

        return unload_ok
    except Exception as err:
        _LOGGER.error(
            "Error unloading Daikin IR integration for entry %s: %s",
            entry.entry_id,
            err,
        )
        return False
