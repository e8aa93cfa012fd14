"""Climate entities for Daikin IR air conditioners.

This module provides the climate entity that presents an IR-controlled
air conditioner to Home Assistant. The entity keeps no state of its own:
it reads and writes through the unit's controller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.climate import (
    ClimateEntity,
    ClimateEntityFeature,
    HVACAction,
    HVACMode,
)
from homeassistant.components.climate.const import (
    ATTR_HVAC_MODE,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    PRESET_BOOST,
    PRESET_NONE,
    SWING_OFF,
    SWING_ON,
)
from homeassistant.const import ATTR_TEMPERATURE
from homeassistant.exceptions import HomeAssistantError

from .const import DOMAIN
from .controller import InvalidRequestedMode
from .entity import DaikinIrEntity
from .models import to_display_unit

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .controller import DaikinIrController
    from .profiles import CharacteristicProfile

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the climate entity for a Daikin IR air conditioner."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [
            DaikinIrClimateEntity(
                entry_data["controller"],
                entry_data["profile"],
                entry.entry_id,
            )
        ]
    )


class DaikinIrClimateEntity(DaikinIrEntity, ClimateEntity):
    """Climate entity for Daikin IR air conditioners.

    Provides power, mode, target temperature, swing and powerful control.
    A change is shown only once the IR bridge has acknowledged it; a failed
    change raises and leaves the previous values in place.
    """

    _attr_name = None
    _attr_target_temperature_step = 1.0

    def __init__(
        self,
        controller: DaikinIrController,
        profile: CharacteristicProfile,
        entry_id: str,
    ) -> None:
        """Initialize the Daikin IR climate entity.

        Args:
            controller: Controller owning the air conditioner state.
            profile: Mapping between HVAC modes and air conditioner modes.
            entry_id: Config entry the unit belongs to.

        """
        super().__init__(controller, entry_id)
        self._profile = profile
        self._attr_unique_id = entry_id
        self._attr_hvac_modes = profile.offered_hvac_modes
        self._attr_swing_modes = [SWING_ON, SWING_OFF]
        self._attr_preset_modes = (
            [PRESET_NONE, PRESET_BOOST] if controller.capabilities.boost else None
        )

        _LOGGER.debug(
            "Initialized %s with profile=%s, hvac_modes=%s",
            controller.name,
            profile.name,
            self._attr_hvac_modes,
        )

    @property
    def supported_features(self) -> ClimateEntityFeature:
        """Return the features available in the current mode."""
        features = (
            ClimateEntityFeature.TURN_ON
            | ClimateEntityFeature.TURN_OFF
            | ClimateEntityFeature.SWING_MODE
        )
        if self._controller.get_temperature_range() is not None:
            features |= ClimateEntityFeature.TARGET_TEMPERATURE
        if self._controller.capabilities.boost:
            features |= ClimateEntityFeature.PRESET_MODE
        return features

    @property
    def temperature_unit(self) -> str:
        """Return the unit temperatures are shown in."""
        return self._controller.get_display_unit()

    @property
    def hvac_mode(self) -> HVACMode:
        """Return the current HVAC mode."""
        return self._profile.to_hvac_mode(self._controller.state)

    @property
    def hvac_action(self) -> HVACAction:
        """Return what the unit was last commanded to do."""
        return self._profile.to_hvac_action(self._controller.state)

    @property
    def target_temperature(self) -> float | None:
        """Return the target temperature, if the current mode has one."""
        if self._controller.get_temperature_range() is None:
            return None
        return self._controller.get_target_temperature()

    @property
    def min_temp(self) -> float:
        """Return the lowest temperature accepted in the current mode."""
        temperature_range = self._controller.get_temperature_range()
        if temperature_range is None:
            return to_display_unit(
                DEFAULT_MIN_TEMP, self._controller.get_display_unit()
            )
        return temperature_range.min_temp

    @property
    def max_temp(self) -> float:
        """Return the highest temperature accepted in the current mode."""
        temperature_range = self._controller.get_temperature_range()
        if temperature_range is None:
            return to_display_unit(
                DEFAULT_MAX_TEMP, self._controller.get_display_unit()
            )
        return temperature_range.max_temp

    @property
    def swing_mode(self) -> str:
        """Return the current swing mode."""
        return SWING_ON if self._controller.get_swing() else SWING_OFF

    @property
    def preset_mode(self) -> str | None:
        """Return the current preset mode."""
        if not self._controller.capabilities.boost:
            return None
        return PRESET_BOOST if self._controller.get_boost() else PRESET_NONE

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Set the HVAC mode.

        Off only cuts the power. Any other mode powers the unit on and
        resets the target temperature to that mode's default.

        Args:
            hvac_mode: The HVAC mode to set.

        """
        if hvac_mode == HVACMode.OFF:
            self._raise_for_result(await self._controller.set_power(False))
            return

        try:
            mode = self._profile.to_ac_mode(hvac_mode)
        except InvalidRequestedMode as err:
            _LOGGER.warning("%s: %s", self._controller.name, err)
            raise HomeAssistantError(str(err)) from err

        self._raise_for_result(await self._controller.set_mode(mode, power=True))

    async def async_set_temperature(self, **kwargs: Any) -> None:  # noqa: ANN401
        """Set the target temperature.

        Args:
            **kwargs: Keyword arguments containing temperature data.

        """
        if (hvac_mode := kwargs.get(ATTR_HVAC_MODE)) is not None:
            await self.async_set_hvac_mode(hvac_mode)

        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return

        self._raise_for_result(
            await self._controller.set_target_temperature(temperature)
        )

    async def async_set_swing_mode(self, swing_mode: str) -> None:
        """Set the swing mode.

        Args:
            swing_mode: The swing mode to set.

        """
        if swing_mode not in (SWING_ON, SWING_OFF):
            error_msg = f"Unknown swing mode {swing_mode}"
            raise HomeAssistantError(error_msg)

        self._raise_for_result(
            await self._controller.set_swing(swing_mode == SWING_ON)
        )

    async def async_set_preset_mode(self, preset_mode: str) -> None:
        """Set the preset mode.

        Args:
            preset_mode: The preset mode to set.

        """
        if preset_mode not in (PRESET_NONE, PRESET_BOOST):
            error_msg = f"Unknown preset mode {preset_mode}"
            raise HomeAssistantError(error_msg)

        self._raise_for_result(
            await self._controller.set_boost(preset_mode == PRESET_BOOST)
        )

    async def async_turn_on(self) -> None:
        """Turn the unit on in its last mode."""
        self._raise_for_result(await self._controller.set_power(True))

    async def async_turn_off(self) -> None:
        """Turn the unit off."""
        self._raise_for_result(await self._controller.set_power(False))
