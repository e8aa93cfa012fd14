"""Dehumidifier entity for Daikin IR air conditioners.

Units configured with the dehumidifier profile expose their dry mode as a
dehumidifier sharing the power switch of the climate entity.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components.humidifier import (
    HumidifierAction,
    HumidifierDeviceClass,
    HumidifierEntity,
    HumidifierEntityFeature,
)
from homeassistant.components.humidifier.const import MODE_AUTO
from homeassistant.exceptions import HomeAssistantError

from .const import DOMAIN, MODE_DEHUMIDIFY
from .entity import DaikinIrEntity
from .models import AcMode

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .controller import DaikinIrController

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the dehumidifier entity when the profile layers one on dry mode."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    if not entry_data["profile"].dehumidifier:
        _LOGGER.debug("Profile of entry %s has no dehumidifier", entry.entry_id)
        return

    async_add_entities(
        [DaikinIrDehumidifierEntity(entry_data["controller"], entry.entry_id)]
    )


class DaikinIrDehumidifierEntity(DaikinIrEntity, HumidifierEntity):
    """Dehumidifier view of an air conditioner's dry mode."""

    _attr_device_class = HumidifierDeviceClass.DEHUMIDIFIER
    _attr_supported_features = HumidifierEntityFeature.MODES
    _attr_available_modes = [MODE_AUTO, MODE_DEHUMIDIFY]
    _attr_translation_key = "dehumidifier"

    def __init__(self, controller: DaikinIrController, entry_id: str) -> None:
        super().__init__(controller, entry_id)
        self._attr_unique_id = f"{entry_id}_dehumidifier"

    @property
    def is_on(self) -> bool:
        """Return True if the unit is powered on."""
        return self._controller.get_power()

    @property
    def mode(self) -> str:
        """Return dehumidify while in dry mode, auto otherwise."""
        if self._controller.get_mode() == AcMode.DRY:
            return MODE_DEHUMIDIFY
        return MODE_AUTO

    @property
    def action(self) -> HumidifierAction:
        """Return what the unit was last commanded to do."""
        if not self._controller.get_power():
            return HumidifierAction.OFF
        if self._controller.get_mode() == AcMode.DRY:
            return HumidifierAction.DRYING
        return HumidifierAction.IDLE

    async def async_set_mode(self, mode: str) -> None:
        """Enter or leave dry mode."""
        if mode not in (MODE_AUTO, MODE_DEHUMIDIFY):
            error_msg = f"Dehumidifier can't be set to mode {mode}"
            raise HomeAssistantError(error_msg)

        self._raise_for_result(
            await self._controller.set_dehumidifier(mode == MODE_DEHUMIDIFY)
        )

    async def async_turn_on(self, **kwargs: Any) -> None:  # noqa: ANN401, ARG002
        """Turn the unit on."""
        self._raise_for_result(await self._controller.set_power(True))

    async def async_turn_off(self, **kwargs: Any) -> None:  # noqa: ANN401, ARG002
        """Turn the unit off."""
        self._raise_for_result(await self._controller.set_power(False))
