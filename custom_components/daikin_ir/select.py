"""Select entity choosing the temperature display unit of an air conditioner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.components.select import SelectEntity
from homeassistant.const import EntityCategory, UnitOfTemperature
from homeassistant.exceptions import HomeAssistantError

from .const import DOMAIN
from .entity import DaikinIrEntity

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback

    from .controller import DaikinIrController


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the display unit select entity."""
    entry_data = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [DaikinIrDisplayUnitSelect(entry_data["controller"], entry.entry_id)]
    )


class DaikinIrDisplayUnitSelect(DaikinIrEntity, SelectEntity):
    """Unit target temperatures are shown and entered in.

    Changing it never sends anything to the unit.
    """

    _attr_entity_category = EntityCategory.CONFIG
    _attr_options = [UnitOfTemperature.CELSIUS, UnitOfTemperature.FAHRENHEIT]
    _attr_translation_key = "temperature_display_unit"

    def __init__(self, controller: DaikinIrController, entry_id: str) -> None:
        super().__init__(controller, entry_id)
        self._attr_unique_id = f"{entry_id}_temperature_display_unit"

    @property
    def current_option(self) -> str:
        """Return the current display unit."""
        return self._controller.get_display_unit()

    async def async_select_option(self, option: str) -> None:
        """Change the display unit."""
        if option not in self._attr_options:
            error_msg = f"Unknown temperature unit {option}"
            raise HomeAssistantError(error_msg)

        self._controller.set_display_unit(UnitOfTemperature(option))
