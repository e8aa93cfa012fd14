"""Base entity for Daikin IR integration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity import DeviceInfo, Entity

from .const import DOMAIN, MANUFACTURER, MODEL

if TYPE_CHECKING:
    from collections.abc import Callable

    from .controller import CommitResult, DaikinIrController

_LOGGER = logging.getLogger(__name__)


class DaikinIrEntity(Entity):
    """Entity bound to a Daikin IR controller.

    The entity holds no state of its own: every property reads the
    controller, and the entity is written again whenever the controller
    commits a new state.
    """

    _attr_has_entity_name = True
    _attr_should_poll = False
    _attr_assumed_state = True

    def __init__(self, controller: DaikinIrController, entry_id: str) -> None:
        """Initialize the entity.

        Args:
            controller: Controller owning the air conditioner state.
            entry_id: Config entry the unit belongs to.

        """
        self._controller = controller
        self._remove_listener: Callable[[], None] | None = None
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry_id)},
            manufacturer=MANUFACTURER,
            model=MODEL,
            name=controller.name,
        )

    async def async_added_to_hass(self) -> None:
        """Subscribe to controller updates."""
        await super().async_added_to_hass()
        self._remove_listener = self._controller.async_add_listener(
            self._handle_controller_update
        )

    async def async_will_remove_from_hass(self) -> None:
        """Unsubscribe from controller updates."""
        await super().async_will_remove_from_hass()

        if self._remove_listener is not None:
            self._remove_listener()
            self._remove_listener = None

    def _handle_controller_update(self) -> None:
        """Handle a new state from the controller."""
        self.async_write_ha_state()

    def _raise_for_result(self, result: CommitResult) -> None:
        """Raise if a setter failed, so the service call reports the error.

        Raises:
            HomeAssistantError: If the result is a failure.

        """
        if result.success:
            return

        _LOGGER.debug("%s: request failed: %s", self.entity_id, result.error)
        error_msg = f"Failed to update {self._controller.name}: {result.error}"
        raise HomeAssistantError(error_msg) from result.error
