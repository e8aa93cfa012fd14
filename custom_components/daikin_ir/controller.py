"""Reconciliation controller for Daikin IR air conditioners.

The controller owns the last-commanded state of one air conditioner. Every
setter copies the current state, changes one attribute, validates the
candidate and sends it to the IR bridge. The candidate replaces the current
state only once the bridge has acknowledged it.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from homeassistant.const import UnitOfTemperature

from . import api
from .api import DaikinIrError, RemoteCommitFailure
from .models import AcMode, AcState, is_in_range, to_celsius, to_display_unit

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from .models import ModeCapabilities, TemperatureRange

_LOGGER = logging.getLogger(__name__)


class InvalidRequestedMode(DaikinIrError):
    """Exception raised for a mode or state the unit cannot express."""


class InvalidRequestedTemperature(DaikinIrError):
    """Exception raised for a temperature the active mode does not accept."""


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Outcome of a setter.

    Attributes:
        success: True if the requested state is now current.
        noop: True if nothing had to be sent to reach it.
        error: Reason of the failure when success is False.

    """

    success: bool
    noop: bool = False
    error: DaikinIrError | None = None


class DaikinIrController:
    """Authoritative view of what was last commanded to an air conditioner."""

    def __init__(
        self,
        session: httpx.AsyncClient,
        api_url: str,
        capabilities: ModeCapabilities,
        *,
        name: str,
        display_unit: UnitOfTemperature = UnitOfTemperature.CELSIUS,
    ) -> None:
        """Initialize the controller.

        Args:
            session: HTTP client session for bridge calls.
            api_url: Base URL of the IR bridge.
            capabilities: Modes and temperatures the unit supports.
            name: Display name used in log messages.
            display_unit: Unit temperatures are presented and accepted in.

        """
        self._session = session
        self._api_url = api_url
        self._capabilities = capabilities
        self._name = name
        self._display_unit = display_unit
        self._state = capabilities.initial_state()
        self._lock = asyncio.Lock()
        self._listeners: list[Callable[[], None]] = []

    @property
    def name(self) -> str:
        """Return the display name of the unit."""
        return self._name

    @property
    def capabilities(self) -> ModeCapabilities:
        """Return the capabilities of the unit."""
        return self._capabilities

    @property
    def state(self) -> AcState:
        """Return the current state."""
        return self._state

    def async_add_listener(self, update_callback: Callable[[], None]) -> Callable[[], None]:
        """Listen for state changes.

        Args:
            update_callback: Called after every commit and display unit change.

        Returns:
            Callable removing the listener.

        """
        self._listeners.append(update_callback)

        def remove_listener() -> None:
            if update_callback in self._listeners:
                self._listeners.remove(update_callback)

        return remove_listener

    def _notify_listeners(self) -> None:
        for update_callback in list(self._listeners):
            update_callback()

    def get_power(self) -> bool:
        """Return True if the unit is powered on."""
        return self._state.power

    def get_mode(self) -> AcMode:
        """Return the current mode."""
        return self._state.mode

    def get_swing(self) -> bool:
        """Return True if the louvers oscillate."""
        return self._state.swing

    def get_boost(self) -> bool:
        """Return True if powerful mode is on."""
        return self._state.boost

    def get_target_temperature(self) -> float:
        """Return the target temperature in the display unit."""
        return to_display_unit(self._state.target_temperature, self._display_unit)

    def get_display_unit(self) -> UnitOfTemperature:
        """Return the unit temperatures are presented in."""
        return self._display_unit

    def get_temperature_range(self, mode: AcMode | None = None) -> TemperatureRange | None:
        """Return a mode's range converted to the display unit.

        Args:
            mode: Mode to look up, defaults to the current mode.

        Returns:
            Range in the display unit, or None if the mode has no range.

        """
        temperature_range = self._capabilities.range_for(mode or self._state.mode)
        if temperature_range is None:
            return None
        return replace(
            temperature_range,
            default=to_display_unit(temperature_range.default, self._display_unit),
            min_temp=to_display_unit(temperature_range.min_temp, self._display_unit),
            max_temp=to_display_unit(temperature_range.max_temp, self._display_unit),
        )

    def set_display_unit(self, unit: UnitOfTemperature) -> None:
        """Change the display unit; the state and the unit are not touched."""
        self._display_unit = unit
        _LOGGER.debug("%s: display unit set to %s", self._name, unit)
        self._notify_listeners()

    async def set_power(self, power: bool) -> CommitResult:  # noqa: FBT001
        """Turn the unit on or off."""
        async with self._lock:
            return await self._async_commit(replace(self._state, power=power))

    async def set_mode(self, mode: AcMode, *, power: bool | None = None) -> CommitResult:
        """Switch mode and reset the target temperature to the mode's default.

        Args:
            mode: Mode to switch to.
            power: Power state to commit together with the mode, if given.

        Returns:
            CommitResult of the request.

        """
        if not self._capabilities.supports(mode):
            return self._reject(
                InvalidRequestedMode(f"{self._name} does not support mode {mode}")
            )

        async with self._lock:
            candidate = self._with_mode(self._state, mode)
            if power is not None:
                candidate = replace(candidate, power=power)
            return await self._async_commit(candidate)

    async def set_target_temperature(self, value: float) -> CommitResult:
        """Set the target temperature, given in the display unit.

        The value is not clamped: a temperature outside the active mode's
        range, or any temperature in a mode without range, is rejected.
        """
        celsius = to_celsius(value, self._display_unit)

        async with self._lock:
            temperature_range = self._capabilities.range_for(self._state.mode)
            if temperature_range is None:
                return self._reject(
                    InvalidRequestedTemperature(
                        f"Mode {self._state.mode} does not accept a target temperature"
                    )
                )
            if not is_in_range(temperature_range, celsius):
                return self._reject(
                    InvalidRequestedTemperature(
                        f"{celsius}°C is outside {temperature_range.min_temp}-"
                        f"{temperature_range.max_temp}°C for mode {self._state.mode}"
                    )
                )
            return await self._async_commit(
                replace(self._state, target_temperature=celsius)
            )

    async def set_swing(self, swing: bool) -> CommitResult:  # noqa: FBT001
        """Turn louver oscillation on or off."""
        async with self._lock:
            return await self._async_commit(replace(self._state, swing=swing))

    async def set_boost(self, boost: bool) -> CommitResult:  # noqa: FBT001
        """Turn powerful mode on or off.

        Powerful is a toggle on the unit itself, so a request matching the
        current value is answered without sending anything.
        """
        if not self._capabilities.boost:
            return self._reject(
                InvalidRequestedMode(f"{self._name} does not support powerful mode")
            )

        async with self._lock:
            if self._state.boost == boost:
                _LOGGER.debug("%s: powerful mode already %s", self._name, boost)
                return CommitResult(success=True, noop=True)
            return await self._async_commit(replace(self._state, boost=boost))

    async def set_dehumidifier(self, dehumidify: bool) -> CommitResult:  # noqa: FBT001
        """Enter or leave the dry mode.

        Leaving dry mode goes to auto, or to the default mode when auto is
        not supported.
        """
        if not self._capabilities.supports(AcMode.DRY):
            return self._reject(
                InvalidRequestedMode(f"{self._name} does not support dehumidifying")
            )

        async with self._lock:
            candidate = replace(self._state)
            if dehumidify and self._state.mode != AcMode.DRY:
                candidate = self._with_mode(self._state, AcMode.DRY)
            elif not dehumidify and self._state.mode == AcMode.DRY:
                candidate = self._with_mode(self._state, self._leave_dry_mode())
            return await self._async_commit(candidate)

    def _leave_dry_mode(self) -> AcMode:
        if self._capabilities.supports(AcMode.AUTO):
            return AcMode.AUTO
        if self._capabilities.default_mode != AcMode.DRY:
            return self._capabilities.default_mode
        return next(
            (mode for mode in self._capabilities.modes if mode != AcMode.DRY),
            AcMode.DRY,
        )

    def _with_mode(self, state: AcState, mode: AcMode) -> AcState:
        return replace(
            state,
            mode=mode,
            target_temperature=self._capabilities.default_temperature(mode),
        )

    def _reject(self, error: DaikinIrError) -> CommitResult:
        _LOGGER.warning("%s: rejected request: %s", self._name, error)
        return CommitResult(success=False, error=error)

    async def _async_commit(self, candidate: AcState) -> CommitResult:
        """Send a candidate state and make it current once acknowledged."""
        _LOGGER.debug("%s: committing %s", self._name, candidate)

        try:
            message = await api.async_send_state(
                self._session,
                self._api_url,
                candidate,
                send_boost=self._capabilities.boost,
            )
        except RemoteCommitFailure as err:
            _LOGGER.error("%s: error occurred: %s", self._name, err)  # noqa: TRY400
            return CommitResult(success=False, error=err)

        self._state = candidate
        if message:
            _LOGGER.info("%s: %s", self._name, message)
        self._notify_listeners()
        return CommitResult(success=True)
