"""Characteristic profiles for Daikin IR integration.

A profile decides how the air conditioner modes are presented to Home
Assistant: which HVAC modes are offered, what is reported for modes that
have no HVAC counterpart, and whether dry mode is also exposed as a
dehumidifier.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from homeassistant.components.climate import HVACAction, HVACMode

from .const import (
    PROFILE_CLIMATE,
    PROFILE_HEATER_COOLER,
    PROFILE_HEATER_COOLER_DEHUMIDIFIER,
)
from .controller import InvalidRequestedMode
from .models import AcMode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import AcState, ModeCapabilities

HVAC_ACTION_MAP = {
    AcMode.AUTO: HVACAction.IDLE,
    AcMode.COOL: HVACAction.COOLING,
    AcMode.HEAT: HVACAction.HEATING,
    AcMode.DRY: HVACAction.DRYING,
    AcMode.FAN: HVACAction.FAN,
}


@dataclass(frozen=True)
class CharacteristicProfile:
    """Mapping between Home Assistant enumerations and air conditioner modes.

    Attributes:
        name: Profile identifier stored in the config entry.
        hvac_modes: HVAC modes offered, and the mode each one selects.
        fallback_hvac_mode: Reported when the current mode is not offered.
        dehumidifier: Whether dry mode is also exposed as a dehumidifier.

    """

    name: str
    hvac_modes: Mapping[HVACMode, AcMode]
    fallback_hvac_mode: HVACMode = HVACMode.AUTO
    dehumidifier: bool = False

    def for_capabilities(self, capabilities: ModeCapabilities) -> CharacteristicProfile:
        """Return a copy offering only the modes the unit supports."""
        hvac_modes = {
            hvac_mode: mode
            for hvac_mode, mode in self.hvac_modes.items()
            if capabilities.supports(mode)
        }
        fallback = self.fallback_hvac_mode
        if fallback not in hvac_modes:
            fallback = next(iter(hvac_modes), HVACMode.OFF)
        return replace(
            self,
            hvac_modes=hvac_modes,
            fallback_hvac_mode=fallback,
            dehumidifier=self.dehumidifier and capabilities.supports(AcMode.DRY),
        )

    @property
    def offered_hvac_modes(self) -> list[HVACMode]:
        """Return the HVAC modes to offer, off included."""
        return [HVACMode.OFF, *self.hvac_modes]

    def to_hvac_mode(self, state: AcState) -> HVACMode:
        """Return the HVAC mode describing a state."""
        if not state.power:
            return HVACMode.OFF
        for hvac_mode, mode in self.hvac_modes.items():
            if mode == state.mode:
                return hvac_mode
        return self.fallback_hvac_mode

    def to_hvac_action(self, state: AcState) -> HVACAction:
        """Return what the unit is doing in a state."""
        if not state.power:
            return HVACAction.OFF
        return HVAC_ACTION_MAP[state.mode]

    def to_ac_mode(self, hvac_mode: HVACMode | str) -> AcMode:
        """Return the mode selected by an HVAC mode other than off.

        Raises:
            InvalidRequestedMode: If the profile does not offer the HVAC mode.

        """
        try:
            return self.hvac_modes[HVACMode(hvac_mode)]
        except (KeyError, ValueError) as err:
            error_msg = f"Unknown HVAC mode {hvac_mode} for profile {self.name}"
            raise InvalidRequestedMode(error_msg) from err


HEATER_COOLER_MODES = {
    HVACMode.COOL: AcMode.COOL,
    HVACMode.HEAT: AcMode.HEAT,
    HVACMode.AUTO: AcMode.AUTO,
}

PROFILES = {
    PROFILE_HEATER_COOLER: CharacteristicProfile(
        name=PROFILE_HEATER_COOLER,
        hvac_modes=HEATER_COOLER_MODES,
    ),
    PROFILE_HEATER_COOLER_DEHUMIDIFIER: CharacteristicProfile(
        name=PROFILE_HEATER_COOLER_DEHUMIDIFIER,
        hvac_modes=HEATER_COOLER_MODES,
        dehumidifier=True,
    ),
    PROFILE_CLIMATE: CharacteristicProfile(
        name=PROFILE_CLIMATE,
        hvac_modes={
            HVACMode.COOL: AcMode.COOL,
            HVACMode.HEAT: AcMode.HEAT,
            HVACMode.AUTO: AcMode.AUTO,
            HVACMode.DRY: AcMode.DRY,
            HVACMode.FAN_ONLY: AcMode.FAN,
        },
    ),
}


def get_profile(name: str, capabilities: ModeCapabilities) -> CharacteristicProfile:
    """Return the named profile restricted to the unit's capabilities.

    Raises:
        KeyError: If the profile name is unknown.

    """
    return PROFILES[name].for_capabilities(capabilities)
