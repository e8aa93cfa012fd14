"""Data models for Daikin IR integration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from homeassistant.const import UnitOfTemperature

from .const import MODE_FIXED_TEMPERATURES, MODE_TEMPERATURE_RANGES

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class AcMode(StrEnum):
    """Operating mode of the air conditioner, valued as the bridge expects."""

    AUTO = "auto"
    COOL = "cold"
    HEAT = "warm"
    DRY = "dry"
    FAN = "fan"


@dataclass(frozen=True, slots=True)
class TemperatureRange:
    """Valid target temperatures for a mode, in Celsius."""

    default: float
    min_temp: float
    max_temp: float

    def __post_init__(self) -> None:
        if not self.min_temp <= self.default <= self.max_temp:
            error_msg = (
                f"Invalid temperature range: expected {self.min_temp} <= "
                f"{self.default} <= {self.max_temp}"
            )
            raise ValueError(error_msg)


@dataclass(frozen=True, slots=True)
class AcState:
    """Last-commanded state of the air conditioner.

    Instances are never mutated; a changed copy is built with
    ``dataclasses.replace`` and swapped in after the bridge acknowledges it.
    """

    power: bool
    mode: AcMode
    target_temperature: float
    swing: bool
    boost: bool


@dataclass(frozen=True)
class ModeCapabilities:
    """What a given air conditioner model supports.

    Attributes:
        modes: Supported modes, in the order they are offered.
        ranges: Temperature range for every supported mode that accepts one.
        fixed_temperatures: Temperature sent for supported modes without range.
        default_mode: Mode used for the initial state.
        boost: Whether the "powerful" flag is sent and offered.

    """

    modes: tuple[AcMode, ...]
    ranges: Mapping[AcMode, TemperatureRange] = field(default_factory=dict)
    fixed_temperatures: Mapping[AcMode, float] = field(default_factory=dict)
    default_mode: AcMode = AcMode.AUTO
    boost: bool = True

    def __post_init__(self) -> None:
        if not self.modes:
            error_msg = "At least one mode must be supported"
            raise ValueError(error_msg)
        if self.default_mode not in self.modes:
            error_msg = f"Default mode {self.default_mode} is not supported"
            raise ValueError(error_msg)
        for mode in self.modes:
            if mode not in self.ranges and mode not in self.fixed_temperatures:
                error_msg = f"Mode {mode} has neither a range nor a fixed temperature"
                raise ValueError(error_msg)

    @classmethod
    def from_config(
        cls,
        modes: Iterable[str],
        default_mode: str,
        *,
        boost: bool = True,
    ) -> ModeCapabilities:
        """Build capabilities from configured mode names.

        Args:
            modes: Mode values (``AcMode`` values) the model supports.
            default_mode: Mode value used for the initial state.
            boost: Whether the model supports the powerful flag.

        Returns:
            ModeCapabilities using the built-in temperature tables.

        Raises:
            ValueError: If a mode is unknown or the default is not supported.

        """
        supported = tuple(AcMode(mode) for mode in modes)
        ranges = {
            mode: TemperatureRange(*MODE_TEMPERATURE_RANGES[mode])
            for mode in supported
            if mode in MODE_TEMPERATURE_RANGES
        }
        fixed = {
            mode: MODE_FIXED_TEMPERATURES[mode]
            for mode in supported
            if mode in MODE_FIXED_TEMPERATURES
        }
        return cls(
            modes=supported,
            ranges=ranges,
            fixed_temperatures=fixed,
            default_mode=AcMode(default_mode),
            boost=boost,
        )

    def supports(self, mode: AcMode) -> bool:
        """Return True if the mode is supported."""
        return mode in self.modes

    def range_for(self, mode: AcMode) -> TemperatureRange | None:
        """Return the temperature range of a mode, or None if it has none."""
        return self.ranges.get(mode)

    def default_temperature(self, mode: AcMode) -> float:
        """Return the temperature a mode starts at when it is selected."""
        temperature_range = self.ranges.get(mode)
        if temperature_range is not None:
            return temperature_range.default
        return self.fixed_temperatures[mode]

    def initial_state(self) -> AcState:
        """Return the state assumed at startup."""
        return AcState(
            power=False,
            mode=self.default_mode,
            target_temperature=self.default_temperature(self.default_mode),
            swing=True,
            boost=False,
        )


def is_in_range(temperature_range: TemperatureRange, temperature: float) -> bool:
    """Check whether a Celsius temperature lies within a range, bounds included."""
    return temperature_range.min_temp <= temperature <= temperature_range.max_temp


def to_display_unit(celsius: float, unit: UnitOfTemperature) -> float:
    """Convert a Celsius temperature to the display unit."""
    if unit == UnitOfTemperature.CELSIUS:
        return celsius
    return celsius * 9 / 5 + 32


def to_celsius(value: float, unit: UnitOfTemperature) -> float:
    """Convert a temperature in the display unit back to Celsius."""
    if unit == UnitOfTemperature.CELSIUS:
        return value
    return (value - 32) * 5 / 9
