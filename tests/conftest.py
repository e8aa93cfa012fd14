"""Pytest configuration and fixtures for Daikin IR tests."""

import httpx
import pytest

from custom_components.daikin_ir.controller import DaikinIrController
from custom_components.daikin_ir.models import AcMode, AcState, ModeCapabilities

API_URL = "http://bridge.local/daikin"
DEVICE_NAME = "Living Room AC"


@pytest.fixture
def full_capabilities() -> ModeCapabilities:
    """Fixture providing capabilities of a unit supporting every mode."""
    return ModeCapabilities.from_config(
        ["cold", "warm", "auto", "dry", "fan"],
        "auto",
    )


@pytest.fixture
def two_mode_capabilities() -> ModeCapabilities:
    """Fixture providing capabilities of a cool/heat only unit."""
    return ModeCapabilities.from_config(["cold", "warm"], "cold", boost=False)


@pytest.fixture
def powered_cool_state() -> AcState:
    """Fixture providing a powered-on state in cool mode at 25°C."""
    return AcState(
        power=True,
        mode=AcMode.COOL,
        target_temperature=25,
        swing=True,
        boost=False,
    )


@pytest.fixture
def session() -> httpx.AsyncClient:
    """Create an HTTP client whose transport is mocked by pytest-httpx."""
    return httpx.AsyncClient()


@pytest.fixture
def controller(
    session: httpx.AsyncClient, full_capabilities: ModeCapabilities
) -> DaikinIrController:
    """Create a controller for a unit supporting every mode."""
    return DaikinIrController(session, API_URL, full_capabilities, name=DEVICE_NAME)


@pytest.fixture
def two_mode_controller(
    session: httpx.AsyncClient, two_mode_capabilities: ModeCapabilities
) -> DaikinIrController:
    """Create a controller for a cool/heat only unit."""
    return DaikinIrController(
        session, API_URL, two_mode_capabilities, name=DEVICE_NAME
    )
