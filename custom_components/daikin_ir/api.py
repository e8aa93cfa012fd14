"""API client for the Daikin IR bridge.

This module provides functions to serialize an air conditioner state into
the bridge's query string, send it, and interpret the bridge's reply.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import httpx
from homeassistant.helpers.httpx_client import create_async_httpx_client

from .const import (
    DEFAULT_TIMEOUT,
    HTTP_BAD_REQUEST,
    HTTP_NO_CONTENT,
    PARAM_MODE,
    PARAM_POWER,
    PARAM_POWERFUL,
    PARAM_SWING,
    PARAM_TEMP,
)

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from .models import AcState

_LOGGER = logging.getLogger(__name__)


class DaikinIrError(Exception):
    """Base exception for Daikin IR errors."""


class RemoteCommitFailure(DaikinIrError):
    """Exception raised when the bridge did not acknowledge a state."""


def format_bool(value: bool) -> str:  # noqa: FBT001
    """Format a boolean the way the bridge expects it.

    Args:
        value: Boolean to format.

    Returns:
        "true" or "false".

    """
    return "true" if value else "false"


def build_state_params(state: AcState, *, send_boost: bool = True) -> dict[str, str]:
    """Build the query parameters describing a state.

    Power is always sent. Mode, temperature, swing and boost are only sent
    when the unit is powered on.

    Args:
        state: State to serialize.
        send_boost: Whether the model understands the powerful flag.

    Returns:
        Ordered dictionary of query parameters.

    """
    params = {PARAM_POWER: format_bool(state.power)}
    if not state.power:
        return params

    params[PARAM_MODE] = str(state.mode)
    params[PARAM_TEMP] = str(round(state.target_temperature))
    params[PARAM_SWING] = format_bool(state.swing)
    if send_boost:
        params[PARAM_POWERFUL] = format_bool(state.boost)
    return params


def build_state_url(api_url: str, state: AcState, *, send_boost: bool = True) -> str:
    """Build the full request URL for a state."""
    params = build_state_params(state, send_boost=send_boost)
    return str(httpx.URL(api_url, params=params))


def is_http_error(status: int) -> bool:
    """Check if HTTP status code indicates an error.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is 400 or higher, False otherwise.

    """
    return status >= HTTP_BAD_REQUEST


def extract_messages(body: str) -> str | None:
    """Extract the human-readable messages of a JSON reply.

    Args:
        body: Raw response body.

    Returns:
        Messages joined by newlines, or None if the body does not carry a
        ``messages`` field.

    """
    try:
        data = json.loads(body)
    except ValueError:
        return None

    if not isinstance(data, dict) or "messages" not in data:
        return None

    messages = data["messages"]
    if isinstance(messages, list):
        return "\n".join(str(message) for message in messages)
    return str(messages)


def validate_response(response: httpx.Response) -> str | None:
    """Validate a bridge reply and return its informational message.

    A 204 carries no message. A JSON body with ``messages`` is a success
    whatever the status. Any other body is a success unless the status is
    an error, in which case the commit fails.

    Args:
        response: HTTP response object to validate.

    Returns:
        Message to log, or None if there is nothing to log.

    Raises:
        RemoteCommitFailure: If the status is an error and the body is not
            recognized.

    """
    if response.status_code == HTTP_NO_CONTENT:
        return None

    body = response.text
    messages = extract_messages(body)
    if messages is not None:
        return messages

    if is_http_error(response.status_code):
        error_msg = f"Request failed: {response.status_code}"
        if body:
            error_msg = f"{error_msg}: {body}"
        raise RemoteCommitFailure(error_msg)

    return body or None


def create_session_client(hass: HomeAssistant) -> httpx.AsyncClient:
    """Create HTTP client for the IR bridge.

    Args:
        hass: Home Assistant instance.

    Returns:
        Configured httpx AsyncClient with a bounded timeout.

    """
    return create_async_httpx_client(hass, timeout=DEFAULT_TIMEOUT)


async def async_send_state(
    session: httpx.AsyncClient,
    api_url: str,
    state: AcState,
    *,
    send_boost: bool = True,
) -> str | None:
    """Send a full state to the IR bridge.

    Args:
        session: HTTP client session.
        api_url: Base URL of the bridge.
        state: State to send.
        send_boost: Whether the powerful flag is included.

    Returns:
        Informational message returned by the bridge, if any.

    Raises:
        RemoteCommitFailure: If the request fails or is rejected.

    """
    params = build_state_params(state, send_boost=send_boost)
    _LOGGER.debug("Sending state to %s: %s", api_url, params)

    try:
        response = await session.get(api_url, params=params)
    except httpx.TimeoutException as err:
        error_msg = f"Timeout while contacting {api_url}"
        raise RemoteCommitFailure(error_msg) from err
    except httpx.HTTPError as err:
        error_msg = f"Connection error while contacting {api_url}: {err}"
        raise RemoteCommitFailure(error_msg) from err

    message = validate_response(response)
    _LOGGER.debug("Bridge acknowledged with status %s", response.status_code)
    return message
