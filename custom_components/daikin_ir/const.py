"""Constants for Daikin IR integration.

This module contains all the constants used throughout the integration,
including configuration keys, per-mode temperature tables and the query
parameter names understood by the IR bridge.
"""

DOMAIN = "daikin_ir"

MANUFACTURER = "homebridge-daikinir"
MODEL = "Daikin IR Controlled Air Conditioner"

DEFAULT_NAME = "Daikin AC"
DEFAULT_TIMEOUT = 10.0

CONF_API_URL = "api_url"
CONF_MODES = "modes"
CONF_DEFAULT_MODE = "default_mode"
CONF_PROFILE = "profile"
CONF_BOOST = "boost"

ERROR_INVALID_URL = "invalid_url"
ERROR_NO_MODES = "no_modes"
ERROR_INVALID_DEFAULT_MODE = "invalid_default_mode"

PROFILE_HEATER_COOLER = "heater_cooler"
PROFILE_HEATER_COOLER_DEHUMIDIFIER = "heater_cooler_dehumidifier"
PROFILE_CLIMATE = "climate"

# Query parameters sent to the bridge
PARAM_POWER = "power"
PARAM_MODE = "mode"
PARAM_TEMP = "temp"
PARAM_SWING = "swing"
PARAM_POWERFUL = "powerful"

HTTP_NO_CONTENT = 204
HTTP_BAD_REQUEST = 400

# Modes that accept a user-set temperature: (default, min, max) in Celsius
MODE_TEMPERATURE_RANGES = {
    "cold": (25, 18, 32),
    "warm": (19, 14, 30),
}
# Modes without a meaningful temperature send a fixed value
MODE_FIXED_TEMPERATURES = {
    "auto": 0,
    "dry": 0,
    "fan": 25,
}

DEFAULT_MODES = ["cold", "warm", "auto", "dry", "fan"]
DEFAULT_MODE = "auto"

MODE_DEHUMIDIFY = "dehumidify"
