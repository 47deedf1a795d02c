"""Constants for pytuyalights library."""

from __future__ import annotations


# API Configuration
DEFAULT_BASE_URL = "https://px1.tuyaus.com"
DEFAULT_TIMEOUT = 30  # seconds
LOGIN_ENDPOINT = "/homeassistant/auth.do"
SKILL_ENDPOINT = "/homeassistant/skill"

# Login response bodies are not UTF-8
LOGIN_RESPONSE_ENCODING = "iso-8859-1"

# Login form constants required by the vendor
COUNTRY_CODE_US = 1
BIZ_TYPE = "smart_life"
LOGIN_FROM = "tuya"

# Skill request envelope
PAYLOAD_VERSION = 1
RESPONSE_CODE_SUCCESS = "SUCCESS"

# Device Types
DEVICE_TYPE_LIGHT = "light"

# Parameter Validation
BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 255
HUE_MIN = 0
HUE_MAX = 360
SATURATION_MIN = 0
SATURATION_MAX = 100
COLOR_BRIGHTNESS_MIN = 0
COLOR_BRIGHTNESS_MAX = 100

# Color temperature (public Kelvin range and vendor range)
KELVIN_MIN = 2700
KELVIN_MAX = 6500
VENDOR_TEMPERATURE_MIN = 1000
VENDOR_TEMPERATURE_MAX = 10000
