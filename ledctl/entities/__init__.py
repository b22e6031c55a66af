#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#

__all__ = [
    "LedDevice",
    "format_leds_report",
    "get_leds",
    "get_leds_report",
    "parse_attribute",
    "read_attribute",
    "set_led_brightness",
]

from .led import (
    LedDevice,
    format_leds_report,
    get_leds,
    get_leds_report,
    parse_attribute,
    read_attribute,
    set_led_brightness,
)
