#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#
import re
from dataclasses import dataclass
from typing import List

from ..common import AttributeParseError, InvalidInputError, LedsConfig, LevelTooHighError, logger, trim

ATTRIBUTE_VALUE_RE = re.compile(r"[+-]?[0-9]+")

REPORT_HEADER = (
    "\n----------------------------------\n"
    "LED Brightness Info Tool for Linux\n\n"
    "The following info is displayed:\n\n"
    "* Device Name\n"
    "* Brightness\n"
    "* Maximum Brightness\n"
    "----------------------------------\n\n"
)


@dataclass(frozen=True)
class LedDevice:
    name: str
    brightness: int
    max_brightness: int

    @classmethod
    def read(cls, name, config):
        brightness = read_attribute(config.brightness_path(name))
        max_brightness = read_attribute(config.max_brightness_path(name))
        return cls(name=trim(name), brightness=brightness, max_brightness=max_brightness)


def parse_attribute(content, path=None):
    """Convert the content of a brightness attribute file to an integer.

    Surrounding spaces, tabs, new lines and vertical tabs are ignored, anything
    else than an optionally signed decimal number is refused.
    """
    value = trim(content)
    if not ATTRIBUTE_VALUE_RE.fullmatch(value):
        raise AttributeParseError(content, path)
    return int(value)


def read_attribute(path):
    logger.debug(f"Reading {path}")
    return parse_attribute(path.read_text(), path)


def get_leds(config=None) -> List[LedDevice]:
    """Read all the LED devices found in the LEDs directory.

    Any device that cannot be read stops everything: the error is raised and no
    device is returned.
    """
    config = config or LedsConfig()
    names = sorted(entry.name for entry in config.directory.iterdir())
    logger.debug(f"Found {len(names)} LED device(s) in {config.directory}")
    return [LedDevice.read(name, config) for name in names]


def format_leds_report(leds):
    lines = [f"{led.name}>\t{led.brightness}\t{led.max_brightness}\n" for led in leds]
    return REPORT_HEADER + "".join(lines) + "\n"


def get_leds_report(config=None):
    return format_leds_report(get_leds(config))


def set_led_brightness(device, level, config=None):
    if not device or level < 0:
        raise InvalidInputError("set_led_brightness() --> invalid input")

    config = config or LedsConfig()
    device = trim(device)

    max_brightness = read_attribute(config.max_brightness_path(device))
    if level > max_brightness:
        raise LevelTooHighError(level, max_brightness)

    config.brightness_path(device).write_text(str(level))
    logger.info(f'[LED "{device}"] Brightness set to {level}')

    return f"The device [{device}] is now set to a brightness level of [{level}]"
