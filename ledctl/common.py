#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import click_log

LIBRARY_NAME = "ledctl"

# location of the LED class devices, as of kernel 4.4+
LEDS_DIRECTORY = Path("/sys/class/leds")
BRIGHTNESS_FILE_NAME = "brightness"
MAX_BRIGHTNESS_FILE_NAME = "max_brightness"

# carriage return is not part of it
TRIMMED_CHARS = " \n\t\v"


class ColorFormatter(click_log.ColorFormatter):
    # click-log does not format the message when there is an exception info
    def formatMessage(self, record):
        try:
            exc_info, record.exc_info = record.exc_info, None
            return click_log.ColorFormatter.format(self, record)
        finally:
            record.exc_info = exc_info

    def format(self, record):
        return logging.Formatter.format(self, record)


click_log.core._default_handler.formatter = ColorFormatter()


logger = logging.getLogger(LIBRARY_NAME)
click_log.basic_config(logger)


class LedError(Exception):
    pass


class InvalidInputError(LedError):
    pass


class LevelTooHighError(LedError):
    def __init__(self, level, max_brightness):
        self.level = level
        self.max_brightness = max_brightness
        super().__init__(
            f"Requested brightness of ({level}) is beyond the maximum possible of the device ({max_brightness})."
        )


class AttributeParseError(LedError, ValueError):
    def __init__(self, content, path=None):
        self.content = content
        self.path = path
        where = f' in "{path}"' if path is not None else ""
        super().__init__(f"Invalid brightness value{where}: {content!r}")


@dataclass(frozen=True)
class LedsConfig:
    """Where to find the LED devices and their attribute files."""

    directory: Path = LEDS_DIRECTORY
    brightness_file: str = BRIGHTNESS_FILE_NAME
    max_brightness_file: str = MAX_BRIGHTNESS_FILE_NAME

    def __post_init__(self):
        if not isinstance(self.directory, Path):
            object.__setattr__(self, "directory", Path(self.directory))

    def device_path(self, name):
        return self.directory / name

    def brightness_path(self, name):
        return self.device_path(name) / self.brightness_file

    def max_brightness_path(self, name):
        return self.device_path(name) / self.max_brightness_file


def trim(value):
    return value.strip(TRIMMED_CHARS)


class Manager:
    @staticmethod
    def exit(status=0, msg=None, msg_level=None, log_exception=False):
        if msg is not None:
            if msg_level is None:
                msg_level = "info" if status == 0 else "critical"
            getattr(logger, msg_level)(msg, exc_info=log_exception)
        sys.exit(status)
