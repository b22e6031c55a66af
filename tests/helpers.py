#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#
import tempfile
import unittest
from pathlib import Path

from ledctl.common import LedsConfig


class LedsDirectoryTestCase(unittest.TestCase):
    """Give each test an empty LEDs directory and a config pointing to it."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.directory = Path(self._tmp.name) / "leds"
        self.directory.mkdir()
        self.config = LedsConfig(directory=self.directory)

    def add_led(self, name, brightness="0\n", max_brightness="255\n"):
        led_dir = self.directory / name
        led_dir.mkdir()
        if brightness is not None:
            (led_dir / "brightness").write_text(brightness)
        if max_brightness is not None:
            (led_dir / "max_brightness").write_text(max_brightness)
        return led_dir

    def read_brightness(self, name):
        return (self.directory / name / "brightness").read_text()
