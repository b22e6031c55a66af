#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#
import click
import click_log
import cloup

from .. import __version__
from ..common import LIBRARY_NAME, LedError, LedsConfig, Manager, logger
from ..entities import get_leds_report, set_led_brightness

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

NO_LEVEL = -1


common_options = {
    "device": cloup.option("--device", type=str, default="", help="LED Device; e.g. 'input2::scrolllock'"),
    "level": cloup.option("--level", type=int, default=NO_LEVEL, help="Requested brightness level for LED device."),
    "version": click.version_option(
        __version__,
        "--version",
        prog_name=LIBRARY_NAME,
        message="%(prog)s v%(version)s",
        help="Print the current version of this program and exit.",
    ),
    "verbosity": click_log.simple_verbosity_option(
        logger,
        "--verbosity",
        default="WARNING",
        help="Either CRITICAL, ERROR, WARNING, INFO or DEBUG",
        show_default=True,
    ),
}


@cloup.command(name=LIBRARY_NAME, context_settings=CONTEXT_SETTINGS)
@common_options["device"]
@common_options["level"]
@common_options["version"]
@common_options["verbosity"]
@click.pass_context
def cli(ctx, device, level):
    """Check and set the brightness of the LEDs of a Linux system.

    Without options, list all the LED devices with their current and maximum
    brightness. With both --device and --level, set the brightness of this device.
    """
    config = ctx.find_object(LedsConfig) or LedsConfig()

    try:
        if device and level >= 0:
            click.echo(set_led_brightness(device, level, config))
        elif not device and level < 0:
            # the report already ends with a blank line
            click.echo(get_leds_report(config), nl=False)
        else:
            # only one of device and level given
            click.echo(ctx.get_help())
    except (LedError, OSError) as exc:
        return Manager.exit(1, str(exc))
