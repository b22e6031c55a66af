#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#
from ..common import Manager
from .base import cli


def main():
    try:
        cli()
    except SystemExit as exc:
        Manager.exit(exc.code)
    except Exception:
        Manager.exit(1, "Oops...", log_exception=True)
    else:
        Manager.exit(0)
