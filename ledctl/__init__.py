#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#
__version__ = "0.1.0"
