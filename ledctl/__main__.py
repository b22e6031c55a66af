#
# Copyright (C) 2021 ledctl contributors
#
# This file is part of ledctl
# (see https://github.com/ledctl/ledctl).
#
# License: MIT, see https://opensource.org/licenses/MIT
#
from .commands import main

if __name__ == "__main__":
    main()
