# SPDX-License-Identifier: MIT

from questlog.cleanup import register_cleanup
from questlog.initialize import initialize
from questlog.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
