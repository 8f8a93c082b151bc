# SPDX-License-Identifier: MIT

from chronogrid.cleanup import register_cleanup
from chronogrid.initialize import initialize
from chronogrid.logging_setup import setup_logging
from chronogrid.terminal.app import run


def main() -> None:
    setup_logging()
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
