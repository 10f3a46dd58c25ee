"""Command-line entry point.

Eats one Food and then one Cookie. Command-line arguments are accepted and
ignored; the exit status is always 0.
"""

import sys

import mylibrary
from mylibrary._log import configure_logging, get_logger

log = get_logger(__name__)


def main(argv=None):
    """Announce a Food and then a Cookie.

    Args:
        argv: (list[str] | None) Ignored, defaults to sys.argv

    Returns:
        (int) Process exit status, always 0
    """
    if argv is None:
        argv = sys.argv
    log.debug("run_started", args=len(argv))

    food = mylibrary.Food()
    cookie = mylibrary.Cookie()
    food.announce()
    cookie.announce()

    log.debug("run_finished")
    return 0


def run():
    """Console script wrapper."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
