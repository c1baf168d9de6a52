"""Console entry point that runs every topic demonstration in order."""

from __future__ import annotations

import logging
import sys

from colored import fore, stylize, style

from .demos import MODULES

LOGGER_NAME = "typing_tour"
BANNER_COLOR = "cyan"
SECTION_RULE = "-" * 66

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the package logger to write diagnostics to stderr.

    Demo output goes to stdout through ``print``; log records never mix
    into it.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger


def banner(title: str) -> str:
    return stylize(f"****************** {title} ******************", fore(BANNER_COLOR) + style("bold"))


def run() -> None:
    """Run each registered topic under its own banner."""
    for index, (name, runner) in enumerate(MODULES):
        if index:
            print(SECTION_RULE)
        logger.debug("running topic %s", name)
        print(banner(name.replace("_", " ")))
        runner()


def main() -> int:
    setup_logging()
    run()
    return 0


if __name__ == "__main__":  # pragma: no cover - console entry point only
    sys.exit(main())
