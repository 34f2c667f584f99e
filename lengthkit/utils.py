import logging
import sys
from typing import Optional

from .defaults import DEFAULT_LOG_LEVEL

_console_handler: Optional[logging.Handler] = None


def setup_logging(verbose: bool = False) -> None:
    """Logs to stdout, at debug level if `verbose` is set and at the level of
    the `LENGTHKIT_LOG_LEVEL` environment variable otherwise."""
    global _console_handler

    console_log_level = logging.DEBUG if verbose else DEFAULT_LOG_LEVEL

    logging_formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(console_log_level)

    # Only one console handler at a time, the stdout of an earlier call may be closed.
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_log_level)
    console.setFormatter(logging_formatter)
    root_logger.addHandler(console)
    _console_handler = console
