import logging


def setup_logging(verbose: bool = False) -> None:
    """Sets up the logging configuration for the command line tool."""

    # Clear all existing handlers to prevent duplication
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Console handler for user-facing output, timings only with --verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root_logger.addHandler(console_handler)
