import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by the last configure_logging() call
_HANDLER: logging.Handler | None = None


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure favicon_injector logging for command-line use.

    Attaches a single stderr handler to the ``favicon_injector`` logger.
    Calling it again replaces the previous handler so the current
    ``sys.stderr`` is always the one written to.

    Args:
        verbose: Log at DEBUG instead of WARNING.

    Returns:
        The package root logger.
    """
    global _HANDLER

    root_logger = logging.getLogger("favicon_injector")
    if _HANDLER is not None:
        root_logger.removeHandler(_HANDLER)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    _HANDLER = handler

    # Suppress noisy third-party loggers
    logging.getLogger("bs4").setLevel(logging.WARNING)

    return root_logger
