import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are only attached by ``configure_logging`` at the CLI entry point;
    library callers keep full control over their own logging setup.
    """
    return logging.getLogger(f"favicon_injector.{name}")
