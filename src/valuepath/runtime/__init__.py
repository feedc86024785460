from .logging import LOGGER_NAME, configure_logging, get_logger, reset_logging

__all__ = ["LOGGER_NAME", "configure_logging", "get_logger", "reset_logging"]
