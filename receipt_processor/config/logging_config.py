import logging
import sys
from receipt_processor.config.settings import LOG_LEVEL

def configure_logging(log_level: str = LOG_LEVEL):
    """Configure logging for the application"""
    # Create our formatters
    detailed_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s'
    )

    # Configure the root logger, only once even if called again (reload, tests)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if not any(h.get_name() == "receipt_processor" for h in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(detailed_formatter)
        console_handler.set_name("receipt_processor")
        root_logger.addHandler(console_handler)

    # Configure specific loggers
    loggers = {
        "receipt_processor": log_level,
        "uvicorn": log_level,
        "uvicorn.access": log_level,
    }

    for logger_name, level in loggers.items():
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)

    return logging.getLogger("receipt_processor")
