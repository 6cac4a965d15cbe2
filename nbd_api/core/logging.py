# ============================================================================
# FILE: nbd_api/core/logging.py
# ============================================================================
import logging
import sys

_logging_configured = False

def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure application-wide logging (call once at startup).
    Repeated calls return the already configured root logger.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger()

    # Format: timestamp | level | module:line | message
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)

    # Third-party loggers are too chatty below WARNING
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _logging_configured = True
    root_logger.debug(f"Logging configured at level {log_level}")
    return root_logger
