"""
Logging utilities for Localization Manager

Dual logging:
- Short user-facing messages to the status bar callback (GUI)
- Detailed technical logs to console and optional log file
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(log_file=None, level=logging.INFO):
    """
    Configure root logging.

    Args:
        log_file: Optional path of a log file in addition to console output
        level: Root log level
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def log_and_status(status_fn, msg, level="info", ui_msg=None):
    """
    Log to file/console and update UI status.

    Args:
        status_fn: Status callback function (for GUI), may be None
        msg: Detailed technical message for logs
        level: Log level ("info", "warning", "error", "debug")
        ui_msg: User-friendly message for UI (defaults to msg if not provided)
    """
    if ui_msg is None:
        ui_msg = msg

    if level == "error":
        logging.error(msg)
    elif level == "warning":
        logging.warning(msg)
    elif level == "debug":
        logging.debug(msg)
    else:
        logging.info(msg)

    if status_fn:
        try:
            status_fn(ui_msg)
        except Exception as e:
            logging.warning(f"Status update failed: {e}")


def log_success(status_fn, msg, details=None):
    """Log a success message"""
    tech_msg = f"SUCCESS: {msg}"
    if details:
        tech_msg += f" | {details}"
    log_and_status(status_fn, tech_msg, ui_msg=f"✅ {msg}")


def log_warning(status_fn, msg, details=None):
    """Log a warning message"""
    tech_msg = f"WARNING: {msg}"
    if details:
        tech_msg += f" | {details}"
    log_and_status(status_fn, tech_msg, level="warning", ui_msg=f"⚠ {msg}")


def log_error(status_fn, msg, details=None, exc=None):
    """
    Log an error message.

    Args:
        status_fn: Status callback function
        msg: User-friendly error message
        details: Additional technical details for logs
        exc: Exception object for stack trace logging
    """
    tech_msg = f"ERROR: {msg}"
    if details:
        tech_msg += f" | {details}"
    if exc:
        tech_msg += f" | Exception: {type(exc).__name__}: {exc}"
        logging.error(tech_msg, exc_info=exc)
    else:
        logging.error(tech_msg)

    if status_fn:
        try:
            status_fn(f"❌ {msg}")
        except Exception as e:
            logging.warning(f"Status update failed: {e}")
