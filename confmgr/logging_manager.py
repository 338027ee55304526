import inspect
import logging
import os
import time
from datetime import datetime
from typing import Optional

from colorama import Style

from .colors import get_color, init_colorama
from .constants import LOG_LOCK_FILENAME, LOGGER_NAME, MAX_LOG_FILES

LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
}


class ColorFormatter(logging.Formatter):
    """Custom formatter that colorizes log messages based on log_type.

    Applies colorama color codes to messages and caller info based on the
    log_type attribute (info, warning, error, success, etc.).
    """

    def format(self, record: logging.LogRecord) -> str:
        """Adds color codes to log messages based on log_type."""
        log_type = getattr(record, "log_type", "default")
        message_color = get_color(log_type)
        caller_color = get_color("caller")
        message = record.getMessage()
        caller_info = getattr(record, "caller_info", "")
        return f"{message_color}{message}{Style.RESET_ALL} {caller_color}{caller_info}{Style.RESET_ALL}"


class CustomFormatter(logging.Formatter):
    """Formatter that safely handles optional caller_info attribute."""

    def format(self, record: logging.LogRecord) -> str:
        """Formats the record, safely handling the 'caller_info' attribute."""
        base_message = super().format(record)
        caller_info = getattr(record, "caller_info", "")
        if caller_info:
            return f"{base_message} {caller_info}"
        return base_message


def _rotate_logs(log_dir: str):
    """Removes the oldest .log files once MAX_LOG_FILES exist.

    A lock file keeps parallel processes from rotating at the same time.
    """
    lock_file_path = os.path.join(log_dir, LOG_LOCK_FILENAME)

    while True:
        try:
            with open(lock_file_path, "x"):
                break
        except FileExistsError:
            time.sleep(0.1)

    try:
        log_files = [os.path.join(log_dir, f) for f in os.listdir(log_dir) if f.endswith(".log")]
        log_files.sort(key=os.path.getctime)
        while len(log_files) >= MAX_LOG_FILES:
            old_log = log_files.pop(0)
            try:
                os.remove(old_log)
            except OSError:
                logging.getLogger(LOGGER_NAME).warning(f"Could not remove old log file {old_log}")
    finally:
        if os.path.exists(lock_file_path):
            os.remove(lock_file_path)


def setup_loggers(log_dir: Optional[str] = None, process_id: Optional[str] = None) -> tuple[logging.Logger, Optional[str]]:
    """Sets up the 'config' logger with a colored console handler.

    When log_dir is given, a session log file is also written there and old
    session logs are rotated out.

    Args:
        log_dir: Optional directory for the session log file.
        process_id: Optional ID to make log filenames unique for parallel runs.

    Returns:
        Tuple of (config_logger, log_filename). log_filename is None without log_dir.
    """
    init_colorama()

    config_logger = logging.getLogger(LOGGER_NAME)
    config_logger.setLevel(logging.INFO)
    for handler in config_logger.handlers[:]:
        handler.close()
        config_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ColorFormatter())
    config_logger.addHandler(stream_handler)
    config_logger.propagate = False

    log_filename = None
    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        _rotate_logs(log_dir)

        session_timestamp = datetime.now().strftime("%d-%m_%H-%M-%S")
        if process_id:
            session_timestamp = f"{session_timestamp}_{process_id}"
        log_filename = os.path.join(log_dir, f"{session_timestamp}.log")

        file_handler = logging.FileHandler(log_filename, mode="a")
        file_handler.setFormatter(CustomFormatter("%(asctime)s - %(levelname)s - %(message)s"))
        config_logger.addHandler(file_handler)
        config_logger.info(f"--- Config logging started for file: {os.path.abspath(log_filename)} ---")

    return config_logger, log_filename


def shutdown_loggers():
    """Safely shuts down all logging handlers to release file locks."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True


class LoggingMixin:
    """A mixin class that provides a standardized logging interface.

    Provides a `_log` method that sends messages to `self.logger` with the
    stdlib level matching the log_type and the caller attached as extra info.
    """

    logger: logging.Logger

    def _log(self, message: str, log_type: str = "default"):
        """Logs a message with a color-coding type.

        Args:
            message: The message to be logged.
            log_type: A string key that maps to a color for terminal output.
                'error' and 'warning' also set the record's level.
        """
        extra = {"log_type": log_type}
        log_origin = ""

        current_frame = inspect.currentframe()
        if current_frame:
            caller_frame = current_frame.f_back
            if caller_frame:
                caller_method_name = caller_frame.f_code.co_name
                if "self" in caller_frame.f_locals:
                    caller_class_name = caller_frame.f_locals["self"].__class__.__name__
                    log_origin = f"{caller_class_name}.{caller_method_name}"
                else:
                    log_origin = caller_method_name
        extra["caller_info"] = f"[{log_origin}]"

        self.logger.log(LEVELS.get(log_type, logging.INFO), message, extra=extra)
