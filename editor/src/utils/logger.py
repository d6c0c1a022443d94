"""Global logging and error handling utilities"""
import logging
import sys
import traceback

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('4color')
_error_callback = None


def set_error_callback(callback):
    """Register the presentation layer's error reporter.

    Args:
        callback: Function called with (title, message), e.g. to show a popup
    """
    global _error_callback
    _error_callback = callback


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional user notification in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to report (optional)
        title: Title for the report

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Reports the user message (or exception string) to the error callback
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    _logger.error(f"{title}: {traceback.format_exc()}")

    message = user_message if user_message else str(e)
    if _error_callback:
        _error_callback(title, message)
    else:
        _logger.error(f"{title} - {message}")

    raise e
