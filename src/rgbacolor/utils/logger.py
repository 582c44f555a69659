"""Global logging and error handling utilities"""
import sys
import logging
import traceback

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('rgbacolor')


def set_debug_mode(enabled: bool):
    """Override debug mode (normally driven by the config file)"""
    global DEBUG_MODE
    DEBUG_MODE = bool(enabled)


def loggerRaise(e: Exception, user_message: str = None):
    """Log an exception, then raise it

    Args:
        e: The exception to handle
        user_message: Extra context prepended to the log entry (optional)

    In DEBUG_MODE:
        - Logs a one-line debug entry and raises
          (the caller sees the full traceback anyway)

    In RELEASE_MODE:
        - Logs the message plus the current traceback as a warning
        - Then raises the exception
    """
    message = f"{user_message}: {e}" if user_message else str(e)

    if DEBUG_MODE:
        _logger.debug(message)
    else:
        tb = traceback.format_exc() if sys.exc_info()[0] is not None else ""
        _logger.warning(f"{message}\n{tb}".rstrip())

    # Re-raise so the caller can handle it appropriately
    raise e
