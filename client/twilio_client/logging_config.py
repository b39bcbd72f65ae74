"""
Logging configuration for the Twilio client

The library itself only creates module loggers; this module is used by the
command line front end (or any application embedding the client) to set up
handlers, levels and formats.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone


def setup_logging(log_level=None, log_file=None, max_bytes=10*1024*1024, backup_count=5, stream=None):
    """
    Set up logging configuration for the Twilio client.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (if None, logs to stream)
        max_bytes: Maximum size of log file before rotation (default 10MB)
        backup_count: Number of backup log files to keep (default 5)
        stream: Stream used when no log file is set (default sys.stdout)
    """

    # Default log level from environment or INFO
    if log_level is None:
        log_level = os.environ.get('LOG_LEVEL', 'INFO')
    log_level = log_level.upper()

    # Default log file from environment
    if log_file is None:
        log_file = os.environ.get('LOG_FILE')

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))

    # Clear any existing handlers
    root_logger.handlers.clear()

    if log_file:
        # File handler with rotation
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
    else:
        handler = logging.StreamHandler(stream or sys.stdout)

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging initialized - Level: {log_level}, Output: {log_file or 'stdout'}")

    return logger


def log_api_event(event_type, endpoint=None, status_code=None, success=True, error=None):
    """
    Log a Twilio API call with structured information.

    Args:
        event_type: Type of event (e.g., 'lookup', 'sms_send')
        endpoint: Request URL or path
        status_code: HTTP status code, when one was received
        success: Whether the call succeeded
        error: Error message if applicable
    """
    logger = logging.getLogger('twilio_client.api')

    log_data = {
        'event_type': event_type,
        'success': success,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }

    if endpoint:
        log_data['endpoint'] = endpoint
    if status_code is not None:
        log_data['status_code'] = status_code
    if error:
        log_data['error'] = error

    # Format as key=value pairs for easy parsing
    log_message = ' '.join([f"{k}={v}" for k, v in log_data.items()])

    if success:
        logger.info(f"API: {log_message}")
    else:
        logger.error(f"API: {log_message}")
