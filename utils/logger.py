import logging
import os
import sys

def setup_logger(level=None):
    """
    Configures and returns the console logger used for all triage output.
    """
    logger = logging.getLogger('ERTriageLogger')
    # TRIAGE_LOG_LEVEL wins over the configured level so tests and scripts can silence output
    level = os.environ.get('TRIAGE_LOG_LEVEL', level or 'INFO')
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Prevent adding multiple handlers if called multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    
    # Console output is the user-facing display, so only the message is shown
    formatter = logging.Formatter('%(message)s')
    handler.setFormatter(formatter)
    
    logger.addHandler(handler)
    
    return logger

# Create a single logger instance to be imported by other modules
logger = setup_logger()
