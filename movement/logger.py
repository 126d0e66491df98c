import os
import logging
from datetime import datetime
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILENAME = 'movement.log'

def get_log_dir() -> str:
    """Where movement.log goes: $MOVEMENT_LOG_DIR, the package dir, or the cwd"""
    log_dir = os.getenv('MOVEMENT_LOG_DIR')
    if log_dir:
        return log_dir

    # Installed packages are often read-only
    package_dir = os.path.dirname(os.path.abspath(__file__))
    if os.access(package_dir, os.W_OK):
        return package_dir
    return os.getcwd()

def setup_logger(name: str, testing: bool = False, log_dir: Optional[str] = None) -> logging.Logger:
    """Get a module logger; in testing mode also log everything to movement.log"""
    logger = logging.getLogger(name)
    if not testing or logger.handlers:
        return logger

    log_file = os.path.abspath(os.path.join(log_dir or get_log_dir(), LOG_FILENAME))

    # All modules share one handler on the root logger
    if any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
           for h in logging.root.handlers):
        return logger

    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG)

    logging.info('=' * 50)
    logging.info(f'Logging started at {datetime.now()} ({name})')
    logging.info('=' * 50)
    return logger
