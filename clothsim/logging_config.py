import logging
import logging.handlers
'''
Usage:
from clothsim.logging_config import setup_logging

logger = setup_logging('clothsim.log')
logger.info('Cloth reset.')
logger.debug('Point 12 pinned.')
'''

LOGGER_NAME = 'clothsim'


def setup_logging(log_file=None, quiet: bool = False):
    logger = logging.getLogger(LOGGER_NAME)

    if logger.handlers:
        if quiet:
            logger.handlers = [h for h in logger.handlers
                               if not isinstance(h, logging.StreamHandler)
                               or isinstance(h, logging.FileHandler)]
        return logger

    logger.setLevel(logging.DEBUG)

    # Log format
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # File handler
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(log_file,
                                                            maxBytes=5_000_000,
                                                            backupCount=0)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
