# -- Logging Configuration -- #

'''
Sets up the 'meshBuoyancy' namespace logger.

Library modules only create module-level loggers; applications call
setupLogging() once to decide where messages go.
'''

from __future__ import annotations

import logging
import sys
from typing import Optional


def setupLogging(level: int | str = logging.INFO, logFile: Optional[str] = None) -> logging.Logger:
    '''
    Configure console (and optionally file) output for meshBuoyancy.

    Parameters:
    -----------
    level : int | str
        Logging level, e.g. logging.DEBUG or 'DEBUG'
    logFile : str
        Optional path to also write logs to

    Returns:
    --------
    logging.Logger : The configured package logger
    '''
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f'Unknown logging level: {level}')

    logger = logging.getLogger('meshBuoyancy')
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )

    consoleHandler = logging.StreamHandler(sys.stdout)
    consoleHandler.setLevel(level)
    consoleHandler.setFormatter(formatter)
    logger.addHandler(consoleHandler)

    if logFile:
        fileHandler = logging.FileHandler(logFile, mode='w', encoding='utf-8')
        fileHandler.setLevel(level)
        fileHandler.setFormatter(formatter)
        logger.addHandler(fileHandler)

    logger.debug('Logging initialized at level %s', logging.getLevelName(level))
    return logger
