"""
Miscellaneous utilities.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def get_logger(
    name: str = "tfocs_prox",
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure the package logger so that records from the operator modules are emitted.

    Module loggers (eg. `tfocs_prox.prox.proximal_ops`) do not set a level of their own,
    so the level chosen here applies to every module in the package.

    :param name: (optional) name of the logger to configure. Defaults to the package logger.
    :param verbose: (optional) whether or not to emit records at the INFO level. Defaults to False.
    :param debug: (optional) whether or not to emit records at the DEBUG level. Defaults to False.
    :param log_file: (optional) path to a file where the log should be stored.
        The log is printed to stderr when 'None'.
    :returns: the configured logging.Logger.
    """

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # repeated calls only change the level.
    if not logger.handlers:
        handler: logging.Handler = (
            logging.StreamHandler() if log_file is None else logging.FileHandler(log_file)
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
