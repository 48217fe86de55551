"""Root logger configuration for applications embedding labelmap.

The library itself only emits through module loggers; call
``setup_logging`` once from application code to route them.
"""

import logging
from pathlib import Path
from typing import Union

from labelmap.schemas.config import LoggingConfig

logger = logging.getLogger(__name__)


def setup_logging(config: Union[dict, LoggingConfig, None] = None) -> logging.Logger:
    """Configure the root logger from a LoggingConfig.

    Existing root handlers are replaced by a console handler and, when
    ``log_file`` is set, a file handler. Both share one formatter.

    Parameters
    ----------
    config : LoggingConfig or dict, optional
        Logging settings. Defaults to ``LoggingConfig()`` (INFO, console only).

    Returns
    -------
    logging.Logger
        The configured root logger.
    """
    if config is None:
        config = LoggingConfig()
    elif isinstance(config, dict):
        config = LoggingConfig(**config)

    log_level = getattr(logging, config.level, logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if config.log_file:
        log_path = Path(config.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.info("Logging: level=%s, file=%s", config.level, config.log_file)
    return root
