"""Logger setup for Lambda handlers.

The Lambda runtime already installs a root handler that ships records to
CloudWatch, so outside offline mode only the level is adjusted.
"""

import logging

from lambda_utils.config import Config, get_config

DEV_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logger = logging.getLogger("lambda_utils")


def configure_logging(config: Config | None = None) -> logging.Logger:
    config = config or get_config()
    logger.setLevel(logging.DEBUG if config.debug else logging.INFO)

    # Offline (serverless-offline, local scripts) has no runtime handler
    if config.is_offline and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEV_FORMAT))
        logger.addHandler(handler)

    return logger
