# fruit_app/core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Repeated calls (tests build many apps) only adjust the level.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if not root.handlers:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    else:
        root.setLevel(numeric_level)
