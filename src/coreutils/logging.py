import logging
import os
from datetime import datetime
from typing import Optional

from .env import get_log_dir, get_log_level


def setup_logging(level: Optional[int] = None, log_dir: Optional[str] = None):
    """Setup basic logging configuration"""
    level = get_log_level() if level is None else level
    log_dir = get_log_dir() if log_dir is None else log_dir
    os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(
                os.path.join(
                    log_dir, f"transforms_{datetime.now().strftime('%Y-%m-%d')}.log"
                )
            ),
            logging.StreamHandler(),
        ],
    )
    return logging.getLogger(__name__)
