# personal_trainer/config.py
import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from personal_trainer.data.catalog import DEFAULT_CATALOG_PATH

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    catalog_path: str = DEFAULT_CATALOG_PATH
    random_seed: Optional[int] = None
    log_level: str = "WARNING"
    output_dir: str = "output"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from the environment, after loading a .env file if present.

    Args:
        env_file: Explicit .env path; defaults to searching from the working directory

    Returns:
        Settings
    """
    load_dotenv(env_file)

    seed = os.getenv("PT_RANDOM_SEED")
    random_seed = None
    if seed:
        try:
            random_seed = int(seed)
        except ValueError:
            logger.warning("Ignoring non-integer PT_RANDOM_SEED=%r", seed)

    log_level = (os.getenv("PT_LOG_LEVEL") or "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        logger.warning("Ignoring unknown PT_LOG_LEVEL=%r, using WARNING", log_level)
        log_level = "WARNING"

    return Settings(
        catalog_path=os.getenv("PT_CATALOG_PATH") or DEFAULT_CATALOG_PATH,
        random_seed=random_seed,
        log_level=log_level,
        output_dir=os.getenv("PT_OUTPUT_DIR") or "output",
    )
