"""Configuration management for the Food Saver application."""
import logging
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from foodsaver.utilities import constants

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Date Format
DATE_FORMAT: Final[str] = constants.DATE_FORMAT

# Storage Alerts Configuration
DAYS_BEFORE_EXPIRY: Final[int] = int(os.getenv('DAYS_BEFORE_EXPIRY', str(constants.DAYS_BEFORE_EXPIRY)))
LOW_STOCK_THRESHOLD: Final[dict[str, float]] = {
    "g": float(os.getenv('LOW_STOCK_THRESHOLD_G', str(constants.LOW_STOCK_THRESHOLD["g"]))),
    "kg": float(os.getenv('LOW_STOCK_THRESHOLD_KG', str(constants.LOW_STOCK_THRESHOLD["kg"]))),
    "ml": float(os.getenv('LOW_STOCK_THRESHOLD_ML', str(constants.LOW_STOCK_THRESHOLD["ml"]))),
    "l": float(os.getenv('LOW_STOCK_THRESHOLD_L', str(constants.LOW_STOCK_THRESHOLD["l"]))),
    "pcs": float(os.getenv('LOW_STOCK_THRESHOLD_PCS', str(constants.LOW_STOCK_THRESHOLD["pcs"]))),
}

# Alert feed size kept by the web observers
MAX_ALERT_EVENTS: Final[int] = int(os.getenv('MAX_ALERT_EVENTS', '300'))

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for console and server entry points."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format=LOG_FORMAT,
    )
