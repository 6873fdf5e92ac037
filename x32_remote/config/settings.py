"""
Application configuration settings.
"""
import os
from typing import Tuple, Dict, Any

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE: str = os.getenv("X32_LOG_FILE", "")

# Network Settings
DEFAULT_X32_HOST: str = os.getenv("X32_HOST", "192.168.1.64")
DEFAULT_X32_PORT: int = int(os.getenv("X32_PORT", "10023"))
REPLY_TIMEOUT_SEC: float = float(os.getenv("X32_REPLY_TIMEOUT_SEC", "2.0"))

# Device integer range
MONO_LEVEL_MAX: int = 160

# Validation Settings
VALID_LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config() -> Dict[str, Any]:
    """Get all configuration settings as a dictionary."""
    return {
        "logging": {
            "level": LOG_LEVEL,
            "format": LOG_FORMAT,
            "file": LOG_FILE,
        },
        "network": {
            "x32_host": DEFAULT_X32_HOST,
            "x32_port": DEFAULT_X32_PORT,
            "reply_timeout": REPLY_TIMEOUT_SEC,
        },
        "device": {
            "mono_level_max": MONO_LEVEL_MAX,
        },
    }


def validate_config() -> bool:
    """Validate configuration settings."""
    if LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
        return False

    if not (1 <= DEFAULT_X32_PORT <= 65535):
        return False

    if REPLY_TIMEOUT_SEC <= 0:
        return False

    if MONO_LEVEL_MAX <= 0:
        return False

    return True
