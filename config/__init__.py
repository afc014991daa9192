"""
Configuration Package - Style Compilation Configuration

Structure:
    config/
    ├── __init__.py              # This file - exports and singleton
    ├── defaults.py              # Literal defaults and fallback styles
    └── style_config.py          # StyleConfig loaded from environment

Usage:
    # Singleton pattern (preferred)
    from config import get_config
    config = get_config()
    scale = config.text_offset_scale

    # Debug output
    from config import debug_config
    info = debug_config()
"""

from typing import Optional

from exceptions import ConfigurationError
from util_logger import ComponentType, LoggerFactory
from .defaults import StyleDefaults, FallbackDefaults, EnvironmentVariables
from .style_config import StyleConfig

logger = LoggerFactory.create_logger(ComponentType.CONFIG, "StyleConfig")


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[StyleConfig] = None


def get_config() -> StyleConfig:
    """
    Get global configuration singleton.

    Returns:
        StyleConfig instance loaded from environment

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    global _config_instance
    if _config_instance is None:
        try:
            _config_instance = StyleConfig.from_environment()
        except ConfigurationError as e:
            logger.error(f"Style configuration rejected: {e}")
            raise
        logger.info(
            "Loaded style configuration from environment",
            extra={'custom_dimensions': _config_instance.model_dump()}
        )
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get configuration for debugging.

    Returns:
        Dictionary with configuration values, or an error entry if loading failed
    """
    try:
        return get_config().model_dump()
    except Exception as e:
        return {'error': f"{type(e).__name__}: {e}"}


__all__ = [
    'StyleDefaults',
    'FallbackDefaults',
    'EnvironmentVariables',
    'StyleConfig',
    'get_config',
    'reset_config',
    'debug_config',
]
