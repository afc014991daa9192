"""
Style Compilation Configuration.

Provides configuration for:
    - Text offset scaling (ems to pixels)
    - Default text size for symbol layers
    - Diagnostics for layer types the compiler skips

Exports:
    StyleConfig: Pydantic style configuration model
"""

import os
from pydantic import BaseModel, Field

from config.defaults import StyleDefaults, EnvironmentVariables
from exceptions import ConfigurationError


# ============================================================================
# STYLE CONFIGURATION
# ============================================================================

class StyleConfig(BaseModel):
    """
    Style compilation configuration.

    Controls the tunable constants of layer compilation. The defaults match
    the values renderers expect when a style document leaves them out.
    """

    text_offset_scale: float = Field(
        default=StyleDefaults.TEXT_OFFSET_SCALE,
        gt=0,
        description="Pixels per em applied to layout.text-offset on each axis",
        examples=[8, 12]
    )

    default_text_size: float = Field(
        default=StyleDefaults.TEXT_SIZE,
        gt=0,
        description="Font size in pixels when layout.text-size is absent or not a literal"
    )

    log_unsupported_layers: bool = Field(
        default=True,
        description="Log a warning for every layer whose type is not compiled"
    )

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        return cls(
            text_offset_scale=_read_number(
                EnvironmentVariables.TEXT_OFFSET_SCALE, StyleDefaults.TEXT_OFFSET_SCALE
            ),
            default_text_size=_read_number(
                EnvironmentVariables.DEFAULT_TEXT_SIZE, StyleDefaults.TEXT_SIZE
            ),
            log_unsupported_layers=os.environ.get(
                EnvironmentVariables.LOG_UNSUPPORTED_LAYERS, "true"
            ).lower() == "true"
        )


def _read_number(name: str, default: float) -> float:
    """Read a positive number from the environment, failing loudly on junk."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {raw!r}")
    return value
