"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - StyleDefaults: literal defaults applied while compiling layers
    - FallbackDefaults: built-in styles used when nothing else applies
    - EnvironmentVariables: names of the variables StyleConfig reads

Usage:
    from config.defaults import StyleDefaults

    # In Pydantic Field definitions:
    text_offset_scale: float = Field(default=StyleDefaults.TEXT_OFFSET_SCALE, ...)
"""


# =============================================================================
# STYLE COMPILATION DEFAULTS
# =============================================================================

class StyleDefaults:
    """
    Defaults for paint/layout properties missing from a style layer.

    Every property the compiler reads has one, so compilation never fails
    on absent data.
    """

    COLOR = "#000000"
    OPACITY = 1
    BACKGROUND_COLOR = "#f0f0f0"

    LINE_WIDTH = 1
    LINE_CAP = "round"
    LINE_JOIN = "round"
    FILL_OUTLINE_WIDTH = 1

    CIRCLE_RADIUS = 5
    CIRCLE_STROKE_WIDTH = 0

    FONT_FAMILY = "Arial, sans-serif"
    TEXT_SIZE = 12
    TEXT_ANCHOR = "center"
    TEXT_HALO_WIDTH = 0
    # text-offset is in ems; scaled to pixels per axis
    TEXT_OFFSET_SCALE = 8

    ICON_SIZE = 1


# =============================================================================
# FALLBACK STYLE DEFAULTS
# =============================================================================

class FallbackDefaults:
    """
    Built-in styles per geometry bucket.

    Used when a feature matches no layer and when the whole style document
    failed to load.
    """

    POLYGON_FILL = "rgba(0,100,255,0.3)"
    POLYGON_STROKE = "#0064ff"
    POLYGON_STROKE_WIDTH = 2

    LINE_STROKE = "#ff6600"
    LINE_STROKE_WIDTH = 2

    # Default point marker, also used for symbol layers with no text or icon
    POINT_RADIUS = 3
    POINT_FILL = "#ff0000"
    POINT_STROKE = "#ffffff"
    POINT_STROKE_WIDTH = 1

    OTHER_STROKE = "#666666"
    OTHER_STROKE_WIDTH = 1
    OTHER_FILL = "rgba(255,255,255,0.8)"


# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================

class EnvironmentVariables:
    """Environment variables read by StyleConfig.from_environment()."""

    TEXT_OFFSET_SCALE = "VT_STYLE_TEXT_OFFSET_SCALE"
    DEFAULT_TEXT_SIZE = "VT_STYLE_DEFAULT_TEXT_SIZE"
    LOG_UNSUPPORTED_LAYERS = "VT_STYLE_LOG_UNSUPPORTED_LAYERS"
