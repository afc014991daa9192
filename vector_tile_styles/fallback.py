"""
Fallback Style Provider.

Fixed built-in style per geometry bucket. Used when a feature matches no
compiled layer and when the whole style document failed to load.
"""

from typing import Any, Dict

from config.defaults import FallbackDefaults
from util_logger import ComponentType, LoggerFactory
from .models import (
    CompiledStyle,
    GeometryBucket,
    GeometryType,
    StyleCircle,
    StyleFill,
    StyleStroke,
    Symbolizer,
)

logger = LoggerFactory.create_logger(ComponentType.PROVIDER, "FallbackStyleProvider")


def default_point_marker() -> Symbolizer:
    """Radius 3 red circle with a 1px white outline."""
    return Symbolizer(
        image=StyleCircle(
            radius=FallbackDefaults.POINT_RADIUS,
            fill=StyleFill(color=FallbackDefaults.POINT_FILL),
            stroke=StyleStroke(
                color=FallbackDefaults.POINT_STROKE,
                width=FallbackDefaults.POINT_STROKE_WIDTH
            )
        )
    )


def _build_fallback_table() -> Dict[GeometryBucket, CompiledStyle]:
    polygon = Symbolizer(
        fill=StyleFill(color=FallbackDefaults.POLYGON_FILL),
        stroke=StyleStroke(
            color=FallbackDefaults.POLYGON_STROKE,
            width=FallbackDefaults.POLYGON_STROKE_WIDTH
        )
    )
    line = Symbolizer(
        stroke=StyleStroke(
            color=FallbackDefaults.LINE_STROKE,
            width=FallbackDefaults.LINE_STROKE_WIDTH
        )
    )
    other = Symbolizer(
        fill=StyleFill(color=FallbackDefaults.OTHER_FILL),
        stroke=StyleStroke(
            color=FallbackDefaults.OTHER_STROKE,
            width=FallbackDefaults.OTHER_STROKE_WIDTH
        )
    )
    return {
        GeometryBucket.POLYGON: CompiledStyle(symbolizers=(polygon,)),
        GeometryBucket.LINE: CompiledStyle(symbolizers=(line,)),
        GeometryBucket.POINT: CompiledStyle(symbolizers=(default_point_marker(),)),
        GeometryBucket.OTHER: CompiledStyle(symbolizers=(other,)),
    }


class FallbackStyleProvider:
    """
    Built-in styles keyed by geometry bucket.

    The styles are built once per provider and shared by every call.
    """

    def __init__(self):
        self._styles = _build_fallback_table()
        logger.debug(f"Built fallback styles for {len(self._styles)} geometry buckets")

    def default_for(self, geometry_type: Any) -> CompiledStyle:
        """
        Get the fallback style for a geometry type.

        Args:
            geometry_type: GeometryType member or geometry name ("Polygon", ...)

        Returns:
            Fallback style; the OTHER bucket style for unknown geometry
        """
        geometry = GeometryType.coerce(geometry_type)
        if geometry is GeometryType.UNKNOWN:
            logger.debug(
                f"Unrecognised geometry {geometry_type!r}; using the generic fallback style",
                extra={'custom_dimensions': {'geometry_type': str(geometry_type)}}
            )
        return self._styles[geometry.bucket]
