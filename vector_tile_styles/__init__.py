"""
Vector Tile Styles Module.

Translates Mapbox GL style documents into renderer-native style descriptors
and picks, for each rendered vector tile feature, the descriptor to draw it
with:
- Compile a style document once into a StyleCache (layer id -> CompiledStyle)
- Resolve each feature by source-layer, then by geometry type
- Fall back to built-in styles when nothing matches or the document failed

Usage:
    from vector_tile_styles import StyleCompiler, resolve_style

    cache = StyleCompiler().compile(document)
    style = resolve_style(feature, document, cache)

    # Or let the service own the layer's state
    from vector_tile_styles import VectorTileStyleService

    service = VectorTileStyleService()
    service.apply_style(response_json)
    style = service.resolve(feature)
"""

from .models import (
    CompiledStyle,
    GeometryBucket,
    GeometryType,
    RenderFeature,
    ResolvedStyle,
    StyleCache,
    StyleDocument,
    StyleIndex,
    Symbolizer,
)
from .parsers import parse_color, parse_font
from .fallback import FallbackStyleProvider
from .compiler import StyleCompiler, compile_style, parse_style_document
from .resolver import FeatureStyleResolver, resolve_style
from .service import VectorTileStyleService

__all__ = [
    "CompiledStyle",
    "GeometryBucket",
    "GeometryType",
    "RenderFeature",
    "ResolvedStyle",
    "StyleCache",
    "StyleDocument",
    "StyleIndex",
    "Symbolizer",
    "parse_color",
    "parse_font",
    "FallbackStyleProvider",
    "StyleCompiler",
    "compile_style",
    "parse_style_document",
    "FeatureStyleResolver",
    "resolve_style",
    "VectorTileStyleService",
]
