"""
Vector Tile Style Service Layer.

Owns the styling state of one vector tile layer:
- Load a fetched style document (mapping, JSON text or bytes)
- Compile it and publish document + cache together
- Resolve features against the published state
- Fall back to built-in styles for every feature when loading fails

Fetching the document and drawing are the caller's job; nothing here does I/O.

Usage:
    service = VectorTileStyleService()
    service.apply_style(response_body)
    style_fn = service.style_function()
    symbolizers = style_fn(feature, resolution)

Created: 19 OCT 2026
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from config import StyleConfig, get_config
from exceptions import StyleDocumentError
from util_logger import ComponentType, LoggerFactory
from .compiler import StyleCompiler, parse_style_document
from .fallback import FallbackStyleProvider
from .models import CompiledStyle, ResolvedStyle, StyleCache, StyleDocument, Symbolizer
from .resolver import FeatureLike, FeatureStyleResolver

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "VectorTileStyleService")

RawStyle = Union[StyleDocument, Mapping[str, Any], str, bytes, None]
StyleFunction = Callable[..., Tuple[Symbolizer, ...]]


@dataclass(frozen=True)
class PublishedStyle:
    """Document and cache of one layer, published as a single object."""
    document: Optional[StyleDocument] = None
    cache: Optional[StyleCache] = None


class VectorTileStyleService:
    """
    Styling state for one vector tile layer.

    apply_style() builds the complete new state before swapping it in with a
    single attribute assignment, so concurrent resolve() calls see either the
    previous state or the new one, never a partially compiled cache.
    """

    def __init__(
        self,
        config: Optional[StyleConfig] = None,
        fallback: Optional[FallbackStyleProvider] = None
    ):
        """
        Initialize service with optional configuration and fallback provider.

        Args:
            config: Style configuration (loads from environment if not provided)
            fallback: Fallback provider (creates default if not provided)
        """
        self.config = config or get_config()
        self.compiler = StyleCompiler(self.config)
        self.resolver = FeatureStyleResolver(fallback)
        self._published = PublishedStyle()

    # ========================================================================
    # PUBLISHED STATE (read-only)
    # ========================================================================

    @property
    def document(self) -> Optional[StyleDocument]:
        return self._published.document

    @property
    def cache(self) -> Optional[StyleCache]:
        return self._published.cache

    @property
    def is_styled(self) -> bool:
        """True when a document is published; False means every feature falls back."""
        return self._published.document is not None

    # ========================================================================
    # LOADING
    # ========================================================================

    def load_document(self, raw: RawStyle) -> Optional[StyleDocument]:
        """
        Parse a fetched style document.

        Args:
            raw: Parsed mapping, JSON text/bytes, StyleDocument, or None

        Returns:
            StyleDocument, or None if raw is missing or structurally invalid
        """
        if raw is None:
            logger.warning("No style document supplied; using fallback styles")
            return None

        try:
            if isinstance(raw, (str, bytes, bytearray)):
                try:
                    raw = json.loads(raw)
                except ValueError as e:
                    raise StyleDocumentError("Style document is not valid JSON", details=str(e)) from e
                except RecursionError as e:
                    raise StyleDocumentError("Style document is nested too deeply to parse") from e
            if not isinstance(raw, (Mapping, StyleDocument)):
                raise StyleDocumentError(
                    f"Style document must be a JSON object, got {type(raw).__name__}"
                )
            return parse_style_document(raw)
        except StyleDocumentError as e:
            logger.warning(
                f"Style document rejected: {e}; using fallback styles",
                extra={'custom_dimensions': {'details': (e.details or "")[:1000]}}
            )
            return None

    def apply_style(self, raw: RawStyle) -> bool:
        """
        Load, compile and publish a style document.

        Args:
            raw: Fetched style document (see load_document)

        Returns:
            True if the document was applied, False if fallback styling is now active
        """
        document = self.load_document(raw)
        if document is None:
            self._published = PublishedStyle()
            return False

        cache = self.compiler.compile(document)
        self._published = PublishedStyle(document=document, cache=cache)
        logger.info(
            f"Applied style '{document.name or 'unnamed'}' with {len(cache)} compiled layers"
        )
        return True

    def clear(self) -> None:
        """Discard the published document and cache together."""
        self._published = PublishedStyle()

    # ========================================================================
    # RESOLUTION
    # ========================================================================

    def resolve(self, feature: FeatureLike) -> ResolvedStyle:
        """Resolve one feature against the currently published state."""
        published = self._published
        return self.resolver.resolve(feature, published.document, published.cache)

    def style_function(self) -> StyleFunction:
        """
        Build a renderer style hook.

        Returns:
            Callable (feature, resolution=None) -> tuple of Symbolizers
        """
        def style(feature: FeatureLike, resolution: Optional[float] = None) -> Tuple[Symbolizer, ...]:
            return self.resolve(feature).symbolizers

        return style

    def background_style(self) -> Optional[CompiledStyle]:
        """Compiled style of the first background layer, for the full-canvas fill."""
        published = self._published
        if published.document is None or published.cache is None:
            return None
        for layer in published.document.layers:
            if layer.type == "background":
                return published.cache.get(layer.id)
        return None

    def describe(self) -> Dict[str, Any]:
        """
        JSON-safe summary of the published state.

        {
            "styled": true,
            "name": "bgt",
            "layer_count": 120,
            "styles": {"water": {...}, ...}
        }
        """
        published = self._published
        if published.document is None or published.cache is None:
            return {"styled": False, "name": None, "layer_count": 0, "styles": {}}
        return {
            "styled": True,
            "name": published.document.name,
            "layer_count": len(published.document.layers),
            "styles": published.cache.to_dict()
        }
