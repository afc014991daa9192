"""
Feature Style Resolver.

Picks the style for one rendered feature:

1. Feature names a source-layer -> the first layer bound to that
   source-layer, in document order. Geometry is not consulted, and no
   geometry-based second pass happens when nothing matches.
2. No source-layer name -> the first layer whose type fits the geometry
   (polygons: fill, lines: line, points: circle or symbol).
3. The matched layer's compiled style from the cache, or the fallback
   style for the feature's geometry when there is no match, the match was
   never compiled, or no document is loaded.

Lookups go through the StyleIndex built with the cache, so resolution is
constant time per feature. The document and cache are only read.
"""

from typing import Any, Mapping, Optional, Union

from exceptions import ContractViolationError
from util_logger import ComponentType, LoggerFactory
from .fallback import FallbackStyleProvider
from .models import RenderFeature, ResolvedStyle, StyleCache, StyleDocument

logger = LoggerFactory.create_logger(ComponentType.RESOLVER, "FeatureStyleResolver")

FeatureLike = Union[RenderFeature, Mapping[str, Any]]


def as_render_feature(feature: FeatureLike) -> RenderFeature:
    """
    Accept a RenderFeature or a GeoJSON-like mapping.

    Raises:
        ContractViolationError: For any other type
    """
    if isinstance(feature, RenderFeature):
        return feature
    if isinstance(feature, Mapping):
        return RenderFeature.from_geojson(feature)
    raise ContractViolationError(
        f"Feature must be a RenderFeature or mapping, got {type(feature).__name__}"
    )


class FeatureStyleResolver:
    """Resolves features to compiled or fallback styles."""

    def __init__(self, fallback: Optional[FallbackStyleProvider] = None):
        self.fallback = fallback or FallbackStyleProvider()

    def resolve(
        self,
        feature: FeatureLike,
        document: Optional[StyleDocument],
        cache: Optional[StyleCache]
    ) -> ResolvedStyle:
        """
        Resolve the style for one feature.

        Args:
            feature: Feature being drawn
            document: Loaded style document, None if loading failed
            cache: Cache compiled from document, None if compilation failed

        Returns:
            Compiled style of the first matching layer, else the fallback style
        """
        feature = as_render_feature(feature)
        if document is None or cache is None:
            return self.fallback.default_for(feature.geometry_type)

        layer_id = self.match_layer_id(feature, cache)
        if layer_id is not None:
            compiled = cache.get(layer_id)
            if compiled is not None:
                return compiled
            logger.debug(f"Layer '{layer_id}' matched but has no compiled style; using fallback")

        return self.fallback.default_for(feature.geometry_type)

    def match_layer_id(self, feature: RenderFeature, cache: StyleCache) -> Optional[str]:
        """Id of the first candidate layer in document order, None if there is none."""
        source_layer_name = feature.source_layer_name
        if source_layer_name:
            return cache.index.by_source_layer.get(source_layer_name)
        return cache.index.by_bucket.get(feature.geometry_type.bucket)


_DEFAULT_RESOLVER = FeatureStyleResolver()


def resolve_style(
    feature: FeatureLike,
    document: Optional[StyleDocument],
    cache: Optional[StyleCache]
) -> ResolvedStyle:
    """Resolve with the shared default resolver; see FeatureStyleResolver.resolve."""
    return _DEFAULT_RESOLVER.resolve(feature, document, cache)
