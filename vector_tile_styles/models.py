"""
Vector Tile Style Pydantic Models.

Defines schemas for:
- Style documents (sources + ordered layers, Mapbox GL style format)
- Layer definitions as a tagged variant over the compiled layer kinds
- Render features handed in by the tile renderer
- Compiled descriptors (symbolizers) and the compiled style cache

All models are frozen: a document or cache is replaced as a whole, never
edited in place.

Created: 19 OCT 2026
"""

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Tuple, TypeVar, Union

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    WrapSerializer,
    field_validator,
)

_K = TypeVar("_K")
_V = TypeVar("_V")

# frozen=True only blocks attribute assignment; mapping fields are wrapped
# in a read-only proxy after validation and dumped as plain dicts.
ReadOnlyDict = Annotated[
    Dict[_K, _V],
    AfterValidator(lambda value: MappingProxyType(value)),
    WrapSerializer(lambda value, handler: handler(dict(value))),
]


# ============================================================================
# GEOMETRY
# ============================================================================

class GeometryType(str, Enum):
    """Geometry types a render feature can carry."""
    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    UNKNOWN = "Unknown"

    @classmethod
    def coerce(cls, value: Any) -> "GeometryType":
        """Map a geometry name (or enum) to a member; anything unrecognised is UNKNOWN."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def bucket(self) -> "GeometryBucket":
        return _GEOMETRY_BUCKETS.get(self, GeometryBucket.OTHER)


class GeometryBucket(str, Enum):
    """Geometry families used for layer matching and fallback styles."""
    POLYGON = "polygon"
    LINE = "line"
    POINT = "point"
    OTHER = "other"


_GEOMETRY_BUCKETS = {
    GeometryType.POLYGON: GeometryBucket.POLYGON,
    GeometryType.MULTI_POLYGON: GeometryBucket.POLYGON,
    GeometryType.LINE_STRING: GeometryBucket.LINE,
    GeometryType.MULTI_LINE_STRING: GeometryBucket.LINE,
    GeometryType.POINT: GeometryBucket.POINT,
    GeometryType.MULTI_POINT: GeometryBucket.POINT,
}


# ============================================================================
# STYLE DOCUMENT MODELS (input)
# ============================================================================

class SourceDef(BaseModel):
    """Style document data source. Only the common keys are typed."""
    model_config = ConfigDict(frozen=True, extra="allow")

    type: Optional[str] = None
    url: Optional[str] = None
    tiles: Optional[Tuple[str, ...]] = None
    minzoom: Optional[float] = None
    maxzoom: Optional[float] = None
    attribution: Optional[str] = None


class BaseLayer(BaseModel):
    """
    Fields shared by every style layer.

    paint/layout default to empty mappings; a null or non-object value is
    treated as empty rather than rejected.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    type: str
    source: Optional[str] = None
    source_layer: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("source-layer", "sourceLayer", "source_layer"),
        serialization_alias="source-layer"
    )
    minzoom: Optional[float] = None
    maxzoom: Optional[float] = None
    filter: Optional[Any] = None
    layout: ReadOnlyDict[str, Any] = Field(default_factory=dict, validate_default=True)
    paint: ReadOnlyDict[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("layout", "paint", mode="before")
    @classmethod
    def _empty_when_not_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, Mapping) else {}


class FillLayer(BaseLayer):
    type: Literal["fill"] = "fill"


class LineLayer(BaseLayer):
    type: Literal["line"] = "line"


class SymbolLayer(BaseLayer):
    type: Literal["symbol"] = "symbol"


class CircleLayer(BaseLayer):
    type: Literal["circle"] = "circle"


class BackgroundLayer(BaseLayer):
    type: Literal["background"] = "background"


class UnsupportedLayer(BaseLayer):
    """Any layer type the compiler does not build a descriptor for (raster, heatmap, ...)."""
    pass


SUPPORTED_LAYER_TYPES = frozenset({"fill", "line", "symbol", "circle", "background"})


def _layer_tag(value: Any) -> str:
    layer_type = value.get("type") if isinstance(value, Mapping) else getattr(value, "type", None)
    if isinstance(layer_type, str) and layer_type in SUPPORTED_LAYER_TYPES:
        return layer_type
    return "unsupported"


LayerDef = Annotated[
    Union[
        Annotated[FillLayer, Tag("fill")],
        Annotated[LineLayer, Tag("line")],
        Annotated[SymbolLayer, Tag("symbol")],
        Annotated[CircleLayer, Tag("circle")],
        Annotated[BackgroundLayer, Tag("background")],
        Annotated[UnsupportedLayer, Tag("unsupported")],
    ],
    Discriminator(_layer_tag),
]


class StyleDocument(BaseModel):
    """
    Style document (Mapbox GL style format).

    Unknown top-level fields (metadata, center, zoom, ...) are ignored.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    version: int = 8
    name: Optional[str] = None
    sources: Dict[str, SourceDef] = Field(default_factory=dict)
    layers: Tuple[LayerDef, ...] = ()
    sprite: Optional[str] = None
    glyphs: Optional[str] = None


# ============================================================================
# RENDER FEATURE (input, one per drawn feature)
# ============================================================================

class RenderFeature(BaseModel):
    """
    A feature being drawn: geometry type plus property bag.

    properties["layer"] or properties["source-layer"] names the vector tile
    layer the feature was decoded from.
    """
    model_config = ConfigDict(frozen=True)

    geometry_type: GeometryType = GeometryType.UNKNOWN
    properties: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("geometry_type", mode="before")
    @classmethod
    def _coerce_geometry(cls, value: Any) -> GeometryType:
        return GeometryType.coerce(value)

    @field_validator("properties", mode="before")
    @classmethod
    def _empty_properties(cls, value: Any) -> Any:
        return value if isinstance(value, Mapping) else {}

    @property
    def source_layer_name(self) -> str:
        """First non-empty of properties.layer / properties["source-layer"], else ''."""
        for key in ("layer", "source-layer"):
            value = self.properties.get(key)
            if isinstance(value, str) and value:
                return value
        return ""

    @classmethod
    def from_geojson(cls, feature: Mapping[str, Any]) -> "RenderFeature":
        """
        Build from a GeoJSON feature, or a flat {"geometry_type", "properties"} mapping.

        A missing geometry gives an UNKNOWN feature.
        """
        if "geometry_type" in feature:
            return cls(
                geometry_type=feature.get("geometry_type"),
                properties=feature.get("properties") or {}
            )
        geometry = feature.get("geometry")
        geometry_type = geometry.get("type") if isinstance(geometry, Mapping) else None
        return cls(geometry_type=geometry_type, properties=feature.get("properties") or {})


# ============================================================================
# COMPILED DESCRIPTORS (output)
# ============================================================================

class StyleFill(BaseModel):
    """Fill descriptor."""
    model_config = ConfigDict(frozen=True)

    color: str


class StyleStroke(BaseModel):
    """Stroke descriptor."""
    model_config = ConfigDict(frozen=True)

    color: str
    width: float = 1
    line_cap: str = "round"
    line_join: str = "round"
    line_dash: Optional[Tuple[float, ...]] = None


class StyleCircle(BaseModel):
    """Circle marker for point geometries."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["circle"] = "circle"
    radius: float
    fill: Optional[StyleFill] = None
    stroke: Optional[StyleStroke] = None


class StyleIcon(BaseModel):
    """Sprite icon reference; the sprite itself is resolved by the renderer."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["icon"] = "icon"
    src: str
    scale: float = 1


class StyleText(BaseModel):
    """Text label descriptor."""
    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    font: str
    fill: StyleFill
    stroke: Optional[StyleStroke] = None
    offset_x: float = 0
    offset_y: float = 0
    text_align: str = "center"


class Symbolizer(BaseModel):
    """One renderer style object; any combination of fill, stroke, image and text."""
    model_config = ConfigDict(frozen=True)

    fill: Optional[StyleFill] = None
    stroke: Optional[StyleStroke] = None
    image: Optional[Union[StyleCircle, StyleIcon]] = None
    text: Optional[StyleText] = None


class CompiledStyle(BaseModel):
    """
    Descriptor built for exactly one style layer.

    Fallback styles use the same shape with layer_id None.
    """
    model_config = ConfigDict(frozen=True)

    layer_id: Optional[str] = None
    layer_type: Optional[str] = None
    symbolizers: Tuple[Symbolizer, ...] = ()

    @property
    def is_fallback(self) -> bool:
        return self.layer_id is None


ResolvedStyle = CompiledStyle


# ============================================================================
# CACHE + INDEX
# ============================================================================

class StyleIndex(BaseModel):
    """
    First layer id per source-layer name and per geometry bucket.

    Built from every layer in the document, compiled or not, so the first
    candidate in document order is preserved.
    """
    model_config = ConfigDict(frozen=True)

    by_source_layer: ReadOnlyDict[str, str] = Field(default_factory=dict, validate_default=True)
    by_bucket: ReadOnlyDict[GeometryBucket, str] = Field(default_factory=dict, validate_default=True)

    @classmethod
    def from_document(cls, document: StyleDocument) -> "StyleIndex":
        by_source_layer: Dict[str, str] = {}
        by_bucket: Dict[GeometryBucket, str] = {}
        for layer in document.layers:
            if layer.source_layer and layer.source_layer not in by_source_layer:
                by_source_layer[layer.source_layer] = layer.id
            bucket = LAYER_TYPE_BUCKETS.get(layer.type)
            if bucket is not None and bucket not in by_bucket:
                by_bucket[bucket] = layer.id
        return cls(by_source_layer=by_source_layer, by_bucket=by_bucket)


# Layer types eligible for geometry-based matching
LAYER_TYPE_BUCKETS = {
    "fill": GeometryBucket.POLYGON,
    "line": GeometryBucket.LINE,
    "circle": GeometryBucket.POINT,
    "symbol": GeometryBucket.POINT,
}


class StyleCache(BaseModel):
    """
    Compiled styles keyed by layer id, plus the matching index.

    Read-only mapping interface. Duplicate layer ids hold the last layer's
    descriptor. The index must be built from the same document as the
    entries, so it has no default.
    """
    model_config = ConfigDict(frozen=True)

    entries: ReadOnlyDict[str, CompiledStyle] = Field(default_factory=dict, validate_default=True)
    index: StyleIndex

    def get(self, layer_id: str) -> Optional[CompiledStyle]:
        return self.entries.get(layer_id)

    def __contains__(self, layer_id: object) -> bool:
        return layer_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe dump of the entries, for inspection and pre-warming."""
        return {
            layer_id: style.model_dump(mode="json", exclude_none=True)
            for layer_id, style in self.entries.items()
        }
