"""
Randomized style factories - anti-overfitting design.

Every factory call generates randomized non-identity fields
(layer ids, source names, unrelated properties) so tests cannot
rely on specific default values.
"""

import random
import string


LAYER_TYPES = ["fill", "line", "symbol", "circle", "background", "raster", "heatmap", "fill-extrusion"]
GEOMETRY_TYPES = ["Point", "MultiPoint", "LineString", "MultiLineString", "Polygon", "MultiPolygon", "Unknown"]
SOURCE_LAYERS = ["water", "roads", "buildings", "landuse", "pois"]


def _random_suffix(length: int = 6) -> str:
    """Generate random alphanumeric suffix."""
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def make_layer(layer_type: str = "fill", layer_id: str = None, source_layer: str = None,
               paint: dict = None, layout: dict = None, **overrides):
    """
    Build a style layer dict.

    Args:
        layer_type: Layer "type"
        layer_id: Optional fixed id (generates random if None)
        source_layer: Optional "source-layer" binding
        paint: Optional paint properties
        layout: Optional layout properties
        **overrides: Any other layer key

    Returns:
        dict as it appears in a style document's "layers" array
    """
    layer = {
        "id": layer_id or f"{layer_type}-{_random_suffix()}",
        "type": layer_type,
    }
    if layer_type != "background":
        layer["source"] = f"src-{_random_suffix(4)}"
    if source_layer is not None:
        layer["source-layer"] = source_layer
    if paint is not None:
        layer["paint"] = paint
    if layout is not None:
        layer["layout"] = layout
    layer.update(overrides)
    return layer


def make_document(layers=None, **overrides):
    """
    Build a style document dict.

    Returns:
        dict suitable for StyleDocument.model_validate(result)
    """
    source_name = f"src-{_random_suffix(4)}"
    base = {
        "version": 8,
        "name": f"style-{_random_suffix()}",
        "sources": {
            source_name: {"type": "vector", "url": f"https://tiles.example.com/{_random_suffix()}.json"}
        },
        "layers": list(layers or []),
        "metadata": {"generated-by": _random_suffix()},
    }
    base.update(overrides)
    return base


def make_random_document(layer_count: int = None):
    """Build a document of random layers, some bound to source-layers, some unsupported."""
    count = layer_count if layer_count is not None else random.randint(1, 15)
    layers = []
    for _ in range(count):
        source_layer = random.choice(SOURCE_LAYERS + [None, None])
        # Small id pool so duplicate ids show up
        layers.append(make_layer(
            random.choice(LAYER_TYPES),
            layer_id=f"layer-{random.randint(0, count)}",
            source_layer=source_layer,
            paint={"fill-color": "#%06x" % random.randint(0, 0xFFFFFF)}
        ))
    return make_document(layers)


def make_feature(geometry_type: str = "Polygon", source_layer: str = None,
                 key: str = "layer", **properties):
    """
    Build a GeoJSON-like feature mapping.

    Args:
        geometry_type: GeoJSON geometry type
        source_layer: Optional source-layer name stored under `key`
        key: "layer" or "source-layer"
        **properties: Extra properties (random name added when omitted)
    """
    props = {"name": f"feature-{_random_suffix()}"}
    props.update(properties)
    if source_layer is not None:
        props[key] = source_layer
    return {
        "type": "Feature",
        "geometry": {"type": geometry_type, "coordinates": []},
        "properties": props,
    }
