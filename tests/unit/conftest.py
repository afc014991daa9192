"""
Unit test fixtures - compiler, resolver and sample documents.
"""

import pytest

from tests.factories.style_factories import make_document, make_layer


@pytest.fixture
def compiler(style_config):
    """StyleCompiler with default configuration."""
    from vector_tile_styles.compiler import StyleCompiler
    return StyleCompiler(style_config)


@pytest.fixture
def resolver():
    """FeatureStyleResolver with the built-in fallback provider."""
    from vector_tile_styles.resolver import FeatureStyleResolver
    return FeatureStyleResolver()


@pytest.fixture
def water_document_data():
    """Fill and line layers both bound to the 'water' source-layer, fill first."""
    return make_document([
        make_layer("background", layer_id="background", paint={"background-color": "#f8f4f0"}),
        make_layer("fill", layer_id="water", source_layer="water",
                   paint={"fill-color": "#0000ff", "fill-opacity": 0.5}),
        make_layer("line", layer_id="water-outline", source_layer="water",
                   paint={"line-color": "#000080", "line-width": 2}),
        make_layer("line", layer_id="roads", source_layer="roads",
                   paint={"line-color": "#ffc107", "line-width": 4}),
        make_layer("symbol", layer_id="poi-labels", source_layer="pois",
                   layout={"text-field": "{name}"}),
    ])


@pytest.fixture
def water_document(water_document_data):
    from vector_tile_styles.models import StyleDocument
    return StyleDocument.model_validate(water_document_data)
