"""
Style Compiler.

Translates a style document into renderer-native descriptors:
- fill        -> fill (+ optional 1px outline)
- line        -> stroke (width, cap, join, optional dash)
- symbol      -> text label, sprite icon, or the default point marker
- circle      -> circle marker (+ optional stroke)
- background  -> full-canvas fill

Other layer types (raster, heatmap, hillshade, fill-extrusion, ...) are
logged and left out of the cache.

Only literal paint/layout values are interpreted. Expressions and other
non-literal values take the property's default.

Usage:
    compiler = StyleCompiler()
    cache = compiler.compile(style_document)
    cache.get("water")

Created: 19 OCT 2026
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from config import StyleConfig, StyleDefaults, get_config
from exceptions import ContractViolationError, StyleDocumentError
from util_logger import ComponentType, LoggerFactory
from .fallback import default_point_marker
from .models import (
    BackgroundLayer,
    CircleLayer,
    CompiledStyle,
    FillLayer,
    LayerDef,
    LineLayer,
    StyleCache,
    StyleCircle,
    StyleDocument,
    StyleFill,
    StyleIcon,
    StyleIndex,
    StyleStroke,
    StyleText,
    Symbolizer,
    SymbolLayer,
    UnsupportedLayer,
)
from .parsers import (
    literal_number,
    literal_number_array,
    literal_pair,
    literal_string,
    parse_color,
    parse_font,
)

logger = LoggerFactory.create_logger(ComponentType.COMPILER, "StyleCompiler")


def parse_style_document(raw: Union[StyleDocument, Mapping[str, Any]]) -> StyleDocument:
    """
    Validate a raw style mapping into a StyleDocument.

    Args:
        raw: Parsed style JSON (or an existing StyleDocument)

    Returns:
        StyleDocument

    Raises:
        StyleDocumentError: If the mapping is structurally invalid or too deeply nested
        ContractViolationError: If raw is neither a mapping nor a StyleDocument
    """
    if isinstance(raw, StyleDocument):
        return raw
    if not isinstance(raw, Mapping):
        raise ContractViolationError(
            f"Style document must be a mapping or StyleDocument, got {type(raw).__name__}"
        )
    try:
        return StyleDocument.model_validate(dict(raw))
    except ValidationError as e:
        raise StyleDocumentError(
            f"Invalid style document: {e.error_count()} validation error(s)",
            details=str(e)
        ) from e
    except RecursionError as e:
        raise StyleDocumentError("Style document is nested too deeply to validate") from e


class StyleCompiler:
    """
    Compiles style documents into a StyleCache.

    Stateless between calls: each compile() builds and returns a new cache,
    so the same document always compiles to a value-equal cache.
    """

    def __init__(self, config: Optional[StyleConfig] = None):
        """
        Initialize compiler.

        Args:
            config: Style configuration (loads from environment if not provided)
        """
        self.config = config or get_config()

    def compile(self, document: Union[StyleDocument, Mapping[str, Any]]) -> StyleCache:
        """
        Compile every supported layer, in document order.

        Args:
            document: StyleDocument or raw style mapping

        Returns:
            StyleCache keyed by layer id (later duplicates overwrite earlier ones)

        Raises:
            StyleDocumentError: If a raw mapping fails validation
            ContractViolationError: If document is not a mapping or StyleDocument
        """
        document = parse_style_document(document)

        entries: Dict[str, CompiledStyle] = {}
        skipped = 0
        for layer in document.layers:
            compiled = self.compile_layer(layer)
            if compiled is None:
                skipped += 1
                continue
            if layer.id in entries:
                logger.debug(f"Layer id '{layer.id}' defined more than once; keeping the later layer")
            entries[layer.id] = compiled

        logger.info(
            f"Compiled {len(entries)} styles from {len(document.layers)} layers "
            f"({skipped} skipped)",
            extra={'custom_dimensions': {
                'style_name': document.name,
                'layer_count': len(document.layers),
                'compiled_count': len(entries),
                'skipped_count': skipped
            }}
        )
        return StyleCache(entries=entries, index=StyleIndex.from_document(document))

    def compile_layer(self, layer: LayerDef) -> Optional[CompiledStyle]:
        """
        Compile one layer; None for types without a descriptor.

        A layer whose values the descriptor models reject is logged and left
        out, so its features take the fallback style.
        """
        try:
            return self._compile_layer(layer)
        except ValidationError as e:
            logger.warning(
                f"Layer '{layer.id}' has values no descriptor accepts; no style compiled",
                extra={'custom_dimensions': {
                    'layer_id': layer.id,
                    'layer_type': layer.type,
                    'error_count': e.error_count()
                }}
            )
            return None

    def _compile_layer(self, layer: LayerDef) -> Optional[CompiledStyle]:
        if isinstance(layer, FillLayer):
            symbolizer = self._fill(layer)
        elif isinstance(layer, LineLayer):
            symbolizer = self._line(layer)
        elif isinstance(layer, SymbolLayer):
            symbolizer = self._symbol(layer)
        elif isinstance(layer, CircleLayer):
            symbolizer = self._circle(layer)
        elif isinstance(layer, BackgroundLayer):
            symbolizer = self._background(layer)
        elif isinstance(layer, UnsupportedLayer):
            if self.config.log_unsupported_layers:
                logger.warning(
                    f"Unsupported layer type '{layer.type}' for layer '{layer.id}'; no style compiled",
                    extra={'custom_dimensions': {'layer_id': layer.id, 'layer_type': layer.type}}
                )
            return None
        else:
            raise ContractViolationError(f"Unknown layer model: {type(layer).__name__}")

        return CompiledStyle(layer_id=layer.id, layer_type=layer.type, symbolizers=(symbolizer,))

    # ========================================================================
    # PER-TYPE COMPILATION
    # ========================================================================

    def _fill(self, layer: FillLayer) -> Symbolizer:
        paint = layer.paint
        opacity = _opacity(paint, "fill-opacity")
        fill = StyleFill(color=parse_color(paint.get("fill-color", StyleDefaults.COLOR), opacity))

        stroke = None
        if paint.get("fill-outline-color") is not None:
            stroke = StyleStroke(
                color=parse_color(paint["fill-outline-color"], opacity),
                width=StyleDefaults.FILL_OUTLINE_WIDTH
            )
        return Symbolizer(fill=fill, stroke=stroke)

    def _line(self, layer: LineLayer) -> Symbolizer:
        paint, layout = layer.paint, layer.layout
        stroke = StyleStroke(
            color=parse_color(paint.get("line-color", StyleDefaults.COLOR), _opacity(paint, "line-opacity")),
            width=literal_number(paint.get("line-width"), StyleDefaults.LINE_WIDTH),
            line_cap=literal_string(layout.get("line-cap"), StyleDefaults.LINE_CAP),
            line_join=literal_string(layout.get("line-join"), StyleDefaults.LINE_JOIN),
            line_dash=literal_number_array(paint.get("line-dasharray"))
        )
        return Symbolizer(stroke=stroke)

    def _symbol(self, layer: SymbolLayer) -> Symbolizer:
        layout = layer.layout
        if layout.get("text-field") is not None:
            return Symbolizer(text=self._text(layer))

        icon_image = literal_string(layout.get("icon-image"), None)
        if icon_image:
            return Symbolizer(image=StyleIcon(
                src=icon_image,
                scale=literal_number(layout.get("icon-size"), StyleDefaults.ICON_SIZE)
            ))

        return default_point_marker()

    def _text(self, layer: SymbolLayer) -> StyleText:
        paint, layout = layer.paint, layer.layout
        opacity = _opacity(paint, "text-opacity")

        halo = None
        if paint.get("text-halo-color") is not None:
            halo = StyleStroke(
                color=parse_color(paint["text-halo-color"], opacity),
                width=literal_number(paint.get("text-halo-width"), StyleDefaults.TEXT_HALO_WIDTH)
            )

        offset = literal_pair(layout.get("text-offset")) or (0, 0)
        scale = self.config.text_offset_scale

        return StyleText(
            text=literal_string(layout.get("text-field"), None),
            font=parse_font(
                layout.get("text-font") or (),
                literal_number(layout.get("text-size"), self.config.default_text_size)
            ),
            fill=StyleFill(color=parse_color(paint.get("text-color", StyleDefaults.COLOR), opacity)),
            stroke=halo,
            offset_x=offset[0] * scale,
            offset_y=offset[1] * scale,
            text_align=literal_string(layout.get("text-anchor"), StyleDefaults.TEXT_ANCHOR)
        )

    def _circle(self, layer: CircleLayer) -> Symbolizer:
        paint = layer.paint

        stroke = None
        if paint.get("circle-stroke-color") is not None:
            stroke = StyleStroke(
                color=parse_color(paint["circle-stroke-color"], _opacity(paint, "circle-stroke-opacity")),
                width=literal_number(paint.get("circle-stroke-width"), StyleDefaults.CIRCLE_STROKE_WIDTH)
            )

        return Symbolizer(image=StyleCircle(
            radius=literal_number(paint.get("circle-radius"), StyleDefaults.CIRCLE_RADIUS),
            fill=StyleFill(color=parse_color(
                paint.get("circle-color", StyleDefaults.COLOR), _opacity(paint, "circle-opacity")
            )),
            stroke=stroke
        ))

    def _background(self, layer: BackgroundLayer) -> Symbolizer:
        paint = layer.paint
        return Symbolizer(fill=StyleFill(color=parse_color(
            paint.get("background-color", StyleDefaults.BACKGROUND_COLOR),
            _opacity(paint, "background-opacity")
        )))


def _opacity(paint: Mapping[str, Any], key: str) -> float:
    return literal_number(paint.get(key), StyleDefaults.OPACITY)


def compile_style(
    document: Union[StyleDocument, Mapping[str, Any]],
    config: Optional[StyleConfig] = None
) -> StyleCache:
    """Compile a style document with a fresh StyleCompiler."""
    return StyleCompiler(config).compile(document)
