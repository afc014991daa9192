"""
Unified Logger System.

JSON-only structured logging for the style compiler and resolver.

Every logger is named "{component}.{Name}" and tags each record with its
component identity under custom_dimensions, merged with whatever the call
site passes in extra={'custom_dimensions': {...}}.

Exports:
    ComponentType: Enum for component types
    LogLevel: Enum for log levels
    ComponentConfig: Per-component logging settings
    JSONFormatter: One JSON object per log record
    LoggerFactory: Factory for creating loggers

Dependencies:
    Standard library only (logging, enum, dataclasses, json)
"""

from enum import Enum
from typing import Optional
from datetime import datetime, timezone
from dataclasses import dataclass
import logging
import sys
import os
import json


# ============================================================================
# COMPONENT TYPES
# ============================================================================

class ComponentType(Enum):
    """Stages of the styling pipeline that log."""
    COMPILER = "compiler"    # Style document -> compiled cache
    RESOLVER = "resolver"    # Per-feature style resolution
    PROVIDER = "provider"    # Built-in fallback styles
    SERVICE = "service"      # Layer-level orchestration
    CONFIG = "config"        # Environment configuration


class LogLevel(Enum):
    """Standard Python log levels as enum for type safety."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_python_level(self) -> int:
        return getattr(logging, self.value)

    @classmethod
    def from_string(cls, level: str) -> 'LogLevel':
        """Create from string, case-insensitive."""
        return cls[level.upper()]


@dataclass(frozen=True)
class ComponentConfig:
    """Logging settings for one component type."""
    component_type: ComponentType
    log_level: LogLevel = LogLevel.INFO


# ============================================================================
# JSON FORMATTER
# ============================================================================

class JSONFormatter(logging.Formatter):
    """
    One JSON object per record, so log collectors can parse without regexes.

    {"timestamp": ..., "level": "WARNING", "message": ..., "logger": "compiler.StyleCompiler",
     "customDimensions": {"component_type": "compiler", "layer_id": "water", ...}}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        dimensions = getattr(record, 'custom_dimensions', None)
        if dimensions:
            log_obj['customDimensions'] = dimensions

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_obj['exception'] = {
                'type': exc_type.__name__ if exc_type else None,
                'message': str(exc_value) if exc_value else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_obj, default=str)


# ============================================================================
# LOGGER FACTORY
# ============================================================================

def _debug_logging_enabled() -> bool:
    return os.getenv('DEBUG_LOGGING', '').lower() == 'true'


class LoggerFactory:
    """
    Factory for component loggers.

    Example:
        logger = LoggerFactory.create_logger(ComponentType.COMPILER, "StyleCompiler")
        logger.info("Compiled 42 layers", extra={'custom_dimensions': {'style_name': 'bgt'}})
    """

    @classmethod
    def default_config(cls, component_type: ComponentType) -> ComponentConfig:
        """
        Level per component: INFO, or DEBUG when DEBUG_LOGGING=true.

        The resolver runs once per drawn feature, so it stays at WARNING
        unless debugging.
        """
        if _debug_logging_enabled():
            level = LogLevel.DEBUG
        elif component_type is ComponentType.RESOLVER:
            level = LogLevel.WARNING
        else:
            level = LogLevel.INFO
        return ComponentConfig(component_type=component_type, log_level=level)

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        config: Optional[ComponentConfig] = None
    ) -> logging.Logger:
        """
        Create (or reconfigure) the logger for one component.

        Args:
            component_type: Pipeline stage the component belongs to
            name: Component name (e.g., "StyleCompiler")
            config: Level override; default_config() when omitted

        Returns:
            Logger with a single stdout JSON handler
        """
        config = config or cls.default_config(component_type)
        level = config.log_level.to_python_level()

        logger = logging.getLogger(f"{component_type.value}.{name}")
        logger.setLevel(level)
        logger.propagate = True

        json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)]
        if json_handlers:
            for handler in json_handlers:
                handler.setLevel(level)
        else:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(level)
            handler.setFormatter(JSONFormatter())
            logger.addHandler(handler)

        if not getattr(logger, '_component_wrapped', False):
            cls._inject_component(logger, component_type, name)
        return logger

    @staticmethod
    def _inject_component(logger: logging.Logger, component_type: ComponentType, name: str) -> None:
        """Wrap logger._log so every record carries the component identity."""
        original_log = logger._log

        def log_with_component(level, msg, args, exc_info=None, extra=None, stack_info=False, stacklevel=1):
            extra = dict(extra or {})
            extra['custom_dimensions'] = {
                'component_type': component_type.value,
                'component_name': name,
                **extra.get('custom_dimensions', {})
            }
            # +1 for this wrapper frame
            original_log(level, msg, args, exc_info=exc_info, extra=extra,
                         stack_info=stack_info, stacklevel=stacklevel + 1)

        logger._log = log_with_component
        logger._component_wrapped = True
