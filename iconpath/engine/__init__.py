"""Per-file conversion engine."""

from iconpath.engine.config import ConversionTables, ConverterConfig
from iconpath.engine.context import ConversionContext
from iconpath.engine.pipeline import FileConversionError, IconConverter

__all__ = [
    "ConversionTables",
    "ConverterConfig",
    "ConversionContext",
    "FileConversionError",
    "IconConverter",
]
