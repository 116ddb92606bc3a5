"""json2ts: infer TypeScript types from JSON documents."""

from json2ts.config.loader import ConversionConfig
from json2ts.core.emitter import emit
from json2ts.core.engine import convert, convert_file
from json2ts.core.exceptions import ConversionError
from json2ts.core.inference import infer

__all__ = [
    "ConversionConfig",
    "ConversionError",
    "convert",
    "convert_file",
    "emit",
    "infer",
]
