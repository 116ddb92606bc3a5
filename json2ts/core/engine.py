import json
import logging
from pathlib import Path
from typing import Any, Optional

from json2ts.config.loader import ConversionConfig
from json2ts.core.emitter import emit
from json2ts.core.exceptions import ConversionError, InputFileNotFoundError
from json2ts.core.inference import infer
from json2ts.models.record import RecordTable

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} (not valid JSON)")


def parse_json(json_text: str) -> Any:
    """Parse strict JSON text.

    Raises:
        ConversionError: If the text is not valid JSON
    """
    try:
        return json.loads(json_text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise ConversionError(f"Failed to convert JSON: {e}", original_error=e) from e


def build_table(json_text: str, config: Optional[ConversionConfig] = None) -> RecordTable:
    """Parse JSON text and infer its record table."""
    config = config or ConversionConfig()
    data = parse_json(json_text)

    if not isinstance(data, dict):
        logger.warning(
            f"Top-level JSON value is {type(data).__name__}, not an object; no types generated"
        )

    table = infer(data, config)
    logger.info(f"Inferred {len(table)} record(s)")
    return table


def convert(json_text: str, config: Optional[ConversionConfig] = None) -> str:
    """Convert JSON text to TypeScript interfaces or classes.

    Args:
        json_text: JSON document
        config: Conversion options (defaults: interfaces, no prefix, optional nulls)

    Returns:
        TypeScript source, empty when the top-level value is not an object

    Raises:
        ConversionError: If the text is not valid JSON
    """
    config = config or ConversionConfig()
    table = build_table(json_text, config)
    return emit(table, config)


def read_json_file(path: str) -> str:
    """Read a JSON file as UTF-8 text.

    Raises:
        InputFileNotFoundError: If the file does not exist
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise InputFileNotFoundError(
            f"Input file '{path}' does not exist.",
            file_path=path,
        )
    logger.debug(f"Reading {file_path}")
    return file_path.read_text(encoding="utf-8")


def convert_file(path: str, config: Optional[ConversionConfig] = None) -> str:
    """Convert the JSON document stored at `path`."""
    return convert(read_json_file(path), config)
