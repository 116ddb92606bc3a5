"""Schema inference: walk parsed JSON and collect named records.

Records are accumulated in a RecordTable that is threaded through the
recursion. A nested record is inserted while its parent's properties are
still being built, so children always precede their parent in the table.
"""

import logging
from typing import Any, Optional

from json2ts.config.loader import ConversionConfig
from json2ts.core.naming import nested_type_name, singularize
from json2ts.models.record import GeneratedRecord, Property, RecordTable
from json2ts.models.types import TypeDescriptor, TypeKind

logger = logging.getLogger(__name__)

ROOT_TYPE_NAME = "Root"


def infer(
    value: Any,
    config: ConversionConfig,
    type_name: str = ROOT_TYPE_NAME,
    table: Optional[RecordTable] = None,
) -> RecordTable:
    """Infer records for an object value and add them to the table.

    Non-object values (arrays, primitives, None) leave the table unchanged.

    Args:
        value: Parsed JSON value
        config: Conversion options
        type_name: Record name before the prefix is applied
        table: Table to populate; a new one is created when omitted

    Returns:
        The populated table
    """
    if table is None:
        table = {}

    if not isinstance(value, dict):
        return table

    record_name = config.prefix + type_name

    properties = []
    for key, item in value.items():
        properties.append(Property(
            name=key,
            type=determine_type(item, key, config, table),
            is_optional=item is None and not config.union_null,
        ))

    record = GeneratedRecord(name=record_name, properties=properties)

    previous = table.get(record_name)
    if previous is not None and previous != record:
        logger.warning(
            f"Record name collision: '{record_name}' redefined with a different shape, "
            f"keeping the later definition"
        )

    table[record_name] = record
    logger.debug(f"Generated record {record_name} ({len(properties)} properties)")

    return table


def determine_type(
    value: Any,
    key: str,
    config: ConversionConfig,
    table: RecordTable,
) -> TypeDescriptor:
    """Determine the type of a single value owned by `key`.

    Nested objects are inferred into the table as a side effect.
    """
    if value is None:
        return _null_type(config)

    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return TypeDescriptor.primitive(TypeKind.BOOLEAN)
    if isinstance(value, (int, float)):
        return TypeDescriptor.primitive(TypeKind.NUMBER)
    if isinstance(value, str):
        return TypeDescriptor.primitive(TypeKind.STRING)

    if isinstance(value, list):
        if not value:
            return TypeDescriptor.array_of(TypeDescriptor.unknown())
        return TypeDescriptor.array_of(
            determine_array_item_type(value, key, config, table)
        )

    if isinstance(value, dict):
        nested_name = nested_type_name(key)
        infer(value, config, nested_name, table)
        return TypeDescriptor.record(config.prefix + nested_name)

    return TypeDescriptor.unknown()


def determine_array_item_type(
    items: list[Any],
    key: str,
    config: ConversionConfig,
    table: RecordTable,
) -> TypeDescriptor:
    """Determine the common element type of an array owned by `key`.

    Objects are merged into a single record named after the singular key.
    Nested arrays are flattened one level and typed recursively. Mixed
    element types resolve to unknown.
    """
    if items and all(_is_object_like(item) for item in items):
        non_null = [item for item in items if item is not None]

        if not non_null:
            return TypeDescriptor.unknown()

        if all(isinstance(item, dict) for item in non_null):
            merged = {}
            for obj in non_null:
                merged.update(obj)

            item_name = nested_type_name(singularize(key))
            infer(merged, config, item_name, table)
            return TypeDescriptor.record(config.prefix + item_name)

        if all(isinstance(item, list) for item in non_null):
            flattened = [element for nested in non_null for element in nested]
            return TypeDescriptor.array_of(
                determine_array_item_type(flattened, singularize(key), config, table)
            )

    categories = {_categorize(item) for item in items}

    if len(categories) == 1:
        category = next(iter(categories))
        if category in ("string", "number", "boolean"):
            return TypeDescriptor.primitive(TypeKind(category))
        if category == "null":
            return _null_type(config)

    return TypeDescriptor.unknown()


def _null_type(config: ConversionConfig) -> TypeDescriptor:
    if config.union_null:
        return TypeDescriptor.null()
    return TypeDescriptor.unknown()


def _is_object_like(value: Any) -> bool:
    # null, arrays and objects share one category before they are told apart
    return value is None or isinstance(value, (dict, list))


def _categorize(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "unknown"
