"""Render a RecordTable as TypeScript source."""

from json2ts.config.loader import ConversionConfig
from json2ts.models.record import GeneratedRecord, RecordTable

INDENT = "  "


def emit(table: RecordTable, config: ConversionConfig) -> str:
    """Render every record in table order, separated by blank lines."""
    blocks = [_render_record(record, config) for record in table.values()]
    return "\n\n".join(blocks).strip()


def _render_record(record: GeneratedRecord, config: ConversionConfig) -> str:
    keyword = "class" if config.as_class else "interface"
    lines = [f"{keyword} {record.name} {{"]

    for prop in record.properties:
        optional = "?" if prop.is_optional else ""
        lines.append(f"{INDENT}{prop.name}{optional}: {prop.type.render()};")

    if config.as_class:
        lines.append("")
        lines.append(f"{INDENT}constructor(data: any) {{")
        for prop in record.properties:
            lines.append(f"{INDENT * 2}this.{prop.name} = data.{prop.name};")
        lines.append(f"{INDENT}}}")

    lines.append("}")
    return "\n".join(lines)
