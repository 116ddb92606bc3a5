"""Record table analysis for previews."""

from dataclasses import dataclass, field

from json2ts.models.record import RecordTable
from json2ts.models.types import TypeDescriptor, TypeKind


@dataclass
class RecordInfo:
    """Summary of one generated record."""
    name: str
    property_count: int
    optional_count: int
    references: list[str] = field(default_factory=list)


@dataclass
class TableAnalysis:
    """Analysis of an inferred record table."""
    records: list[RecordInfo]

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def total_properties(self) -> int:
        return sum(r.property_count for r in self.records)

    @property
    def optional_properties(self) -> int:
        return sum(r.optional_count for r in self.records)

    def format_summary(self) -> str:
        """Format analysis as human-readable summary."""
        lines = [
            f"  Records: {self.record_count}",
            f"  Properties: {self.total_properties} ({self.optional_properties} optional)",
        ]

        for record in self.records:
            line = f"    {record.name}: {record.property_count} properties"
            if record.references:
                line += f" -> {', '.join(record.references)}"
            lines.append(line)

        return "\n".join(lines)


def _referenced_record(descriptor: TypeDescriptor) -> str | None:
    """Unwrap arrays down to a record reference, if any."""
    while descriptor.kind == TypeKind.ARRAY:
        descriptor = descriptor.item
    if descriptor.kind == TypeKind.RECORD:
        return descriptor.name
    return None


def analyze_table(table: RecordTable) -> TableAnalysis:
    """Summarize records, property counts and record references."""
    records = []
    for record in table.values():
        references: list[str] = []
        for prop in record.properties:
            ref = _referenced_record(prop.type)
            if ref and ref not in references:
                references.append(ref)

        records.append(RecordInfo(
            name=record.name,
            property_count=len(record.properties),
            optional_count=sum(1 for p in record.properties if p.is_optional),
            references=references,
        ))

    return TableAnalysis(records=records)
