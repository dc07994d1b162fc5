"""Project nested event records onto columns and render them as CSV text."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple

from .values import (
    ABSENT,
    ScalarValue,
    StructuredValue,
    classify,
    descend,
    unwrap,
)

PATH_SEP = "/"
CELL_SEP = ","
LINE_SEP = "\n"
QUOTE = '"'


@dataclass(frozen=True)
class FieldPath:
    """A column spec such as ``lineup/0`` split into its segments."""

    spec: str
    segments: Tuple[str, ...]

    @classmethod
    def parse(cls, spec: str) -> "FieldPath":
        return cls(spec=spec, segments=tuple(spec.split(PATH_SEP)))

    def resolve(self, record: Any) -> StructuredValue:
        current = classify(record)
        for segment in self.segments:
            if current is ABSENT:
                break
            current = descend(current, segment)
        return current


def resolve_path(record: Any, spec: str) -> StructuredValue:
    return FieldPath.parse(spec).resolve(record)


def quote_text(text: str) -> str:
    """Double embedded quotes; wrap in quotes when a comma or quote is present."""
    escaped = text.replace(QUOTE, QUOTE * 2)
    if CELL_SEP in escaped or QUOTE in escaped:
        return f"{QUOTE}{escaped}{QUOTE}"
    return escaped


def render_cell(value: StructuredValue) -> str:
    if value is ABSENT:
        return ""

    if isinstance(value, ScalarValue):
        raw = value.value
        if isinstance(raw, str):
            return quote_text(raw)
        # bool before number: True is an int in Python.
        if isinstance(raw, bool):
            return "true" if raw else "false"
        if isinstance(raw, (int, float)):
            return json.dumps(raw)
        return quote_text(str(raw))

    raw = unwrap(value)
    # Compound values are not flattened; their JSON text is quoted like any
    # other text so the line keeps one cell per column.
    return quote_text(json.dumps(raw, ensure_ascii=False, separators=(",", ":")))


def project_row(record: Any, columns: Sequence[FieldPath]) -> List[str]:
    return [render_cell(path.resolve(record)) for path in columns]


def parse_columns(specs: Iterable[str]) -> List[FieldPath]:
    return [FieldPath.parse(spec) for spec in specs]


def render_table(records: Iterable[Any], specs: Sequence[str]) -> str:
    """Render ``records`` as a header line plus one line per record.

    Header cells are the specs verbatim. Lines are joined with ``\\n`` and
    there is no trailing newline.
    """
    columns = parse_columns(specs)
    lines = [CELL_SEP.join(specs)]
    for record in records:
        lines.append(CELL_SEP.join(project_row(record, columns)))
    return LINE_SEP.join(lines)
