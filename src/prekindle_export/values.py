"""Shape-aware access into parsed JSON records.

A parsed value is classified once into one of four variants so that path
descent never relies on "whatever indexing happens to work":

- ``MapValue``       JSON object
- ``SequenceValue``  JSON array
- ``ScalarValue``    string, number or boolean
- ``ABSENT``         JSON null, a missing key or an out-of-range index
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Union

_INDEX_RE = re.compile(r"[0-9]+")


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


@dataclass(frozen=True)
class MapValue:
    members: Dict[str, Any]


@dataclass(frozen=True)
class SequenceValue:
    items: List[Any]


@dataclass(frozen=True)
class ScalarValue:
    value: Union[str, int, float, bool]


StructuredValue = Union[MapValue, SequenceValue, ScalarValue, _Absent]


def classify(obj: Any) -> StructuredValue:
    """Wrap a value produced by ``json.loads`` in its variant."""
    if obj is None or obj is ABSENT:
        return ABSENT
    if isinstance(obj, dict):
        return MapValue(obj)
    if isinstance(obj, (list, tuple)):
        return SequenceValue(list(obj))
    return ScalarValue(obj)


def is_index(segment: str) -> bool:
    """True for an unsigned integer segment such as ``"0"`` or ``"12"``."""
    return bool(_INDEX_RE.fullmatch(segment))


def descend(value: StructuredValue, segment: str) -> StructuredValue:
    """Take one path step from ``value``.

    Index segments only apply to sequences and key segments only to maps;
    every other combination yields ``ABSENT``.
    """
    if value is ABSENT:
        return ABSENT

    if is_index(segment):
        if isinstance(value, SequenceValue):
            pos = int(segment)
            if pos < len(value.items):
                return classify(value.items[pos])
        return ABSENT

    if isinstance(value, MapValue):
        if segment in value.members:
            return classify(value.members[segment])
    return ABSENT


def unwrap(value: StructuredValue) -> Any:
    """Return the plain Python value behind a variant (``None`` for absent)."""
    if isinstance(value, MapValue):
        return value.members
    if isinstance(value, SequenceValue):
        return value.items
    if isinstance(value, ScalarValue):
        return value.value
    return None
