"""Bracket-style query string handling.

Freelo expects PHP/qs style parameters: arrays as repeated ``key[]`` pairs and
nested filters as ``key[sub]`` pairs (``date_range[date_from]=2024-01-01``).
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

QueryPairs = List[Tuple[str, str]]

_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")


def encode_query(params: Optional[Mapping[str, Any]]) -> QueryPairs:
    """Flatten a params mapping into ordered (key, value) pairs."""
    pairs: QueryPairs = []
    for key, value in (params or {}).items():
        _encode_value(str(key), value, pairs)
    return pairs


def _encode_value(key: str, value: Any, pairs: QueryPairs) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_value(f"{key}[{sub_key}]", sub_value, pairs)
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            _encode_value(f"{key}[]", item, pairs)
        return
    pairs.append((key, _scalar(value)))


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _split_key(key: str) -> List[str]:
    head, sep, rest = key.partition("[")
    if not sep or not head:
        return [key]
    tail = sep + rest
    segments = _SEGMENT_RE.findall(tail)
    if "".join(f"[{s}]" for s in segments) != tail:
        # Unbalanced brackets are kept as a literal key
        return [key]
    return [head, *segments]


def _is_list_segment(segment: str) -> bool:
    return segment == "" or segment.isdigit()


def _assign(container: Dict[str, Any], path: List[str], value: str) -> None:
    key, rest = path[0], path[1:]

    if not rest:
        if key not in container:
            container[key] = value
        elif isinstance(container[key], list):
            container[key].append(value)
        else:
            container[key] = [container[key], value]
        return

    if len(rest) == 1 and _is_list_segment(rest[0]):
        existing = container.get(key)
        if existing is None:
            container[key] = [value]
        elif isinstance(existing, list):
            existing.append(value)
        else:
            container[key] = [existing, value]
        return

    child = container.get(key)
    if not isinstance(child, dict):
        child = {}
        container[key] = child
    _assign(child, rest, value)


def decode_query(items: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """Rebuild lists and nested mappings from bracketed query pairs."""
    result: Dict[str, Any] = {}
    for key, value in items:
        _assign(result, _split_key(key), value)
    return result


__all__ = ["encode_query", "decode_query", "QueryPairs"]
