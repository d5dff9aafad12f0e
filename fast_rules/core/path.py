from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from fast_rules import config
from fast_rules.contracts.result import Path, Segment

WILDCARD = config.WILDCARD


def key_segments(spec: Any) -> List[Any]:
    """
    Flatten one raw key spec into its path segments.

    Supported shapes:
      - "address.city" (split on the configured separator)
      - {"address": "city"}, {"address": {"geo": "lat"}}
      - ["address", "city"] or ("address", "city")
      - integers, kept as-is
    """
    if isinstance(spec, str):
        return spec.split(config.PATH_SEPARATOR)
    if isinstance(spec, Mapping):
        segments: List[Any] = []
        for key, value in spec.items():
            segments.extend(key_segments(key))
            segments.extend(key_segments(value))
        return segments
    if isinstance(spec, (list, tuple)):
        return [segment for item in spec for segment in key_segments(item)]
    return [spec]


def split_wildcard(segment: Any) -> List[Any]:
    """`"nums[]"` -> `["nums", "[]"]`; any other segment is returned alone."""
    if isinstance(segment, str) and segment != WILDCARD and segment.endswith(WILDCARD):
        return [segment[: -len(WILDCARD)], WILDCARD]
    return [segment]


def flatten_keys(keys: Sequence[Any]) -> List[Segment]:
    """Flatten a rule's key specs into one ordered list of atomic segments, wildcards included."""
    segments: List[Segment] = []
    for spec in keys:
        for segment in key_segments(spec):
            for part in split_wildcard(segment):
                if part == "" or part is None:
                    continue
                segments.append(part)
    return segments


def to_path(spec: Any) -> Path:
    """Convert a key spec into a path tuple. Wildcard markers are kept as-is."""
    return tuple(flatten_keys([spec]))


def is_wildcard(segment: Any) -> bool:
    return segment == WILDCARD


def is_prefix(prefix: Path, path: Path) -> bool:
    return len(prefix) <= len(path) and tuple(path[: len(prefix)]) == tuple(prefix)
