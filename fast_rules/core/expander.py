from __future__ import annotations

from typing import Any, List, Sequence

from fast_rules.contracts.result import Path, Result
from fast_rules.core.path import WILDCARD, flatten_keys, is_wildcard


def expand_paths(keys: Sequence[Any], result: Result, each_mode: bool = False) -> List[Path]:
    """
    Resolve a rule's key specs into the concrete paths it applies to.

    Every wildcard segment fans out over the array actually found at that position
    in `result`; a wildcard over anything that is not an array drops the path.
    With `each_mode` a wildcard is appended after the keys, so the rule runs once
    per element of the array found there.

    Paths come back depth-first, indices ascending:

        expand_paths(["groups[]", "members[]"], result)
        -> [("groups", 0, "members", 0), ("groups", 0, "members", 1), ("groups", 1, "members", 0)]
    """
    if each_mode:
        keys = [*keys, WILDCARD]

    paths: List[Path] = [()]
    for segment in flatten_keys(keys):
        if is_wildcard(segment):
            paths = [
                (*path, index)
                for path in paths
                if result.is_array(path)
                for index in range(result.array_length(path))
            ]
        else:
            paths = [(*path, segment) for path in paths]
    return paths
