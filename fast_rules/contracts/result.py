from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Tuple, Union

Segment = Union[str, int]
Path = Tuple[Segment, ...]


class Result(ABC):
    """
    Contract for the outcome of shape/type validation consumed by the rule engine.

    The engine only reads from a Result; implementations must not expect it to be mutated.
    """

    @property
    @abstractmethod
    def values(self) -> Any:
        """The validated value tree."""
        raise NotImplementedError

    @property
    @abstractmethod
    def context(self) -> dict:
        """Mutable scratch dict shared between rules of one validation run; must return the same dict on every access."""
        raise NotImplementedError

    @abstractmethod
    def value_at(self, path: Path) -> Any:
        """Value at `path`, or None when the path does not resolve."""
        raise NotImplementedError

    @abstractmethod
    def has_schema_error(self, path: Path) -> bool:
        """Whether shape validation already failed at `path`."""
        raise NotImplementedError

    def is_array(self, path: Path) -> bool:
        return isinstance(self.value_at(path), (list, tuple))

    def array_length(self, path: Path) -> int:
        return len(self.value_at(path))

    def __getitem__(self, path: Path) -> Any:
        return self.value_at(tuple(path))


class MappingResult(Result):
    """Minimal Result over a plain value tree with an explicit set of failed paths."""

    def __init__(self, values: Any, failed: Iterable[Path] | None = None, context: dict | None = None) -> None:
        self._values = values
        self._failed = {tuple(path) for path in (failed or ())}
        self._context = context if context is not None else {}

    @property
    def values(self) -> Any:
        return self._values

    @property
    def context(self) -> dict:
        return self._context

    def value_at(self, path: Path) -> Any:
        current = self._values
        for segment in path:
            if isinstance(current, Mapping):
                current = current.get(segment)
            elif isinstance(current, (list, tuple)) and isinstance(segment, int) and -len(current) <= segment < len(current):
                current = current[segment]
            else:
                return None
        return current

    def has_schema_error(self, path: Path) -> bool:
        return tuple(path) in self._failed
