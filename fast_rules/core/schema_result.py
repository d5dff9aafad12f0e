from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from fast_rules.contracts.result import Path, Result
from fast_rules.core.path import is_prefix
from fast_rules.utils.logging import logger


class SchemaResult(Result):
    """
    Result of pydantic shape/type validation, addressable by path.

    `errors` follow pydantic's `ValidationError.errors()` format; only their `loc` is
    used to decide which locations already failed.
    """

    def __init__(self, values: Any, errors: Iterable[dict] = (), context: Optional[dict] = None) -> None:
        self._values = values
        self.errors: List[dict] = list(errors)
        self._error_paths: List[Path] = [tuple(error.get("loc", ())) for error in self.errors]
        self._context = context if context is not None else {}

    @classmethod
    def from_model(cls, model: Type[BaseModel], data: Any, *, context: Optional[dict] = None) -> "SchemaResult":
        """
        Validate `data` with `model`.

        On success the values are the model dump; on failure they are the raw input so
        rules can still inspect the parts that did validate.
        """
        try:
            instance = model.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            logger.debug(f"[RULES] {model.__name__} shape validation failed with {len(errors)} error(s)")
            return cls(data, errors, context=context)
        return cls(instance.model_dump(), context=context)

    @property
    def values(self) -> Any:
        return self._values

    @property
    def context(self) -> dict:
        return self._context

    @property
    def success(self) -> bool:
        return not self.errors

    def value_at(self, path: Path) -> Any:
        current = self._values
        for segment in path:
            if isinstance(current, Mapping):
                current = current.get(segment)
            elif isinstance(current, (list, tuple)) and isinstance(segment, int):
                if not -len(current) <= segment < len(current):
                    return None
                current = current[segment]
            elif isinstance(current, BaseModel) and isinstance(segment, str):
                current = getattr(current, segment, None)
            else:
                return None
        return current

    def has_schema_error(self, path: Path) -> bool:
        """
        True when an error was recorded at `path`, inside it, or on one of its parents.

        The root path only matches errors recorded at the root itself.
        """
        path = tuple(path)
        if not path:
            return any(not error_path for error_path in self._error_paths)
        return any(
            is_prefix(error_path, path) or is_prefix(path, error_path)
            for error_path in self._error_paths
        )
