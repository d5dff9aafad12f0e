from __future__ import annotations

from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from fast_rules import config
from fast_rules.utils.serialisation import format_loc


class Failure(BaseModel):
    """A single rule failure recorded at a concrete path."""

    model_config = ConfigDict(frozen=True)

    path: Tuple[Union[int, str], ...] = Field(default_factory=tuple)
    message: str
    error_type: str = Field(default_factory=lambda: config.DEFAULT_FAILURE_TYPE)

    def to_error(self) -> dict:
        """Render as a pydantic-style error dict so rule and schema errors share one format."""
        return {"loc": self.path, "msg": self.message, "type": self.error_type}

    def __str__(self) -> str:
        return f"{format_loc(self.path)}: {self.message}"
