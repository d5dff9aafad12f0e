from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from fast_rules.utils.serialisation import format_loc, get_exception_error_type


class ValidationRuleException(ValueError):
    """
    Distinct validation error raised by rule checks and by `Schema.avalidate`.

    This is intentionally different from Pydantic's ValidationError so callers
    can distinguish between field-shape/type errors (Pydantic) and post-parse
    rule errors (cross-field constraints, per-element checks, lookups).
    """

    def __init__(
        self,
        message: str,
        *,
        loc: Sequence[Union[str, int]] | None = None,
        error_type: str = "value_error",
        errors: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.loc = tuple(loc) if loc else tuple()
        self.error_type = error_type
        self.errors = errors

    @classmethod
    def from_errors(cls, errors: Iterable[dict]) -> "ValidationRuleException":
        errors = list(errors)
        locs = ", ".join(format_loc(error.get("loc", ())) for error in errors)
        return cls(
            f"schema rule validation failed ({locs})" if locs else "schema rule validation failed",
            error_type="rule_error",
            errors=errors,
        )


class MacroNotFoundException(LookupError):
    def __init__(self, name: str):
        self.name = name
        self.error_type = get_exception_error_type(self)
        super().__init__(f"[MACRO MISSING] Macro `{name}` is not registered")


class RuleFrozenException(RuntimeError):
    def __init__(self, description: str):
        super().__init__(f"[RULE FROZEN] {description} was already built and can no longer be configured")


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: Optional[str] = None, supported_values: Optional[list[str]] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
