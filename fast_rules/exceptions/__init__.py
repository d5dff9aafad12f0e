"""Custom exceptions raised by the rule engine."""

from .common_exceptions import (
    ValidationRuleException,
    MacroNotFoundException,
    RuleFrozenException,
    EnvInvalidException,
)


__all__ = [
    "ValidationRuleException",
    "MacroNotFoundException",
    "RuleFrozenException",
    "EnvInvalidException",
]
