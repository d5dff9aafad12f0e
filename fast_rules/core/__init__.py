"""Core rule engine: paths, macros, expansion, dispatch and the pydantic integration."""

from .dispatcher import apply
from .evaluator import RuleContext, RuleEvaluator
from .expander import expand_paths
from .failure import Failure
from .macros import MacroCall, MacroRegistry, MacroSpec, default_macros, normalize_macros
from .path import WILDCARD, flatten_keys, to_path
from .rule import Rule, RuleBuilder, configure, configure_each, describe, rule
from .schema import Schema, ValidationOutcome
from .schema_result import SchemaResult

__all__ = [
    "apply",
    "RuleContext",
    "RuleEvaluator",
    "expand_paths",
    "Failure",
    "MacroCall",
    "MacroRegistry",
    "MacroSpec",
    "default_macros",
    "normalize_macros",
    "WILDCARD",
    "flatten_keys",
    "to_path",
    "Rule",
    "RuleBuilder",
    "configure",
    "configure_each",
    "describe",
    "rule",
    "Schema",
    "ValidationOutcome",
    "SchemaResult",
]
