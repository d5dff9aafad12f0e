"""Collaborator contracts consumed by the rule engine.

These are exported so they can be imported directly from :mod:`fast_rules`.
"""

from .evaluator import Evaluator
from .result import MappingResult, Path, Result, Segment
from .validator_rule import ValidatorRule

__all__ = [
    "Evaluator",
    "MappingResult",
    "Path",
    "Result",
    "Segment",
    "ValidatorRule",
]
