from __future__ import annotations

from typing import Any, List, Optional

from fast_rules import config
from fast_rules.contracts.evaluator import Evaluator
from fast_rules.contracts.result import Result
from fast_rules.core.evaluator import RuleEvaluator
from fast_rules.core.expander import expand_paths
from fast_rules.core.failure import Failure
from fast_rules.core.rule import Rule, RuleBuilder, as_rule
from fast_rules.utils.logging import logger
from fast_rules.utils.serialisation import format_loc


async def apply(
    rule: Rule | RuleBuilder,
    result: Result,
    *,
    evaluator: Optional[Evaluator] = None,
    owner: Any = None,
) -> List[Failure]:
    """
    Apply one rule to a shape-validated result.

    The rule runs once per concrete path its keys expand to. Paths that already
    failed shape validation are skipped. Failures come back in path order, and per
    path in macro order followed by the check function.

    Exceptions raised by macros or the check function propagate unchanged.
    """
    rule = as_rule(rule)
    if evaluator is None:
        evaluator = RuleEvaluator(result)

    paths = expand_paths(rule.base_keys, result, each_mode=rule.each_mode)
    macros = rule.normalized_macros

    failures: List[Failure] = []
    for path in paths:
        if result.has_schema_error(path):
            if config.LOG_SKIPS:
                logger.debug(f"[RULES] Skipping {format_loc(path)} for {rule!r}: schema error")
            continue

        index = path[-1] if path and isinstance(path[-1], int) else None
        failures.extend(
            await evaluator.invoke(owner, keys=[path], macros=macros, check=rule.check, index=index)
        )

    return failures
