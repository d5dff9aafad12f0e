from __future__ import annotations

import inspect
from typing import Any, Callable, List, Optional, Sequence

from fast_rules.contracts.evaluator import Evaluator
from fast_rules.contracts.result import Path, Result
from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.failure import Failure
from fast_rules.core.macros import MacroCall, MacroRegistry, default_macros
from fast_rules.core.path import to_path
from fast_rules.exceptions.common_exceptions import ValidationRuleException
from fast_rules.utils.logging import logger
from fast_rules.utils.serialisation import format_loc


class RuleContext:
    """
    What a macro or check function sees at one concrete location.

    Attributes:
        value: The value at `path`.
        path: The concrete path being validated.
        index: The array index when `path` ends in one, else None.
        values: The whole validated value tree.
        context: Scratch dict shared by all rules of one validation run.
        owner: The schema the rule belongs to, if any.
        result: The underlying Result.
        failures: Failures recorded so far at this location.
    """

    def __init__(self, *, result: Result, path: Path, index: Optional[int] = None, owner: Any = None) -> None:
        self.result = result
        self.path = tuple(path)
        self.index = index
        self.owner = owner
        self.value = result.value_at(self.path)
        self.values = result.values
        self.context = result.context
        self.failures: List[Failure] = []

    def failure(self, message: str, *, path: Any = None, error_type: Optional[str] = None) -> Failure:
        """Record a failure at the current path, or at `path` (any key spec) when given."""
        return self.record(self.path if path is None else to_path(path), message, error_type=error_type)

    def record(self, loc: Sequence[Any], message: str, *, error_type: Optional[str] = None) -> Failure:
        """Record a failure at an already concrete location, used as-is."""
        kwargs = {"error_type": error_type} if error_type else {}
        failure = Failure(path=tuple(loc), message=message, **kwargs)
        self.failures.append(failure)
        return failure

    def base_failure(self, message: str, *, error_type: Optional[str] = None) -> Failure:
        """Record a failure that belongs to the payload as a whole."""
        return self.failure(message, path=(), error_type=error_type)

    def has_schema_error(self, path: Any = None) -> bool:
        return self.result.has_schema_error(self.path if path is None else to_path(path))

    def __repr__(self) -> str:
        return f"RuleContext(path={format_loc(self.path)!r}, value={self.value!r})"


class RuleEvaluator(Evaluator):
    """
    Default evaluator: runs macros from a `MacroRegistry`, then the check function.

    Check functions and macros receive the `RuleContext` as their first argument and
    may be plain functions or coroutine functions. A `ValidatorRule` instance is also
    accepted as a check; the `ValidationRuleException` it raises becomes a failure.
    """

    def __init__(self, result: Result, *, macros: Optional[MacroRegistry] = None) -> None:
        self.result = result
        self.macros = macros if macros is not None else default_macros

    async def invoke(
        self,
        owner: Any,
        *,
        keys: Sequence[Path],
        macros: Sequence[MacroCall],
        check: Optional[Callable[..., Any]],
        index: Optional[int] = None,
    ) -> List[Failure]:
        path, = keys
        ctx = RuleContext(result=self.result, path=path, index=index, owner=owner)

        for call in macros:
            func = self.macros.resolve(call.name)
            logger.debug(f"[RULES] Running macro `{call.name}` at {format_loc(ctx.path)}")
            await _call(func, ctx, *call.args)

        if check is not None:
            if isinstance(check, ValidatorRule):
                await _run_validator_rule(check, ctx)
            else:
                await _call(check, ctx)

        return ctx.failures


async def _call(func: Callable[..., Any], *args: Any) -> Any:
    ret = func(*args)
    if inspect.isawaitable(ret):
        ret = await ret
    return ret


async def _run_validator_rule(rule: ValidatorRule, ctx: RuleContext) -> None:
    try:
        await _call(lambda: rule.validate(value=ctx.value, data=ctx.values, loc=ctx.path))
    except ValidationRuleException as exc:
        if exc.errors:
            for error in exc.errors:
                ctx.record(error.get("loc") or ctx.path, error.get("msg", exc.message), error_type=error.get("type"))
        else:
            ctx.record(exc.loc or ctx.path, exc.message, error_type=exc.error_type)
