from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from pydantic import BaseModel

from fast_rules.core.dispatcher import apply
from fast_rules.core.evaluator import RuleEvaluator
from fast_rules.core.failure import Failure
from fast_rules.core.macros import MacroRegistry, default_macros
from fast_rules.core.path import to_path
from fast_rules.core.rule import Rule, RuleBuilder, as_rule
from fast_rules.core.schema_result import SchemaResult
from fast_rules.exceptions.common_exceptions import ValidationRuleException
from fast_rules.utils.logging import logger


@dataclass
class ValidationOutcome:
    values: Any
    schema_errors: List[dict] = field(default_factory=list)
    failures: List[Failure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.schema_errors and not self.failures

    def errors(self) -> List[dict]:
        """Schema errors followed by rule failures, all in pydantic's error format."""
        return [
            *({"loc": tuple(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in self.schema_errors),
            *(failure.to_error() for failure in self.failures),
        ]


class Schema(BaseModel):
    """
    Pydantic schema with post-parse rules applied per location.

    Users declare rules via an inner Meta class:

        class OrderSchema(Schema):
            items: list[Item]

            class Meta:
                rules = [
                    rule("items").each("positive_qty"),
                    rule("coupon").validate(check=check_coupon),
                ]
                macros = MacroRegistry(parent=default_macros)

    Shape errors come from pydantic. Rules never run at locations whose shape already failed.
    """

    class Meta:
        rules: List[Union[Rule, RuleBuilder]] = []  # override in subclasses
        macros: Optional[MacroRegistry] = None

    @classmethod
    def compiled_rules(cls) -> List[Rule]:
        return [as_rule(item) for item in (getattr(cls.Meta, "rules", None) or [])]

    @classmethod
    def macro_registry(cls) -> MacroRegistry:
        return getattr(cls.Meta, "macros", None) or default_macros

    @classmethod
    async def acheck(cls, data: Any, *, context: Optional[dict] = None) -> ValidationOutcome:
        """Run shape validation and then every rule; never raises for invalid data."""
        result = SchemaResult.from_model(cls, data, context=context)
        evaluator = RuleEvaluator(result, macros=cls.macro_registry())

        failures: List[Failure] = []
        for item in cls.compiled_rules():
            if any(result.has_schema_error(to_path(key)) for key in item.keys):
                logger.debug(f"[RULES] Skipping {item!r} on {cls.__name__}: key failed shape validation")
                continue
            failures.extend(await apply(item, result, evaluator=evaluator, owner=cls))

        return ValidationOutcome(values=result.values, schema_errors=result.errors, failures=failures)

    @classmethod
    async def avalidate(cls, data: Any, *, context: Optional[dict] = None) -> Any:
        """
        Validate `data` and return the validated values.

        Raises:
            ValidationRuleException: With pydantic-like `errors` when shape or rule validation fails.
        """
        outcome = await cls.acheck(data, context=context)
        if not outcome.success:
            raise ValidationRuleException.from_errors(outcome.errors())
        return outcome.values
