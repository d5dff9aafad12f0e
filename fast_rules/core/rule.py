from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable, List, Optional, Tuple, Union

from fast_rules.core.macros import MacroCall, MacroSpec, normalize_macros
from fast_rules.exceptions.common_exceptions import RuleFrozenException

CheckFunction = Callable[..., Any]


@dataclass(frozen=True, eq=False)
class Rule:
    """
    Immutable rule snapshot produced by `RuleBuilder.build()`.

    Two rules are equal when their visible keys and check function are equal; macros
    are not part of a rule's identity.
    """

    keys: Tuple[Any, ...]
    check: Optional[CheckFunction] = None
    macros: Tuple[MacroCall, ...] = field(default_factory=tuple)
    each_keys: Optional[Tuple[Any, ...]] = None

    @property
    def each_mode(self) -> bool:
        return self.each_keys is not None

    @property
    def base_keys(self) -> Tuple[Any, ...]:
        """Keys the rule expands against: the moved base keys in each-mode, else the visible keys."""
        return self.each_keys if self.each_keys is not None else self.keys

    @cached_property
    def normalized_macros(self) -> List[MacroCall]:
        return normalize_macros(*self.macros)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self.keys == other.keys and self.check == other.check

    def __hash__(self) -> int:
        # Equal rules may list mapping keys in a different order, so only the key count is hashed
        return hash((len(self.keys), self.check))

    def __repr__(self) -> str:
        return describe(self)


class RuleBuilder:
    """
    Mutable, chainable rule configuration used at registration time.

        rule("nums").each(check=lambda ctx: ctx.value < 0 and ctx.failure("must be positive"))
        rule({"address": "city"}).validate("filled", {"max_size": 40}, check=check_city)

    Once `build()` has been called the builder is frozen.
    """

    def __init__(self, *keys: Any) -> None:
        self.keys: Tuple[Any, ...] = tuple(keys)
        self.macros: List[MacroCall] = []
        self.check: Optional[CheckFunction] = None
        self.each_keys: Optional[Tuple[Any, ...]] = None
        self._built: Optional[Rule] = None

    @property
    def each_mode(self) -> bool:
        return self.each_keys is not None

    def validate(self, *macros: MacroSpec, check: Optional[CheckFunction] = None) -> "RuleBuilder":
        """Set the macros to run (replacing earlier ones) and, when given, the check function."""
        self._ensure_configurable()
        self.macros = normalize_macros(*macros)
        if check is not None:
            self.check = check
        return self

    def each(self, *macros: MacroSpec, check: Optional[CheckFunction] = None) -> "RuleBuilder":
        """
        Apply the rule to every element of the array found at the rule's keys.

        The keys move into the base-key role and the visible key set becomes empty,
        so a failed element never causes the whole rule to be skipped.
        """
        self._ensure_configurable()
        if self.each_keys is None:
            self.each_keys = self.keys
            self.keys = ()
        self.macros = normalize_macros(*macros)
        if check is not None:
            self.check = check
        return self

    def build(self) -> Rule:
        """Freeze the configuration and return its immutable snapshot."""
        if self._built is None:
            self._built = Rule(
                keys=self.keys,
                check=self.check,
                macros=tuple(self.macros),
                each_keys=self.each_keys,
            )
        return self._built

    def _ensure_configurable(self) -> None:
        if self._built is not None:
            raise RuleFrozenException(describe(self))

    def __repr__(self) -> str:
        return describe(self)


def rule(*keys: Any) -> RuleBuilder:
    """Start configuring a rule bound to `keys`."""
    return RuleBuilder(*keys)


def configure(builder: RuleBuilder, *macros: MacroSpec, check: Optional[CheckFunction] = None) -> RuleBuilder:
    return builder.validate(*macros, check=check)


def configure_each(builder: RuleBuilder, *macros: MacroSpec, check: Optional[CheckFunction] = None) -> RuleBuilder:
    return builder.each(*macros, check=check)


def as_rule(value: Union[Rule, RuleBuilder]) -> Rule:
    return value if isinstance(value, Rule) else value.build()


def describe(value: Union[Rule, RuleBuilder]) -> str:
    """Stable debug representation showing the visible top-level keys."""
    return f"<Rule keys={list(value.keys)!r}>"
