from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence

if TYPE_CHECKING:
    from fast_rules.contracts.result import Path
    from fast_rules.core.failure import Failure
    from fast_rules.core.macros import MacroCall


class Evaluator(ABC):
    """Contract for the per-path execution context that runs macros and a rule's check function."""

    @abstractmethod
    async def invoke(
        self,
        owner: Any,
        *,
        keys: Sequence["Path"],
        macros: Sequence["MacroCall"],
        check: Optional[Callable[..., Any]],
        index: Optional[int] = None,
    ) -> List["Failure"]:
        """
        Run `macros` in order and then `check`, scoped to the single path in `keys`.

        Args:
            owner: The contract (schema) the rule belongs to.
            keys: A one-element list holding the concrete path under validation.
            macros: Normalized macro calls.
            check: The rule's check function, if any.
            index: The array index when the path ends in one.

        Returns:
            Failures recorded by the macros and the check function, in that order.
        """
        raise NotImplementedError
