from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence, Union


class ValidatorRule(ABC):
    """
    Contract for reusable check objects that can be used as a rule's check function.

    Implementations should raise `ValidationRuleException` on failure; the evaluator
    records it as a failure at the current path. `validate` may be sync or async.
    """

    @abstractmethod
    def validate(self, *, value: Any, data: Any, loc: Sequence[Union[str, int]]) -> Any:
        """
        Validate a value within the context of the entire payload.

        Args:
            value: The value at the resolved location.
            data: The full validated value tree.
            loc: Path components from the schema root to the value.

        Raises:
            ValidationRuleException: If the validation fails.
        """
        raise NotImplementedError
