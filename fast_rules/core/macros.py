from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Union

from fast_rules.exceptions.common_exceptions import MacroNotFoundException
from fast_rules.utils.logging import logger


class MacroCall(NamedTuple):
    """Canonical macro invocation: a macro name and the positional arguments passed to it."""

    name: Any
    args: List[Any]


# Accepted at the registration boundary:
#   "name"                         -> ("name", [])
#   ("name", arg1, arg2)           -> ("name", [arg1, arg2])
#   ("name", [arg1, arg2])         -> ("name", [arg1, arg2])
#   {"name": arg, "other": [a, b]} -> ("name", [arg]), ("other", [a, b])
#   MacroCall("name", [...])       -> unchanged
MacroSpec = Union[str, MacroCall, Sequence[Any], Mapping[Any, Any]]


def normalize_macros(*specs: MacroSpec) -> List[MacroCall]:
    """
    Normalize heterogeneous macro specs into an ordered list of `MacroCall`s.

    Order is preserved exactly as given, across mixed bare and mapping specs, and
    duplicate names are kept. Normalizing an already normalized list returns an
    equal list.

    Example:
        normalize_macros("a", {"b": 1, "c": [2, 3]}, "d")
        -> [("a", []), ("b", [1]), ("c", [2, 3]), ("d", [])]
    """
    calls: List[MacroCall] = []
    for spec in specs:
        if isinstance(spec, MacroCall):
            calls.append(spec)
        elif isinstance(spec, Mapping):
            calls.extend(_calls_from_mapping(spec))
        elif isinstance(spec, (list, tuple)):
            if len(spec) == 2 and isinstance(spec[1], (list, tuple)):
                calls.append(MacroCall(spec[0], list(spec[1])))
            elif spec:
                calls.append(MacroCall(spec[0], list(spec[1:])))
        else:
            calls.append(MacroCall(spec, []))
    return calls


def _calls_from_mapping(spec: Mapping[Any, Any]) -> Iterator[MacroCall]:
    for name, value in spec.items():
        yield MacroCall(name, list(value) if isinstance(value, (list, tuple)) else [value])


MacroFunction = Callable[..., Any]


class MacroRegistry:
    """
    Named, reusable validation snippets run before a rule's check function.

    A macro is called as `func(ctx, *args)` where `ctx` is the `RuleContext` of the
    current location. Registries can be chained: names missing here are looked up
    in `parent`.

        macros = MacroRegistry()

        @macros.register("positive")
        def positive(ctx):
            if ctx.value is not None and ctx.value <= 0:
                ctx.failure("must be greater than 0")
    """

    def __init__(self, parent: Optional["MacroRegistry"] = None) -> None:
        self.parent = parent
        self._macros: Dict[Any, MacroFunction] = {}

    def register(self, name: Any, func: Optional[MacroFunction] = None):
        """Register `func` under `name`. Without `func`, returns a decorator."""
        if func is None:
            def decorator(f: MacroFunction) -> MacroFunction:
                self.register(name, f)
                return f
            return decorator

        if name in self._macros:
            logger.debug(f"[MACROS] Overriding macro `{name}`")
        self._macros[name] = func
        return func

    def resolve(self, name: Any) -> MacroFunction:
        """
        Raises:
            MacroNotFoundException: If neither this registry nor a parent knows `name`.
        """
        if name in self._macros:
            return self._macros[name]
        if self.parent is not None:
            return self.parent.resolve(name)
        raise MacroNotFoundException(name)

    def names(self) -> List[Any]:
        inherited = self.parent.names() if self.parent is not None else []
        return [*inherited, *(name for name in self._macros if name not in inherited)]

    def __contains__(self, name: Any) -> bool:
        return name in self._macros or (self.parent is not None and name in self.parent)


# Process-wide registry used when a schema does not declare its own
default_macros = MacroRegistry()
