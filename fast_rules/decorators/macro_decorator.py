from typing import Any, Callable, Optional

from fast_rules.core.macros import MacroRegistry, default_macros


def macro(name: Any = None, *, registry: Optional[MacroRegistry] = None):
    """
    Register the decorated function as a macro.

    The function name is used when `name` is omitted; the process-wide registry is
    used when `registry` is omitted.

        @macro("min_size")
        def min_size(ctx, size):
            if len(ctx.value) < size:
                ctx.failure(f"size cannot be less than {size}")
    """
    def decorator(func: Callable) -> Callable:
        target = registry if registry is not None else default_macros
        target.register(name if name is not None else func.__name__, func)
        return func
    return decorator
