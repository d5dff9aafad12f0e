from .macro_decorator import macro

__all__ = [
    "macro",
]
