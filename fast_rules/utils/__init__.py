from .serialisation import format_loc

__all__ = [
    "format_loc",
]
