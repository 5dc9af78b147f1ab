"""Interactive menu session."""

from .session import MenuSession

__all__ = ["MenuSession"]
