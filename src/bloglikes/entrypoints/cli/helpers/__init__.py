"""CLI helpers for bloglikes: stderr message emitters with ASCII fallbacks."""

from .messages import error, warn

__all__ = ["warn", "error"]
