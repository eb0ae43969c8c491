# thottam/api/routes/__init__.py
"""API route modules."""

from . import content

__all__ = ["content"]
