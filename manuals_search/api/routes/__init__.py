# manuals_search/api/routes/__init__.py
"""API route modules."""

from . import manuals, pages

__all__ = ["manuals", "pages"]
