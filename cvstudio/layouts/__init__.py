"""
CV layout interfaces and implementations.

This module provides the four built-in layouts and a registry so callers
can select one by template id.
"""

from __future__ import annotations

from .base import CVLayout, VisualTree, date_range
from .classic import ClassicLayout
from .creative import CreativeLayout
from .layout_registry import get_layout, list_layouts, register_layout, unregister_layout
from .minimal import MinimalLayout
from .modern import ModernLayout

# Register built-in layouts
register_layout(ModernLayout)
register_layout(ClassicLayout)
register_layout(MinimalLayout)
register_layout(CreativeLayout)

__all__ = [
    "CVLayout",
    "VisualTree",
    "date_range",
    "ModernLayout",
    "ClassicLayout",
    "MinimalLayout",
    "CreativeLayout",
    "register_layout",
    "get_layout",
    "list_layouts",
    "unregister_layout",
]
