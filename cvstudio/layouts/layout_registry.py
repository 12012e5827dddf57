"""
Layout registry for managing named CV layouts.

Layouts are registered under their template id; the Renderer looks them
up by the document's discriminator.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from .base import CVLayout

# Global layout registry
_LAYOUT_REGISTRY: Dict[str, Type[CVLayout]] = {}


def register_layout(layout_class: Type[CVLayout]) -> None:
    """
    Register a layout class in the global registry.

    Args:
        layout_class: The layout class to register (keyed by its name())
    """
    instance = layout_class()
    _LAYOUT_REGISTRY[instance.name()] = layout_class


def get_layout(name: str, **kwargs) -> Optional[CVLayout]:
    """
    Get a fresh layout instance by template id.

    Args:
        name: The template id (e.g., "classic")
        **kwargs: Arguments to pass to the layout constructor

    Returns:
        Layout instance, or None if not found
    """
    layout_class = _LAYOUT_REGISTRY.get(name)
    if layout_class:
        return layout_class(**kwargs)
    return None


def list_layouts() -> List[Dict[str, str]]:
    """
    List all registered layouts with their descriptions.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    layouts = []
    for name, layout_class in _LAYOUT_REGISTRY.items():
        layouts.append({
            'name': name,
            'description': layout_class().description(),
        })
    return sorted(layouts, key=lambda x: x['name'])


def unregister_layout(name: str) -> None:
    """
    Unregister a layout from the global registry.

    Args:
        name: The template id to unregister
    """
    _LAYOUT_REGISTRY.pop(name, None)


__all__ = [
    "register_layout",
    "get_layout",
    "list_layouts",
    "unregister_layout",
]
