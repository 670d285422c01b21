"""
Theming for the link list editor.
"""

from .color_scheme import ColorScheme

__all__ = [
    "ColorScheme",
]
