"""
pyqt-linkfield: reorderable multi-reference field editor for PyQt6.

Keeps an ordered list of entry links in sync with a content management
field, flags duplicate links, and moves links between parent entries when an
entry is added that is already linked elsewhere through the same field.

Architecture:
- Tier 1 (Core): Typed records, reference item store, duplicate detection, Qt primitives
- Tier 2 (Protocols): Record store, field host, dialog and notifier contracts; config
- Tier 3 (Services): Cache, title/status, conflict resolution, refresh, sync, controller
- Tier 4 (Widgets): LinkListEditorWidget and Qt dialog/notifier hosts
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
