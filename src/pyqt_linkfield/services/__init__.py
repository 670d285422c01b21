"""
Service layer for the link field engine.

Caching, title/status resolution, cross-parent conflict resolution,
navigation-aware refresh, field synchronization, and the controller that
composes them.
"""

from .record_cache import RecordCache
from .title_status_resolver import TitleStatusResolver, status_of, display_value
from .conflict_resolver import ConflictResolver, ResolutionResult
from .refresh_controller import NavigationRefreshController
from .field_sync_bridge import FieldSyncBridge
from .allowed_types_service import allowed_type_ids, load_allowed_types
from .link_card_presenter import LinkCard, build_cards
from .notifiers import LoggingNotifier
from .link_field_controller import LinkFieldController

__all__ = [
    "RecordCache",
    "TitleStatusResolver",
    "status_of",
    "display_value",
    "ConflictResolver",
    "ResolutionResult",
    "NavigationRefreshController",
    "FieldSyncBridge",
    "allowed_type_ids",
    "load_allowed_types",
    "LinkCard",
    "build_cards",
    "LoggingNotifier",
    "LinkFieldController",
]
