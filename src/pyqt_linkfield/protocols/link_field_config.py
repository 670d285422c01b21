"""Base configuration for the link field editor.

Provides hooks for applications to tune query limits and placeholder labels.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LinkFieldConfig:
    """Configuration for link field behavior.

    Attributes:
        backlink_query_limit: Max parents fetched when looking for conflicts
        record_type_list_limit: Max types listed when the field has no allow-list
        untitled_label: Title of an entry with no usable display field value
        loading_label: Title of an entry still being fetched
        not_found_label: Title of an entry the store did not return
        default_type_label: Type label when the content type is unknown
        open_editor_inline: Open linked entries in the inline (slide-in) editor
    """

    backlink_query_limit: int = 100
    record_type_list_limit: int = 100
    untitled_label: str = "Untitled"
    loading_label: str = "Loading..."
    not_found_label: str = "Entry not found"
    default_type_label: str = "Entry"
    open_editor_inline: bool = True


# Global config instance (set by application)
_link_field_config: Optional[LinkFieldConfig] = None


def set_link_field_config(config: LinkFieldConfig) -> None:
    """Set the global link field configuration.

    Args:
        config: LinkFieldConfig instance
    """
    global _link_field_config
    _link_field_config = config


def get_link_field_config() -> LinkFieldConfig:
    """Get the current link field configuration.

    Returns:
        Current LinkFieldConfig or default if not set
    """
    if _link_field_config is None:
        return LinkFieldConfig()
    return _link_field_config
