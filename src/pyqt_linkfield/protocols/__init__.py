"""
Collaborator protocols and configuration.

The link field engine depends only on these contracts; concrete store,
dialog and field host implementations live in the host application.
"""

from .record_store import (
    RecordStore,
    RecordTypeRegistry,
    register_record_store,
    get_record_store,
    register_record_type_registry,
    get_record_type_registry,
)
from .field_host import FieldHost, FieldValue
from .dialog_host import DialogHost, Navigator, Notifier
from .link_field_config import LinkFieldConfig, set_link_field_config, get_link_field_config

__all__ = [
    "RecordStore",
    "RecordTypeRegistry",
    "register_record_store",
    "get_record_store",
    "register_record_type_registry",
    "get_record_type_registry",
    "FieldHost",
    "FieldValue",
    "DialogHost",
    "Navigator",
    "Notifier",
    "LinkFieldConfig",
    "set_link_field_config",
    "get_link_field_config",
]
