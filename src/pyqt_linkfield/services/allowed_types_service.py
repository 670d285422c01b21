"""Allowed link target types, derived from field validations."""

import logging
from typing import Any, List, Mapping, Optional, Sequence

from pyqt_linkfield.core.record_types import RecordType
from pyqt_linkfield.protocols.field_host import FieldHost
from pyqt_linkfield.protocols.link_field_config import get_link_field_config
from pyqt_linkfield.protocols.record_store import RecordTypeRegistry

logger = logging.getLogger(__name__)

ARRAY_FIELD_TYPE = "Array"
LINK_CONTENT_TYPE_RULE = "linkContentType"


def allowed_type_ids(field_host: FieldHost) -> Optional[List[str]]:
    """
    Pure function: the field's linkContentType allow-list, or None if it has none.

    For multi-reference fields the rule lives on the array items, so item
    validations take precedence when present.
    """
    validations: Sequence[Mapping[str, Any]] = field_host.validations or []
    if field_host.field_type == ARRAY_FIELD_TYPE and field_host.item_validations:
        validations = field_host.item_validations

    for rule in validations:
        if rule.get(LINK_CONTENT_TYPE_RULE):
            return list(rule[LINK_CONTENT_TYPE_RULE])
    return None


def load_allowed_types(field_host: FieldHost, registry: RecordTypeRegistry) -> List[RecordType]:
    """
    Content types offered in the create menu.

    The allow-list when there is one, otherwise every type in the space up to
    the configured limit. Errors are logged and yield an empty list.
    """
    ids = allowed_type_ids(field_host)
    try:
        if ids:
            return list(registry.get_many(ids))
        return list(registry.list_all(get_link_field_config().record_type_list_limit))
    except Exception as e:
        scope = "allowed" if ids else "all"
        logger.error(f"Error fetching {scope} content types: {e}")
        return []
