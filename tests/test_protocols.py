"""Tests for configuration and collaborator registration."""

import pytest

from pyqt_linkfield.core import LinkFieldError, MoveReferenceError, RecordShapeError
from pyqt_linkfield.protocols import (
    LinkFieldConfig,
    get_link_field_config,
    get_record_store,
    get_record_type_registry,
    register_record_store,
    register_record_type_registry,
    set_link_field_config,
)


def test_default_config():
    config = get_link_field_config()

    assert config.backlink_query_limit == 100
    assert config.record_type_list_limit == 100
    assert config.untitled_label == "Untitled"
    assert config.open_editor_inline is True


def test_set_config_replaces_global():
    config = LinkFieldConfig(loading_label="Fetching...", open_editor_inline=False)
    set_link_field_config(config)

    assert get_link_field_config() is config


@pytest.mark.parametrize("register,get", [
    (register_record_store, get_record_store),
    (register_record_type_registry, get_record_type_registry),
])
def test_register_and_get(register, get):
    collaborator = object()
    register(collaborator)
    try:
        assert get() is collaborator
    finally:
        register(None)
    assert get() is None


def test_error_hierarchy():
    assert issubclass(RecordShapeError, LinkFieldError)
    assert issubclass(RecordShapeError, ValueError)
    assert issubclass(MoveReferenceError, LinkFieldError)
