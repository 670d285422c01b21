"""pytest configuration and fixtures for pyqt-linkfield tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pyqt_linkfield.core.record_types import RecordType
from pyqt_linkfield.protocols import LinkFieldConfig, set_link_field_config

from fakes import (
    FakeDialogHost,
    FakeFieldHost,
    FakeNavigator,
    InMemoryRecordStore,
    InMemoryTypeRegistry,
    RecordingNotifier,
    link,
    make_record,
)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default configuration."""
    set_link_field_config(LinkFieldConfig())
    yield
    set_link_field_config(LinkFieldConfig())


@pytest.fixture
def type_registry():
    return InMemoryTypeRegistry([
        RecordType(id="person", name="Person", display_field_id="name"),
        RecordType(id="article", name="Article", display_field_id="headline"),
    ])


@pytest.fixture
def record_store():
    """Two people, plus another article that already links bob."""
    return InMemoryRecordStore([
        make_record("alice", title="Alice", version=2, published_version=1),
        make_record("bob", title="Bob"),
        make_record("carol", title="Carol"),
        make_record("article-1", "article", headline={"en-US": "This article"}),
        make_record("article-2", "article", headline={"en-US": "Other article"},
                    related={"en-US": [link("bob")]}),
    ])


@pytest.fixture
def field_host():
    return FakeFieldHost(value=[link("alice")])


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def dialogs():
    return FakeDialogHost()
