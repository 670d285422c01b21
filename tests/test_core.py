"""Tests for core primitives."""

import pytest

from pyqt_linkfield.core import (
    Edge,
    Link,
    Record,
    RecordShapeError,
    RecordType,
    ReferenceItem,
    ReferenceItemStore,
    find_duplicate_keys,
    items_to_field_value,
    links_to_target_ids,
)


def _store(*target_ids):
    store = ReferenceItemStore()
    store.replace_all(target_ids)
    return store


def test_replace_all_keeps_order_with_distinct_keys():
    store = _store("a", "b", "a", "c")

    assert store.target_ids == ["a", "b", "a", "c"]
    keys = [item.local_key for item in store.items]
    assert len(set(keys)) == len(keys)


def test_replace_all_mints_fresh_keys_for_known_targets():
    store = _store("a", "b")
    before = {item.local_key for item in store.items}

    store.replace_all(["a", "b"])

    assert before.isdisjoint(item.local_key for item in store.items)


def test_append_adds_items_at_end():
    store = _store("a")
    created = store.append(["b", "c"])

    assert store.target_ids == ["a", "b", "c"]
    assert [item.target_id for item in created] == ["b", "c"]


def test_remove_by_key_removes_only_that_entry():
    store = _store("a", "b", "a")
    second_a = store.items[2]

    assert store.remove_by_key(second_a.local_key) is True
    assert store.target_ids == ["a", "b"]
    assert store.remove_by_key("missing") is False


@pytest.mark.parametrize("index", [0, 2, 4])
def test_move_to_edge_start_preserves_relative_order(index):
    store = _store("a", "b", "c", "d", "e")
    original = store.items
    moved = original[index]

    assert store.move_to_edge(index, Edge.START)

    rest = [item for item in original if item is not moved]
    assert store.items == [moved] + rest


@pytest.mark.parametrize("index", [0, 2, 4])
def test_move_to_edge_end_preserves_relative_order(index):
    store = _store("a", "b", "c", "d", "e")
    original = store.items
    moved = original[index]

    assert store.move_to_edge(index, Edge.END)

    rest = [item for item in original if item is not moved]
    assert store.items == rest + [moved]


def test_move_to_edge_out_of_range_is_noop():
    store = _store("a", "b")
    before = store.items

    assert store.move_to_edge(5, Edge.START) is False
    assert store.items == before


def test_reorder_is_remove_then_insert():
    store = _store("a", "b", "c", "d")
    store.reorder(0, 2)
    assert store.target_ids == ["b", "c", "a", "d"]


@pytest.mark.parametrize("from_index,to_index", [(0, 3), (3, 0), (1, 2), (2, 2)])
def test_reorder_with_swapped_arguments_restores_order(from_index, to_index):
    store = _store("a", "b", "c", "d")
    original = store.items

    store.reorder(from_index, to_index)
    store.reorder(to_index, from_index)

    assert store.items == original


def test_reorder_out_of_range_is_noop():
    store = _store("a", "b")
    assert store.reorder(0, 2) is False
    assert store.reorder(-1, 0) is False
    assert store.target_ids == ["a", "b"]


def test_snapshot_restore():
    store = _store("a", "b")
    snapshot = store.snapshot()
    store.append(["c"])

    store.restore(snapshot)

    assert store.items == snapshot


def test_duplicates_flag_second_and_later_occurrences_only():
    items = [ReferenceItem("k1", "a"), ReferenceItem("k2", "b"), ReferenceItem("k3", "a"),
             ReferenceItem("k4", "a"), ReferenceItem("k5", "b")]

    assert find_duplicate_keys(items) == {"k3", "k4", "k5"}


def test_no_duplicates_in_unique_collection():
    assert find_duplicate_keys([ReferenceItem("k1", "a"), ReferenceItem("k2", "b")]) == set()
    assert find_duplicate_keys([]) == set()


def test_field_value_conversion():
    value = [Link("a").to_payload(), Link("b").to_payload()]

    assert links_to_target_ids(value) == ["a", "b"]
    assert links_to_target_ids(None) == []
    assert items_to_field_value([ReferenceItem("k", "a")]) == [
        {"sys": {"type": "Link", "linkType": "Entry", "id": "a"}}
    ]


def test_link_from_payload_rejects_asset_links():
    with pytest.raises(RecordShapeError):
        Link.from_payload({"sys": {"type": "Link", "linkType": "Asset", "id": "x"}})


def test_record_from_payload_reads_version_counters():
    record = Record.from_payload({
        "sys": {"id": "e1", "version": 4, "publishedVersion": 1,
                "contentType": {"sys": {"id": "person"}}},
        "fields": {"name": {"en-US": "Eve"}},
    })

    assert record.id == "e1"
    assert record.record_type_id == "person"
    assert record.published_version == 1
    assert record.archived_version is None
    assert record.fields == {"name": {"en-US": "Eve"}}


def test_record_from_payload_fails_fast_on_missing_content_type():
    with pytest.raises(RecordShapeError, match="contentType"):
        Record.from_payload({"sys": {"id": "e1", "version": 1}})


def test_record_type_from_payload():
    record_type = RecordType.from_payload({"sys": {"id": "person"}, "name": "Person", "displayField": "name"})
    assert record_type == RecordType("person", "Person", "name")


def test_background_task_delivers_result(qapp):
    from pyqt_linkfield.core import BackgroundTask

    results = []
    task = BackgroundTask(target=lambda x: x * 2, args=(21,))
    task.result_ready.connect(results.append)
    task.run()

    assert results == [42]


def test_background_task_delivers_error(qapp):
    from pyqt_linkfield.core import BackgroundTask

    def boom():
        raise ValueError("boom")

    errors = []
    task = BackgroundTask(target=boom)
    task.error_occurred.connect(errors.append)
    task.run()

    assert isinstance(errors[0], ValueError)


def test_reorderable_list_widget(qapp):
    """Test ReorderableListWidget creation."""
    from pyqt_linkfield.core import ReorderableListWidget

    widget = ReorderableListWidget()
    assert widget.dragDropMode() == ReorderableListWidget.DragDropMode.InternalMove
