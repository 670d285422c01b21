"""Field host protocol: the authoritative field value and its context."""

from typing import Protocol, Optional, Any, Callable, Dict, List, Mapping, Sequence

FieldValue = Optional[List[Dict[str, Any]]]


class FieldHost(Protocol):
    """The field being edited.

    Attributes:
        field_id: Field identifier on the parent record type
        field_type: Field type name ("Array" for multi-reference fields)
        locale: Working locale of the editor
        validations: Field-level validation rules
        item_validations: Validation rules of array items, if any
        record_id: Id of the parent record that owns the field
        record_type_id: Content type id of the parent record
    """

    field_id: str
    field_type: str
    locale: str
    validations: Sequence[Mapping[str, Any]]
    item_validations: Optional[Sequence[Mapping[str, Any]]]
    record_id: str
    record_type_id: str

    @property
    def current_value(self) -> FieldValue:
        """Current list of link payloads, or None when the field is empty."""
        ...

    def set_value(self, value: FieldValue) -> None:
        """Write the field value."""
        ...

    def on_value_changed(self, callback: Callable[[FieldValue], None]) -> Callable[[], None]:
        """Subscribe to value changes. Returns a function that unsubscribes."""
        ...
