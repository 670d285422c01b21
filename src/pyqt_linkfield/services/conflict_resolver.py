"""
Cross-parent conflict resolution for newly selected entries.

An entry should be linked from at most one parent of the same content type
through the same field. When the user picks entries that are already linked
elsewhere, each one is offered as a move: confirm removes the link from the
old parent first and only then adds it here; skip leaves both sides alone.

Flow for resolve():
    1. Drop candidates already in this collection (warn if that was all of them)
    2. Look up other parents linking each remaining candidate
    3. Unlinked candidates are added directly
    4. Linked candidates: first parent found is the conflict source
    5. One confirmation dialog per conflict, sequentially
    6. Confirmed: re-fetch the parent, strip the link, write it back
    7. Write succeeded -> candidate is added; failed -> error notice, not added
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from pyqt_linkfield.core.exceptions import MoveReferenceError
from pyqt_linkfield.core.record_types import LinkedFrom, Record, is_entry_link
from pyqt_linkfield.protocols.dialog_host import DialogHost, Notifier
from pyqt_linkfield.protocols.field_host import FieldHost
from pyqt_linkfield.protocols.link_field_config import get_link_field_config
from pyqt_linkfield.protocols.record_store import RecordStore
from pyqt_linkfield.services.title_status_resolver import TitleStatusResolver

logger = logging.getLogger(__name__)

CONFIRM_TITLE = "Entry already linked"
CONFIRM_LABEL = "Move here"
CANCEL_LABEL = "Skip"


@dataclass
class ResolutionResult:
    """Outcome of resolving one picker selection.

    Attributes:
        selected_count: Number of entries the user picked
        to_add: Entries to append, direct additions first, then moved ones
        move_requests: Number of candidates that were linked elsewhere
        moved: Ids removed from their old parent and queued for addition
        declined: Ids the user chose to skip
        failed: Ids whose old parent could not be updated
    """
    selected_count: int = 0
    to_add: List[Record] = field(default_factory=list)
    move_requests: int = 0
    moved: List[str] = field(default_factory=list)
    declined: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


class ConflictResolver:
    """Finds other parents linking a candidate and moves the link on confirmation."""

    def __init__(
        self,
        record_store: RecordStore,
        field_host: FieldHost,
        titles: TitleStatusResolver,
        dialogs: DialogHost,
        notifier: Notifier,
    ):
        self._record_store = record_store
        self._field_host = field_host
        self._titles = titles
        self._dialogs = dialogs
        self._notifier = notifier

    def find_linking_parents(self, candidate_id: str) -> List[LinkedFrom]:
        """
        Parents of the same content type linking candidate_id through this field.

        One LinkedFrom per locale holding the link. The current parent is
        excluded. A failed query counts as no conflict so the add can proceed.
        """
        field_id = self._field_host.field_id
        try:
            parents = self._record_store.query_by_backlink(
                candidate_id,
                self._field_host.record_type_id,
                get_link_field_config().backlink_query_limit,
            )
        except Exception as e:
            logger.error(f"Error checking existing links for {candidate_id}: {e}")
            return []

        linked_from: List[LinkedFrom] = []
        for parent in parents:
            if parent.id == self._field_host.record_id:
                continue
            localized = parent.fields.get(field_id)
            if not localized:
                continue
            for locale, value in localized.items():
                links = value if isinstance(value, list) else [value]
                if any(is_entry_link(link, candidate_id) for link in links):
                    linked_from.append(LinkedFrom(record=parent, field_id=field_id, locale=locale))
        return linked_from

    def remove_reference(self, linked_from: LinkedFrom, target_id: str) -> bool:
        """
        Remove target_id from the parent's field/locale value and save the parent.

        The parent is fetched again rather than taken from linked_from so a
        concurrent edit is not overwritten with the copy from the query.
        """
        parent_id = linked_from.record.id
        try:
            parent = self._record_store.get_one(parent_id)
            value = parent.fields.get(linked_from.field_id, {}).get(linked_from.locale)
            if value is None:
                raise MoveReferenceError(
                    f"{parent_id} has no value for {linked_from.field_id}/{linked_from.locale}"
                )
            links = value if isinstance(value, list) else [value]
            parent.fields[linked_from.field_id][linked_from.locale] = [
                link for link in links if not is_entry_link(link, target_id)
            ]
            self._record_store.update(parent_id, parent)
            logger.debug(f"Removed link to {target_id} from {parent_id} ({linked_from.locale})")
            return True
        except Exception as e:
            logger.error(f"Error removing link to {target_id} from {parent_id}: {e}")
            return False

    def resolve(self, selected: Iterable[Record], current_ids: Iterable[str]) -> ResolutionResult:
        """
        Decide which selected entries get added, moving conflicting links on confirmation.

        Args:
            selected: Entries returned by the picker
            current_ids: Target ids already in this collection

        Returns:
            ResolutionResult; the caller appends result.to_add in one mutation
        """
        selected = list(selected)
        result = ResolutionResult(selected_count=len(selected))
        if not selected:
            return result

        present = set(current_ids)
        candidates = [record for record in selected if record.id not in present]
        if not candidates:
            self._notifier.warning("All selected entries are already added.")
            return result

        move_requests: List[Tuple[Record, LinkedFrom]] = []
        for candidate in candidates:
            existing = self.find_linking_parents(candidate.id)
            if existing:
                # First match wins; further parents are not offered
                move_requests.append((candidate, existing[0]))
            else:
                result.to_add.append(candidate)
        result.move_requests = len(move_requests)

        for candidate, linked_from in move_requests:
            self._resolve_move(candidate, linked_from, result)

        return result

    def _resolve_move(self, candidate: Record, linked_from: LinkedFrom, result: ResolutionResult) -> None:
        candidate_title = self._titles.title_of(candidate)
        parent_title = self._titles.title_of(linked_from.record)

        try:
            confirmed = self._dialogs.confirm(
                title=CONFIRM_TITLE,
                message=(
                    f'"{candidate_title}" is already linked to "{parent_title}". '
                    f"Do you want to move it to this entry? "
                    f'It will be removed from "{parent_title}".'
                ),
                confirm_label=CONFIRM_LABEL,
                cancel_label=CANCEL_LABEL,
            )
        except Exception as e:
            logger.error(f"Move confirmation failed for {candidate.id}, skipping: {e}")
            confirmed = False

        if not confirmed:
            result.declined.append(candidate.id)
            return

        if self.remove_reference(linked_from, candidate.id):
            result.to_add.append(candidate)
            result.moved.append(candidate.id)
            self._notifier.success(f'Moved "{candidate_title}" from "{parent_title}".')
        else:
            result.failed.append(candidate.id)
            self._notifier.error(f'Failed to move "{candidate_title}". Please try again.')
