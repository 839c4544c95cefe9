# File: vasa/core/store.py
"""
Ordered in-memory record store keyed by identifier.

Every page of the workspace (clients, board, inbox, invoices, documents)
keeps its records in one of these. Records are dataclasses carrying an
``id`` attribute; the store owns id assignment.
"""

import dataclasses
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from vasa.core.exceptions import RecordNotFound
from vasa.models import new_id
from vasa.utils.logger import setup_logger

logger = setup_logger(__name__)

R = TypeVar("R")


class RecordStore(Generic[R]):
    """Ordered sequence of records with create/read/update/delete by id."""

    def __init__(self, record_type: str = "record", newest_first: bool = False,
                 id_factory: Callable[[], str] = new_id):
        """
        Args:
            record_type: Name used in log lines and errors
            newest_first: Prepend new records instead of appending them
            id_factory: Generator for fresh identifiers
        """
        self.record_type = record_type
        self.newest_first = newest_first
        self._id_factory = id_factory
        self._records: List[R] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records))

    def __contains__(self, record_id: str) -> bool:
        return self._index_of(record_id) is not None

    def _index_of(self, record_id: str) -> Optional[int]:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return None

    def create(self, record: R) -> R:
        """Store a copy of record under a freshly generated id."""
        stored = dataclasses.replace(record, id=self._id_factory())
        if self.newest_first:
            self._records.insert(0, stored)
        else:
            self._records.append(stored)
        logger.debug(f"Created {self.record_type} {stored.id}")
        return stored

    def get(self, record_id: str) -> Optional[R]:
        index = self._index_of(record_id)
        return None if index is None else self._records[index]

    def require(self, record_id: str) -> R:
        """Like get, but raises RecordNotFound for unknown ids."""
        record = self.get(record_id)
        if record is None:
            raise RecordNotFound(record_id, self.record_type)
        return record

    def update(self, record_id: str, **changes) -> R:
        """
        Replace the record with a copy carrying the given field changes.
        
        The identifier is preserved; an 'id' in changes is ignored.
        
        Raises:
            RecordNotFound: If no record has this id
        """
        index = self._index_of(record_id)
        if index is None:
            raise RecordNotFound(record_id, self.record_type)
        changes.pop('id', None)
        updated = dataclasses.replace(self._records[index], **changes)
        self._records[index] = updated
        logger.debug(f"Updated {self.record_type} {record_id}: {sorted(changes)}")
        return updated

    def replace(self, record_id: str, record: R) -> R:
        """Swap in a whole new record under an existing id."""
        index = self._index_of(record_id)
        if index is None:
            raise RecordNotFound(record_id, self.record_type)
        stored = dataclasses.replace(record, id=record_id)
        self._records[index] = stored
        return stored

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns False if nothing matched."""
        index = self._index_of(record_id)
        if index is None:
            return False
        del self._records[index]
        logger.debug(f"Deleted {self.record_type} {record_id}")
        return True

    def list(self) -> List[R]:
        return list(self._records)

    def filter(self, predicate: Callable[[R], bool]) -> List[R]:
        return [r for r in self._records if predicate(r)]
