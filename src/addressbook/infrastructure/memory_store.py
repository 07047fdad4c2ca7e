"""In-memory implementation of ContactStore. Order preserved by insertion."""

import logging
from dataclasses import dataclass, field

from addressbook.domain import STORE_POLICY, Contact, is_similar

logger = logging.getLogger(__name__)


@dataclass
class _Record:
    """Mutable store-side state of one contact. Never leaves the store."""

    id: int
    name: str
    category: str
    phone_numbers: list[str] = field(default_factory=list)

    def snapshot(self) -> Contact:
        return Contact(
            id=self.id,
            name=self.name,
            category=self.category,
            phone_numbers=tuple(self.phone_numbers),
        )


class InMemoryContactStore:
    """Stores contacts in memory.

    Every phone number belongs to at most one contact and every contact keeps
    at least one number. Names are not unique. Results are snapshots in
    insertion order.
    """

    def __init__(self) -> None:
        self._records: list[_Record] = []
        self._next_id = 1

    def _allocate_id(self) -> int:
        contact_id = self._next_id
        self._next_id += 1
        return contact_id

    def _owner_of(self, number: str) -> _Record | None:
        for record in self._records:
            if number in record.phone_numbers:
                return record
        return None

    def _first_named(self, name: str) -> _Record | None:
        needle = name.lower()
        for record in self._records:
            if record.name.lower() == needle:
                return record
        return None

    def add(self, name: str, category: str, phone: str, allow_merge: bool = False) -> bool:
        if not name or not name.strip() or not phone:
            logger.debug("Rejected entry with blank name or number")
            return False
        target = self._first_named(name) if allow_merge else None
        owner = self._owner_of(phone)
        if owner is not None:
            if owner is target:
                return True
            logger.debug("Rejected %s: number already belongs to contact %d", phone, owner.id)
            return False
        if target is not None:
            target.phone_numbers.append(phone)
            logger.debug("Number %s added to existing contact %d", phone, target.id)
            return True
        record = _Record(
            id=self._allocate_id(), name=name, category=category, phone_numbers=[phone]
        )
        self._records.append(record)
        return True

    def get_by_id(self, contact_id: int) -> Contact | None:
        for record in self._records:
            if record.id == contact_id:
                return record.snapshot()
        return None

    def list_all(self) -> list[Contact]:
        return [record.snapshot() for record in self._records]

    def search_by_name(self, query: str, fuzzy: bool = False) -> list[Contact]:
        if fuzzy:
            return [
                r.snapshot()
                for r in self._records
                if is_similar(r.name, query, policy=STORE_POLICY)
            ]
        needle = query.lower()
        return [r.snapshot() for r in self._records if needle in r.name.lower()]

    def search_by_number(self, number: str) -> list[Contact]:
        return [r.snapshot() for r in self._records if number in r.phone_numbers]

    def search_by_category(self, category: str) -> list[Contact]:
        needle = category.lower()
        return [r.snapshot() for r in self._records if r.category.lower() == needle]

    def delete_by_name(self, name: str) -> int:
        needle = name.lower()
        kept = [r for r in self._records if r.name.lower() != needle]
        deleted = len(self._records) - len(kept)
        self._records = kept
        return deleted

    def delete_by_number(self, number: str) -> bool:
        for index in range(len(self._records) - 1, -1, -1):
            record = self._records[index]
            if number not in record.phone_numbers:
                continue
            if len(record.phone_numbers) > 1:
                record.phone_numbers.remove(number)
                logger.debug("Number %s removed from contact %d", number, record.id)
            else:
                del self._records[index]
            return True
        return False

    def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()
