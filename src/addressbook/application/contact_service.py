"""Contact use cases: validate raw input, then add, search and delete through a store."""

import logging

from addressbook.application.dto import (
    AlreadyStored,
    ContactAdded,
    ContactEntry,
    Duplicate,
    Invalid,
)
from addressbook.application.ports import ContactStore
from addressbook.domain import Contact
from addressbook.infrastructure.phone import validate_phone, with_country_code
from addressbook.infrastructure.validation import normalize_category, validate_name

logger = logging.getLogger(__name__)


class ContactService:
    """Validated front door to a ContactStore. Bad input is reported, never raised."""

    def __init__(self, store: ContactStore, *, default_region: str | None = None) -> None:
        self._store = store
        self._default_region = default_region

    def _clean_number(self, raw: str) -> str:
        return with_country_code(validate_phone(raw), self._default_region)

    def add_contact(
        self, entry: ContactEntry, *, allow_merge: bool = False
    ) -> ContactAdded | AlreadyStored | Duplicate | Invalid:
        """Validate entry and store it. Returns added, already stored, duplicate, or invalid."""
        try:
            name = validate_name(entry.name)
            category = normalize_category(entry.category)
            phone = self._clean_number(entry.phone_number)
        except ValueError as e:
            logger.warning("Rejected contact entry: %s", e)
            return Invalid(reason=str(e))

        owners = self._store.search_by_number(phone)
        before = self._store.count()
        if not self._store.add(name, category, phone, allow_merge):
            logger.info("Duplicate number %s", phone)
            return Duplicate(phone_number=phone)

        if owners:
            return AlreadyStored(name=owners[0].name, phone_number=phone)

        merged = self._store.count() == before
        logger.info("Stored %s for %s (merged=%s)", phone, name, merged)
        return ContactAdded(name=name, phone_number=phone, merged=merged)

    def list_contacts(self) -> list[Contact]:
        return self._store.list_all()

    def get_contact(self, contact_id: int) -> Contact | None:
        return self._store.get_by_id(contact_id)

    def search_by_name(self, query: str, *, fuzzy: bool = False) -> list[Contact]:
        return self._store.search_by_name((query or "").strip(), fuzzy)

    def search_by_number(self, raw: str) -> list[Contact]:
        """Clean raw the same way add_contact does; an invalid number finds nothing."""
        try:
            number = self._clean_number(raw)
        except ValueError:
            return []
        return self._store.search_by_number(number)

    def search_by_category(self, category: str) -> list[Contact]:
        return self._store.search_by_category((category or "").strip())

    def delete_by_name(self, name: str) -> int:
        deleted = self._store.delete_by_name((name or "").strip())
        if deleted:
            logger.info("Deleted %d contact(s) named %s", deleted, name)
        return deleted

    def delete_by_number(self, raw: str) -> bool:
        try:
            number = self._clean_number(raw)
        except ValueError:
            return False
        deleted = self._store.delete_by_number(number)
        if deleted:
            logger.info("Deleted number %s", number)
        return deleted

    def count(self) -> int:
        return self._store.count()
