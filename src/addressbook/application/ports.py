"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.domain import Contact


class ContactStore(Protocol):
    """Owns contacts; enforces phone uniqueness and same-name number merging."""

    def add(self, name: str, category: str, phone: str, allow_merge: bool = False) -> bool:
        """Store a number. False if another contact already owns it."""
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return snapshots of all contacts in insertion order."""
        ...

    def search_by_name(self, query: str, fuzzy: bool = False) -> list[Contact]:
        """Return contacts whose name contains query (case-insensitive), or is similar to it when fuzzy."""
        ...

    def search_by_number(self, number: str) -> list[Contact]:
        """Return contacts holding exactly this number (at most one)."""
        ...

    def search_by_category(self, category: str) -> list[Contact]:
        """Return contacts in the given category (case-insensitive)."""
        ...

    def delete_by_name(self, name: str) -> int:
        """Remove every contact whose full name equals name case-insensitively. Returns the count."""
        ...

    def delete_by_number(self, number: str) -> bool:
        """Remove the number, or the whole contact if it was its last. Returns True if anything changed."""
        ...

    def count(self) -> int:
        ...

    def clear(self) -> None:
        ...
