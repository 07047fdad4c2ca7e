"""
Address book core: clean-architecture layout.

- domain: Contact snapshot, categories, fuzzy name matching. No outer dependencies.
- application: use cases (ContactService), ports (ContactStore), DTOs.
- infrastructure: InMemoryContactStore and input validation.
"""

from addressbook.application import (
    AlreadyStored,
    ContactAdded,
    ContactEntry,
    ContactService,
    ContactStore,
    Duplicate,
    Invalid,
)
from addressbook.domain import CATEGORIES, Contact, is_similar
from addressbook.infrastructure import InMemoryContactStore

__all__ = [
    "AlreadyStored",
    "CATEGORIES",
    "Contact",
    "ContactAdded",
    "ContactEntry",
    "ContactService",
    "ContactStore",
    "Duplicate",
    "InMemoryContactStore",
    "Invalid",
    "is_similar",
]
