"""Application layer: use cases, ports, and DTOs."""

from addressbook.application.contact_service import ContactService
from addressbook.application.dto import (
    AlreadyStored,
    ContactAdded,
    ContactEntry,
    Duplicate,
    Invalid,
)
from addressbook.application.ports import ContactStore

__all__ = [
    "AlreadyStored",
    "ContactAdded",
    "ContactEntry",
    "ContactService",
    "ContactStore",
    "Duplicate",
    "Invalid",
]
