"""Input DTO and result types for the add-contact flow."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactEntry:
    """Raw fields as typed by the user. Nothing here is validated yet."""

    name: str
    category: str
    phone_number: str


# --- add_contact results ---


@dataclass(frozen=True)
class ContactAdded:
    """Number stored. merged is True when it went onto an existing same-named contact."""

    name: str
    phone_number: str
    merged: bool = False


@dataclass(frozen=True)
class AlreadyStored:
    """The number is already on the same-named contact it would be merged into. Nothing changed."""

    name: str
    phone_number: str


@dataclass(frozen=True)
class Duplicate:
    """The phone number already belongs to another contact."""

    phone_number: str


@dataclass(frozen=True)
class Invalid:
    """Entry failed validation (bad name, category or phone number)."""

    reason: str
