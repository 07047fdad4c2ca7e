"""Domain entities: Contact snapshot and the closed set of categories."""

from dataclasses import dataclass

CATEGORIES = ("Family", "Personal", "Work", "Other")
DEFAULT_CATEGORY = "Other"


@dataclass(frozen=True)
class Contact:
    """
    A named directory entry owning one or more phone numbers.
    Instances handed out by a store are snapshots; mutating the store later
    does not change them and they cannot change the store.
    """

    id: int
    name: str
    category: str
    phone_numbers: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")
        if not self.phone_numbers:
            raise ValueError("Contact must have at least one phone number.")
        object.__setattr__(self, "phone_numbers", tuple(self.phone_numbers))
