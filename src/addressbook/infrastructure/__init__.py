"""Infrastructure layer: concrete store and input validation."""

from addressbook.infrastructure.memory_store import InMemoryContactStore
from addressbook.infrastructure.phone import (
    RESERVED_NUMBERS,
    clean_phone,
    is_reserved_number,
    validate_phone,
    with_country_code,
)
from addressbook.infrastructure.validation import (
    normalize_category,
    standardize_category,
    validate_name,
)

__all__ = [
    "RESERVED_NUMBERS",
    "InMemoryContactStore",
    "clean_phone",
    "is_reserved_number",
    "normalize_category",
    "standardize_category",
    "validate_name",
    "validate_phone",
    "with_country_code",
]
