"""Domain layer: entities and name matching. No dependencies on outer layers."""

from addressbook.domain.entities import CATEGORIES, DEFAULT_CATEGORY, Contact
from addressbook.domain.matching import (
    LIBRARY_POLICY,
    STORE_POLICY,
    SimilarityPolicy,
    is_similar,
)

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "LIBRARY_POLICY",
    "STORE_POLICY",
    "Contact",
    "SimilarityPolicy",
    "is_similar",
]
