"""Name and category validation applied before anything reaches the store."""

from addressbook.domain import CATEGORIES, DEFAULT_CATEGORY

NAME_MIN_LENGTH = 2
_NAME_PUNCTUATION = frozenset(" .'-")


def validate_name(name: str | None) -> str:
    """Return the stripped name, or raise ValueError.

    Letters of any script are allowed, plus spaces, dots, apostrophes and hyphens.
    """
    name = (name or "").strip()
    if not name:
        raise ValueError("Name cannot be empty.")
    if len(name) < NAME_MIN_LENGTH:
        raise ValueError(f"Name must be at least {NAME_MIN_LENGTH} characters.")
    if not all(ch.isalpha() or ch in _NAME_PUNCTUATION for ch in name):
        raise ValueError("Name contains invalid characters.")
    return name


def normalize_category(value: str | None) -> str:
    """Return the canonical spelling of a category (case-insensitive), or raise ValueError."""
    needle = (value or "").strip().lower()
    for category in CATEGORIES:
        if category.lower() == needle:
            return category
    raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}.")


def standardize_category(value: str | None) -> str:
    """Like normalize_category, but unknown values become the default category."""
    try:
        return normalize_category(value)
    except ValueError:
        return DEFAULT_CATEGORY
