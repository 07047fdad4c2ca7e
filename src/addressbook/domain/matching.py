"""
Fuzzy name matching for Arabic/English names.

Three tiers, evaluated in order and short-circuiting on the first hit:

1. containment: either lower-cased name is a substring of the other;
2. variant groups: both names hit a member of the same transliteration
   cluster (by containment in either direction);
3. positional similarity: index-by-index character matches divided by the
   longer length. This is a prefix-aligned Hamming count, not an edit
   distance, so a letter dropped near the start costs far more than one
   dropped near the end.

Tier 3 comes in two policies. ``STORE_POLICY`` is what contact search uses;
``LIBRARY_POLICY`` is the stricter default of ``is_similar``.
"""

from dataclasses import dataclass

VARIANT_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"mohamed", "mohamad", "mohammad", "mohammed", "muhammad", "محمد"}),
    frozenset({"ahmed", "ahmad", "احمد"}),
    frozenset({"ali", "aly", "علي"}),
    frozenset({"yousef", "yusuf", "youssef", "يوسف"}),
    frozenset({"khaled", "khalid", "خالد"}),
    frozenset({"osama", "usama", "اسامة"}),
    frozenset({"hassan", "hassaan", "حسن"}),
    frozenset({"ibrahim", "ibraheem", "ابراهيم"}),
    frozenset({"nour", "noor", "نور"}),
    frozenset({"fatima", "fatma", "fatimah", "فاطمة"}),
)


@dataclass(frozen=True)
class SimilarityPolicy:
    """Threshold and length handling for the positional tier."""

    threshold: float
    max_length_gap: int | None = None
    length_penalty: float = 0.0


# Contact search: no penalty, but names more than two characters apart in
# length are never compared positionally.
STORE_POLICY = SimilarityPolicy(threshold=0.70, max_length_gap=2)

# Stand-alone matching: 0.1 off the score per character of length difference.
LIBRARY_POLICY = SimilarityPolicy(threshold=0.75, length_penalty=0.1)


def _contains_either(a: str, b: str) -> bool:
    return a in b or b in a


def positional_similarity(a: str, b: str) -> float:
    """Return matching positions over the longer length (1.0 for two empty strings)."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    matches = sum(1 for x, y in zip(a, b) if x == y)
    return matches / longest


def same_variant_group(a: str, b: str) -> bool:
    """True if both names hit some member of the same variant group."""
    a, b = a.lower(), b.lower()
    for group in VARIANT_GROUPS:
        if any(_contains_either(a, v) for v in group) and any(
            _contains_either(b, v) for v in group
        ):
            return True
    return False


def similarity_score(a: str, b: str, policy: SimilarityPolicy = LIBRARY_POLICY) -> float:
    """Positional similarity of the lower-cased names minus the policy's length penalty."""
    a, b = a.lower(), b.lower()
    penalty = abs(len(a) - len(b)) * policy.length_penalty
    return positional_similarity(a, b) - penalty


def is_similar(a: str, b: str, policy: SimilarityPolicy = LIBRARY_POLICY) -> bool:
    """Decide whether two names should be treated as the same person."""
    a, b = a.lower(), b.lower()
    if _contains_either(a, b):
        return True
    if same_variant_group(a, b):
        return True
    if policy.max_length_gap is not None and abs(len(a) - len(b)) > policy.max_length_gap:
        return False
    return similarity_score(a, b, policy) >= policy.threshold
