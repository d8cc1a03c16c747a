"""
Core math modules для NMLibs

Отношения эквивалентности и проверка их законов.
"""

from nmlibs.core.math.equivalence import (
    NULL_HASH,
    EquivalenceRelation,
    LawViolation,
    as_relation,
    by_key,
    check_equivalence_laws,
    equality,
    hash_equality,
    identity,
    ignoring_case,
)

__all__ = [
    # Constants
    "NULL_HASH",
    # Relation type
    "EquivalenceRelation",
    "as_relation",
    # Built-in relations
    "equality",
    "identity",
    "hash_equality",
    "ignoring_case",
    "by_key",
    # Law checking
    "LawViolation",
    "check_equivalence_laws",
]
