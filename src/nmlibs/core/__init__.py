"""
Core primitives: equivalence relations, enum search, and precondition contracts.

This module contains the foundational building blocks that are independent
of any I/O.
"""
