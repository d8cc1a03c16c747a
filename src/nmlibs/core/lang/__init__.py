"""
Core lang modules для NMLibs

Утилиты для работы со встроенными конструкциями языка (Enum).
"""

from nmlibs.core.lang.enum_tools import (
    ordinal,
    search_enum,
    search_enum_by_name,
    search_enum_by_predicate,
)

__all__ = [
    "search_enum",
    "search_enum_by_name",
    "search_enum_by_predicate",
    "ordinal",
]
