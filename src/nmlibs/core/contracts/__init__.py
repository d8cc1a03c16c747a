"""
Contract Validation Module

Проверки предусловий и таксономия ошибок NMLibs.
"""

from .validators import (
    FileWriteError,
    NullArgumentError,
    require_callable,
    require_enum_type,
    require_non_null,
)

__all__ = [
    # Exceptions
    "NullArgumentError",
    "FileWriteError",
    # Functions
    "require_non_null",
    "require_enum_type",
    "require_callable",
]
