"""
Precondition Contract Validators

Модуль для проверки предусловий публичных функций NMLibs.

Все проверки выполняются синхронно и ДО начала любой работы:
- Отсутствующий обязательный аргумент (None) → NullArgumentError
- Аргумент не того рода (например, не Enum-класс) → TypeError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение предусловия никогда не подавляется и не повторяется
2. Отсутствие совпадения при поиске НЕ является ошибкой (возвращается None)
3. Ошибки записи файлов являются OSError (FileWriteError для кодировки)
"""

from enum import Enum
from typing import Any, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NullArgumentError(ValueError):
    """
    Нарушение предусловия: обязательный аргумент равен None.

    Является ошибкой вызывающего кода, а не штатным исходом операции.
    Выбрасывается до начала итерации или любого сравнения.
    """

    pass


class FileWriteError(OSError):
    """
    Ошибка записи текста в файл из-за невозможности закодировать текст.

    Ошибки файловой системы пробрасываются как исходный OSError;
    этот класс покрывает только сбой кодирования.
    """

    pass


# =============================================================================
# PRECONDITION CHECKS
# =============================================================================


def require_non_null(value: Optional[T], message: str) -> T:
    """
    Проверка, что обязательный аргумент задан.

    Args:
        value: Проверяемое значение
        message: Сообщение ошибки

    Returns:
        value без изменений

    Raises:
        NullArgumentError: Если value is None

    Examples:
        >>> require_non_null("RED", "search cannot be None")
        'RED'
    """
    if value is None:
        raise NullArgumentError(message)
    return value


def require_enum_type(enumeration: Any, message: str) -> type:
    """
    Проверка, что аргумент является Enum-классом.

    Args:
        enumeration: Проверяемый объект (ожидается подкласс Enum)
        message: Сообщение ошибки для NullArgumentError

    Returns:
        enumeration без изменений

    Raises:
        NullArgumentError: Если enumeration is None
        TypeError: Если enumeration не является подклассом Enum
    """
    require_non_null(enumeration, message)
    if not (isinstance(enumeration, type) and issubclass(enumeration, Enum)):
        raise TypeError(f"Expected an Enum class, got {enumeration!r}")
    return enumeration


def require_callable(value: Any, message: str) -> Any:
    """
    Проверка, что аргумент задан и может быть вызван.

    Raises:
        NullArgumentError: Если value is None
        TypeError: Если value не callable
    """
    require_non_null(value, message)
    if not callable(value):
        raise TypeError(f"Expected a callable, got {value!r}")
    return value
