"""
Enum Tools — Поиск констант в Enum-классах

Модуль предоставляет поиск первой константы Enum, удовлетворяющей критерию:
- search_enum: по имени без учёта регистра (по умолчанию)
- search_enum_by_name: по имени через заданное EquivalenceRelation[str]
- search_enum_by_predicate: по произвольному условию над константой

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Константы перебираются в порядке объявления; первое совпадение выигрывает
2. Перебираются все объявленные константы (включая составные члены Flag);
   алиасы (члены с тем же значением, что и более ранний член) пропускаются
3. Все аргументы проверяются ДО начала перебора (NullArgumentError / TypeError)
4. Отсутствие совпадения является штатным исходом: возвращается None
5. Поиск не имеет побочных эффектов и не кэширует результаты
"""

from enum import Enum
from typing import Callable, List, Optional, Type, TypeVar

import structlog

from nmlibs.core.contracts import require_callable, require_enum_type, require_non_null
from nmlibs.core.math.equivalence import RelationLike, as_relation, ignoring_case

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Enum)


def _declared_constants(enumeration: Type[E]) -> List[E]:
    """
    Константы Enum в порядке объявления.

    Строится по __members__, а не итерацией класса: итерация Flag пропускает
    составные члены (например, RW = R | W). Алиасы отбрасываются по
    несовпадению имени в __members__ с каноническим member.name.
    """
    return [member for name, member in enumeration.__members__.items() if member.name == name]


# =============================================================================
# SEARCH
# =============================================================================


def search_enum(enumeration: Type[E], search: str) -> Optional[E]:
    """
    Поиск первой константы Enum с заданным именем без учёта регистра.

    Поиск выполняется в порядке объявления констант. Если имени соответствуют
    несколько констант, возвращается объявленная раньше. Эквивалентно
    search_enum_by_name(enumeration, search, ignoring_case()).

    Args:
        enumeration: Enum-класс для поиска. Не может быть None
        search: Искомое имя. Не может быть None

    Returns:
        Первая константа с именем search (без учёта регистра) или None

    Raises:
        NullArgumentError: Если enumeration или search is None
        TypeError: Если enumeration не является Enum-классом

    Examples:
        >>> class Color(Enum):
        ...     RED = 1
        ...     GREEN = 2
        >>> search_enum(Color, "green")
        <Color.GREEN: 2>
        >>> search_enum(Color, "purple") is None
        True
    """
    require_enum_type(enumeration, "The given enumeration class cannot be None")
    require_non_null(search, "The search string cannot be None")
    return search_enum_by_name(enumeration, search, ignoring_case())


def search_enum_by_name(
    enumeration: Type[E],
    search: str,
    name_relation: RelationLike,
) -> Optional[E]:
    """
    Поиск первой константы Enum, имя которой эквивалентно search.

    Сравнение выполняется как name_relation.compare(member.name, search).
    Позволяет задать произвольную семантику сравнения имён (нормализация,
    locale-aware сравнение, нечёткое сравнение и т.д.).

    Args:
        enumeration: Enum-класс для поиска. Не может быть None
        search: Искомое имя. Не может быть None
        name_relation: Отношение эквивалентности над строками или функция
            двух аргументов. Не может быть None

    Returns:
        Первая подходящая константа или None

    Raises:
        NullArgumentError: Если любой аргумент is None
        TypeError: Если enumeration не Enum-класс или name_relation не callable
    """
    require_enum_type(enumeration, "The given enumeration class cannot be None")
    require_non_null(search, "The search string cannot be None")
    relation = as_relation(name_relation)

    for member in _declared_constants(enumeration):
        if relation.compare(member.name, search):
            return member

    logger.debug(
        "enum_search_miss",
        enumeration=enumeration.__name__,
        search=search,
        relation=relation.name,
    )
    return None


def search_enum_by_predicate(
    enumeration: Type[E],
    condition: Callable[[E], bool],
) -> Optional[E]:
    """
    Поиск первой константы Enum, удовлетворяющей condition.

    condition получает саму константу (а не только её имя), что позволяет
    искать по любому производному свойству: value, атрибутам, ordinal.

    Args:
        enumeration: Enum-класс для поиска. Не может быть None
        condition: Предикат над константами. Не может быть None

    Returns:
        Первая константа, для которой condition истинно, или None

    Raises:
        NullArgumentError: Если enumeration или condition is None
        TypeError: Если enumeration не Enum-класс или condition не callable
    """
    require_enum_type(enumeration, "The given enumeration class cannot be None")
    require_callable(condition, "The given condition cannot be None")

    for member in _declared_constants(enumeration):
        if condition(member):
            return member

    logger.debug("enum_search_miss", enumeration=enumeration.__name__, relation="predicate")
    return None


# =============================================================================
# UTILITIES
# =============================================================================


def ordinal(member: Enum) -> int:
    """
    Позиция константы в порядке объявления (с нуля).

    Для алиаса возвращается позиция канонического члена. Составные члены
    Flag, объявленные в классе, имеют собственную позицию.

    Raises:
        NullArgumentError: Если member is None
        TypeError: Если member не является константой Enum
        ValueError: Если member не объявлен в классе (например, Flag-комбинация R | X)

    Examples:
        >>> class Color(Enum):
        ...     RED = 1
        ...     GREEN = 2
        >>> ordinal(Color.GREEN)
        1
    """
    require_non_null(member, "The given enum constant cannot be None")
    if not isinstance(member, Enum):
        raise TypeError(f"Expected an Enum constant, got {member!r}")
    constants = _declared_constants(type(member))
    for position, constant in enumerate(constants):
        if constant is member:
            return position
    raise ValueError(f"{member!r} is not a declared constant of {type(member).__name__}")
