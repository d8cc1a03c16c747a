"""
Equivalence Relations — Pluggable Comparison Strategies

Модуль описывает отношение эквивалентности между двумя значениями одного
типа и набор встроенных отношений:
- equality: структурное равенство (==)
- identity: идентичность объектов (is)
- hash_equality: равенство хэшей (слабое отношение, см. ниже)
- ignoring_case: равенство строк без учёта регистра
- by_key: равенство образов под функцией-ключом

ЗАКОНЫ ОТНОШЕНИЯ ЭКВИВАЛЕНТНОСТИ:
1. Рефлексивность: compare(x, x) всегда True
2. Симметричность: compare(x, y) == compare(y, x)
3. Транзитивность: compare(x, y) and compare(y, z) ⇒ compare(x, z)

compare принимает None в любом аргументе. compare(None, None) всегда True
(следствие рефлексивности). Результат сравнения None с не-None значением
определяется конкретным отношением.

Законы являются предусловием для реализаций и НЕ проверяются в runtime.
Для проверки пользовательского отношения на конечной выборке используется
check_equivalence_laws.
"""

from dataclasses import dataclass
from itertools import product
from typing import Any, Callable, Final, Generic, Iterable, List, Optional, Tuple, TypeVar, Union

from nmlibs.core.contracts import require_callable

T = TypeVar("T")
K = TypeVar("K")

# Хэш, приписываемый None в hash_equality
NULL_HASH: Final[int] = 0


# =============================================================================
# EQUIVALENCE RELATION
# =============================================================================


@dataclass(frozen=True)
class EquivalenceRelation(Generic[T]):
    """
    Отношение эквивалентности над значениями типа T.

    Обёртка над бинарным предикатом с усиленной семантикой: предикат обязан
    быть рефлексивным, симметричным и транзитивным. Экземпляры неизменяемы
    и могут вызываться как обычная функция двух аргументов.

    Attributes:
        predicate: Бинарный предикат (v1, v2) -> bool, определённый для None
        name: Имя отношения для диагностики
    """

    predicate: Callable[[Optional[T], Optional[T]], bool]
    name: str = "custom"

    def compare(self, v1: Optional[T], v2: Optional[T]) -> bool:
        """
        Проверка эквивалентности v1 и v2.

        Args:
            v1: Первое значение (может быть None)
            v2: Второе значение (может быть None)

        Returns:
            True если значения эквивалентны
        """
        return bool(self.predicate(v1, v2))

    def __call__(self, v1: Optional[T], v2: Optional[T]) -> bool:
        return self.compare(v1, v2)

    def __repr__(self) -> str:
        return f"EquivalenceRelation({self.name})"


RelationLike = Union[EquivalenceRelation[T], Callable[[Optional[T], Optional[T]], bool]]


def as_relation(relation: RelationLike) -> EquivalenceRelation:
    """
    Приведение отношения или обычной функции двух аргументов к EquivalenceRelation.

    Raises:
        NullArgumentError: Если relation is None
        TypeError: Если relation не callable
    """
    if isinstance(relation, EquivalenceRelation):
        return relation
    require_callable(relation, "The given equivalence relation cannot be None")
    name = getattr(relation, "__name__", "custom")
    return EquivalenceRelation(relation, name=name)


# =============================================================================
# BUILT-IN RELATIONS
# =============================================================================


def _equals(v1: Any, v2: Any) -> bool:
    if v1 is None or v2 is None:
        return v1 is v2
    return v1 == v2


def _same_instance(v1: Any, v2: Any) -> bool:
    return v1 is v2


def _null_safe_hash(value: Any) -> int:
    return NULL_HASH if value is None else hash(value)


def _hash_equals(v1: Any, v2: Any) -> bool:
    return _null_safe_hash(v1) == _null_safe_hash(v2)


def _fold_case(value: str) -> str:
    return value.upper().casefold()


def _equals_ignoring_case(v1: Optional[str], v2: Optional[str]) -> bool:
    if v1 is None or v2 is None:
        return v1 is v2
    return _fold_case(v1) == _fold_case(v2)


def equality() -> EquivalenceRelation[Any]:
    """
    Отношение структурного равенства.

    Два значения эквивалентны тогда и только тогда, когда v1 == v2.
    None эквивалентен только None и никогда не эквивалентен не-None значению,
    даже если __eq__ типа утверждает обратное.

    Returns:
        EquivalenceRelation, сравнивающее значения через ==

    Examples:
        >>> equality().compare("a", "a")
        True
        >>> equality().compare(None, "a")
        False
    """
    return EquivalenceRelation(_equals, name="equality")


def identity() -> EquivalenceRelation[Any]:
    """
    Отношение идентичности.

    Два значения эквивалентны тогда и только тогда, когда v1 is v2, т.е.
    ссылки указывают на один и тот же объект. Равные, но различные экземпляры
    НЕ эквивалентны. None эквивалентен только None.
    """
    return EquivalenceRelation(_same_instance, name="identity")


def hash_equality() -> EquivalenceRelation[Any]:
    """
    Отношение равенства хэшей.

    Два значения эквивалентны тогда и только тогда, когда hash(v1) == hash(v2),
    где хэш None принимается равным 0. Не-None значение x эквивалентно None
    тогда и только тогда, когда hash(x) == 0 (например, 0, 0.0, False).

    ВАЖНО: это слабое, приближённое отношение (равенство hash bucket, а не
    значений). Различные значения с коллизией хэшей считаются эквивалентными.
    Нехэшируемые значения приводят к TypeError.

    Examples:
        >>> hash_equality().compare(1, 1.0)
        True
        >>> hash_equality().compare(None, 0)
        True
    """
    return EquivalenceRelation(_hash_equals, name="hash_equality")


def ignoring_case() -> EquivalenceRelation[str]:
    """
    Отношение равенства строк без учёта регистра.

    Обе строки приводятся через upper().casefold(): строка и её upper()
    всегда эквивалентны, в том числе для "ı" и "I", и учитывается
    Unicode case folding ("STRASSE" и "straße" эквивалентны).
    None эквивалентен только None.
    """
    return EquivalenceRelation(_equals_ignoring_case, name="ignoring_case")


def by_key(key: Callable[[Optional[T]], K], name: Optional[str] = None) -> EquivalenceRelation[T]:
    """
    Отношение, индуцированное функцией-ключом: key(v1) == key(v2).

    Ядро любой функции является отношением эквивалентности, поэтому законы
    выполняются по построению (при детерминированном key и рефлексивном ==
    на значениях ключа). key вызывается и для None: если key не принимает
    None, это ошибка вызывающего кода.

    Args:
        key: Детерминированная функция-ключ
        name: Имя отношения (default: "by_key(<имя key>)")

    Raises:
        NullArgumentError: Если key is None
    """
    require_callable(key, "The given key function cannot be None")
    relation_name = name or f"by_key({getattr(key, '__name__', 'key')})"
    return EquivalenceRelation(lambda v1, v2: key(v1) == key(v2), name=relation_name)


# =============================================================================
# LAW CHECKING
# =============================================================================


@dataclass(frozen=True)
class LawViolation:
    """Нарушение закона эквивалентности на конкретных значениях."""

    law: str  # "reflexivity" | "symmetry" | "transitivity"
    values: Tuple[Any, ...]

    def __str__(self) -> str:
        return f"{self.law} violated for {self.values!r}"


def check_equivalence_laws(
    relation: RelationLike,
    samples: Iterable[Any],
) -> List[LawViolation]:
    """
    Полная проверка законов эквивалентности на конечной выборке.

    Проверяет рефлексивность для каждого значения, симметричность для каждой
    пары и транзитивность для каждой тройки (O(n^3) сравнений). Предназначена
    для тестов и для проверки пользовательских отношений; в runtime поиска
    не вызывается.

    Args:
        relation: Проверяемое отношение или функция двух аргументов
        samples: Конечная выборка значений (может содержать None)

    Returns:
        Список нарушений (пустой, если законы выполняются на выборке)
    """
    rel = as_relation(relation)
    values = list(samples)
    violations: List[LawViolation] = []

    for x in values:
        if not rel.compare(x, x):
            violations.append(LawViolation("reflexivity", (x,)))

    for x, y in product(values, repeat=2):
        if rel.compare(x, y) != rel.compare(y, x):
            violations.append(LawViolation("symmetry", (x, y)))

    for x, y, z in product(values, repeat=3):
        if rel.compare(x, y) and rel.compare(y, z) and not rel.compare(x, z):
            violations.append(LawViolation("transitivity", (x, y, z)))

    return violations
