"""
Тесты для модуля Equivalence Relations

Проверяет:
1. Встроенные отношения (equality, identity, hash_equality, ignoring_case, by_key)
2. Поведение на None
3. Приведение функций к EquivalenceRelation
4. Проверку законов эквивалентности на конечной выборке
"""

from typing import Final

import pytest

from nmlibs.core.contracts import NullArgumentError
from nmlibs.core.math import equivalence
from nmlibs.core.math import (
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


class Point:
    """Значение со структурным равенством"""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Point) and (self.x, self.y) == (other.x, other.y)

    def __hash__(self) -> int:
        return hash((self.x, self.y))


class EqualsEverything:
    """Значение, __eq__ которого утверждает равенство с чем угодно"""

    def __eq__(self, other: object) -> bool:
        return True

    def __hash__(self) -> int:
        return 1


# =============================================================================
# ТЕСТЫ EQUALITY
# =============================================================================


class TestEquality:
    """Тесты для equality()"""

    def test_none_equivalent_to_none(self) -> None:
        """compare(None, None) всегда True"""
        assert equality().compare(None, None) is True

    def test_none_not_equivalent_to_value(self) -> None:
        """None не эквивалентен не-None значению"""
        assert equality().compare(None, 0) is False
        assert equality().compare("", None) is False

    def test_reflexive_on_value(self) -> None:
        """compare(x, x) для не-None x"""
        p = Point(1, 2)
        assert equality().compare(p, p) is True

    def test_structural_equality(self) -> None:
        """Различные экземпляры с равными полями эквивалентны"""
        assert equality().compare(Point(1, 2), Point(1, 2)) is True
        assert equality().compare(Point(1, 2), Point(2, 1)) is False

    def test_none_not_equal_even_if_eq_claims_so(self) -> None:
        """None эквивалентен только None независимо от __eq__ типа"""
        assert equality().compare(EqualsEverything(), None) is False
        assert equality().compare(None, EqualsEverything()) is False

    def test_callable_alias(self) -> None:
        """Отношение можно вызвать как функцию"""
        assert equality()("a", "a") is True


# =============================================================================
# ТЕСТЫ IDENTITY
# =============================================================================


class TestIdentity:
    """Тесты для identity()"""

    def test_same_instance(self) -> None:
        """Один и тот же экземпляр эквивалентен себе"""
        p = Point(1, 2)
        assert identity().compare(p, p) is True

    def test_equal_but_distinct_instances(self) -> None:
        """Равные, но различные экземпляры не эквивалентны"""
        assert identity().compare(Point(1, 2), Point(1, 2)) is False

    def test_none_handling(self) -> None:
        """None эквивалентен только None"""
        assert identity().compare(None, None) is True
        assert identity().compare(None, Point(0, 0)) is False
        assert identity().compare(Point(0, 0), None) is False


# =============================================================================
# ТЕСТЫ HASH_EQUALITY
# =============================================================================


class TestHashEquality:
    """Тесты для hash_equality()"""

    def test_compares_both_hashes(self) -> None:
        """Значения с разными хэшами не эквивалентны"""
        assert hash_equality().compare(1, 2) is False
        assert hash_equality().compare("a", "a") is True

    def test_equal_hashes_are_equivalent(self) -> None:
        """Равные хэши → эквивалентность даже для разных типов"""
        assert hash_equality().compare(1, 1.0) is True
        assert hash_equality().compare(Point(1, 2), Point(1, 2)) is True

    def test_hash_collision_is_equivalent(self) -> None:
        """Коллизия хэшей делает различные значения эквивалентными"""
        assert hash(-1) == hash(-2)
        assert hash_equality().compare(-1, -2) is True

    def test_none_hash_is_zero(self) -> None:
        """None эквивалентен x тогда и только тогда, когда hash(x) == 0"""
        assert NULL_HASH == 0
        assert hash_equality().compare(None, None) is True
        assert hash_equality().compare(None, 0) is True
        assert hash_equality().compare(False, None) is True
        assert hash_equality().compare(None, 1) is False

    def test_null_hash_is_final_constant(self) -> None:
        """NULL_HASH объявлен как Final[int]"""
        assert equivalence.__annotations__["NULL_HASH"] == Final[int]

    def test_unhashable_raises(self) -> None:
        """Нехэшируемые значения → TypeError"""
        with pytest.raises(TypeError):
            hash_equality().compare([1], [1])


# =============================================================================
# ТЕСТЫ IGNORING_CASE И BY_KEY
# =============================================================================


class TestIgnoringCase:
    """Тесты для ignoring_case()"""

    def test_case_insensitive(self) -> None:
        """Регистр не учитывается"""
        assert ignoring_case().compare("GREEN", "green") is True
        assert ignoring_case().compare("Green", "gReEn") is True
        assert ignoring_case().compare("GREEN", "red") is False

    def test_unicode_case_folding(self) -> None:
        """Используется casefold, а не lower"""
        assert ignoring_case().compare("STRASSE", "straße") is True

    @pytest.mark.parametrize("value", ["ı", "straße", "ǅ", "green", "ﬁ"])
    def test_value_equivalent_to_its_upper(self, value: str) -> None:
        """Строка эквивалентна своему upper() и в обе стороны"""
        assert ignoring_case().compare(value, value.upper()) is True
        assert ignoring_case().compare(value.upper(), value) is True

    def test_dotless_i(self) -> None:
        """'ı' и 'I' эквивалентны, хотя casefold() их различает"""
        assert "ı".casefold() != "I".casefold()
        assert ignoring_case().compare("ı", "I") is True

    def test_none_handling(self) -> None:
        """None эквивалентен только None"""
        assert ignoring_case().compare(None, None) is True
        assert ignoring_case().compare(None, "") is False
        assert ignoring_case().compare("", None) is False


class TestByKey:
    """Тесты для by_key()"""

    def test_compares_keys(self) -> None:
        """Эквивалентность по образу под key"""
        same_length = by_key(len)
        assert same_length.compare("abc", "xyz") is True
        assert same_length.compare("abc", "xy") is False

    def test_default_name(self) -> None:
        """Имя строится из имени key"""
        assert by_key(len).name == "by_key(len)"
        assert by_key(len, name="length").name == "length"

    def test_none_key_raises(self) -> None:
        """key=None → NullArgumentError"""
        with pytest.raises(NullArgumentError):
            by_key(None)


# =============================================================================
# ТЕСТЫ AS_RELATION
# =============================================================================


class TestAsRelation:
    """Тесты для as_relation()"""

    def test_relation_returned_unchanged(self) -> None:
        """EquivalenceRelation возвращается как есть"""
        rel = equality()
        assert as_relation(rel) is rel

    def test_plain_function_wrapped(self) -> None:
        """Обычная функция двух аргументов оборачивается"""

        def same_parity(a, b):
            return a % 2 == b % 2

        rel = as_relation(same_parity)
        assert isinstance(rel, EquivalenceRelation)
        assert rel.name == "same_parity"
        assert rel.compare(2, 4) is True
        assert rel.compare(2, 3) is False

    def test_truthy_result_coerced_to_bool(self) -> None:
        """Результат предиката приводится к bool"""
        rel = EquivalenceRelation(lambda a, b: 1 if a == b else 0)
        assert rel.compare("x", "x") is True
        assert rel.compare("x", "y") is False

    def test_none_raises(self) -> None:
        """None → NullArgumentError"""
        with pytest.raises(NullArgumentError):
            as_relation(None)

    def test_non_callable_raises(self) -> None:
        """Не-callable → TypeError"""
        with pytest.raises(TypeError):
            as_relation("equality")

    def test_relation_is_immutable(self) -> None:
        """EquivalenceRelation неизменяем"""
        rel = equality()
        with pytest.raises(AttributeError):
            rel.name = "other"


# =============================================================================
# ТЕСТЫ ПРОВЕРКИ ЗАКОНОВ
# =============================================================================


class TestCheckEquivalenceLaws:
    """Тесты для check_equivalence_laws()"""

    SAMPLES = [None, 0, 1, 2, "a", "A", Point(1, 2), Point(1, 2)]

    @pytest.mark.parametrize("factory", [equality, identity, hash_equality])
    def test_builtin_relations_satisfy_laws(self, factory) -> None:
        """Встроенные отношения выполняют законы на выборке"""
        assert check_equivalence_laws(factory(), self.SAMPLES) == []

    def test_ignoring_case_satisfies_laws(self) -> None:
        """ignoring_case выполняет законы на строках"""
        samples = [None, "", "a", "A", "b", "straße", "STRASSE", "ı", "I", "i", "İ"]
        assert check_equivalence_laws(ignoring_case(), samples) == []

    def test_detects_reflexivity_and_symmetry_violations(self) -> None:
        """Отношение 'a is None' не рефлексивно и не симметрично"""
        violations = check_equivalence_laws(lambda a, b: a is None, [None, 1])
        laws = {v.law for v in violations}
        assert "reflexivity" in laws
        assert "symmetry" in laws
        assert LawViolation("reflexivity", (1,)) in violations

    def test_detects_transitivity_violation(self) -> None:
        """Отношение |a - b| <= 1 не транзитивно"""
        violations = check_equivalence_laws(
            lambda a, b: a is not None and b is not None and abs(a - b) <= 1,
            [0, 1, 2],
        )
        assert {v.law for v in violations} == {"transitivity"}
        assert LawViolation("transitivity", (0, 1, 2)) in violations

    def test_violation_str(self) -> None:
        """Строковое представление нарушения"""
        assert str(LawViolation("symmetry", (1, 2))) == "symmetry violated for (1, 2)"

    def test_empty_sample(self) -> None:
        """Пустая выборка → нет нарушений"""
        assert check_equivalence_laws(equality(), []) == []
