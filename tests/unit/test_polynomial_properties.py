"""
Свойства канонической формы и арифметики полиномов

Проверяет на наборе полиномов:
1. Идемпотентность simplify
2. Коммутативность сложения и умножения
3. Каноническую форму результатов (уникальные показатели, нет нулей, сортировка)
4. Линейность производной
5. Рефлексивность приближённого равенства (в т.ч. после возмущения ±1e-11)
"""

import pytest

from src.core.domain import Polynomial


def P(*pairs: tuple[float, float]) -> Polynomial:
    return Polynomial.from_pairs(pairs)


POLYNOMIALS = [
    Polynomial.new(),
    P((1, 1)),
    P((1, 1), (2, 1)),
    P((1, 2), (-2, 1), (1, 0)),
    P((0, 30), (18, 1), (-2, -1), (1, -16), (-344, -50)),
    P((1.5, -10), (2, 0.5), (3, 0.5), (4, 94), (5, -0.5), (6, 0), (7, 0), (8, -0.5), (9, 0)),
    P((-1.5, -1.8), (2, 1), (3, 1), (1, -1.8)),
    P((2, 3), (-2, 3), (0, 0)),
    P((0.25, 2.5), (-7, 0), (3, 2.5)),
]

PAIRS = [
    (POLYNOMIALS[1], POLYNOMIALS[3]),
    (POLYNOMIALS[3], POLYNOMIALS[6]),
    (POLYNOMIALS[2], POLYNOMIALS[8]),
    (POLYNOMIALS[0], POLYNOMIALS[5]),
]


def assert_canonical(p: Polynomial) -> None:
    exponents = [m.e for m in p.monomials]
    assert len(set(exponents)) == len(exponents)
    assert all(m.c != 0 for m in p.monomials)
    assert exponents == sorted(exponents, reverse=True)


class TestSimplifyProperties:
    """Свойства simplify"""

    @pytest.mark.parametrize("p", POLYNOMIALS)
    def test_idempotent(self, p: Polynomial) -> None:
        assert p.simplify().simplify() == p.simplify()

    @pytest.mark.parametrize("p", POLYNOMIALS)
    def test_canonical_form(self, p: Polynomial) -> None:
        assert_canonical(p.simplify())

    @pytest.mark.parametrize("p", POLYNOMIALS)
    def test_input_order_irrelevant(self, p: Polynomial) -> None:
        reversed_p = Polynomial(monomials=tuple(reversed(p.monomials)))
        assert reversed_p.is_equal_within_tolerance_to(p)


class TestArithmeticProperties:
    """Свойства сложения, умножения и производной"""

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_add_commutative(self, a: Polynomial, b: Polynomial) -> None:
        assert a.add_polynomial(b).simplified() == b.add_polynomial(a).simplified()

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_multiply_commutative(self, a: Polynomial, b: Polynomial) -> None:
        assert a.multiply_polynomial(b).simplified() == b.multiply_polynomial(a).simplified()

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_results_canonical(self, a: Polynomial, b: Polynomial) -> None:
        assert_canonical(a.add_polynomial(b))
        assert_canonical(a.multiply_polynomial(b))
        assert_canonical(a.derivative())
        assert_canonical(a.nth_derivative(3))

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_derivative_linear(self, a: Polynomial, b: Polynomial) -> None:
        """(a + b)' == a' + b'"""
        assert a.add_polynomial(b).derivative().is_equal_within_tolerance_to(
            a.derivative().add_polynomial(b.derivative())
        )

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_value_of_sum_and_product(self, a: Polynomial, b: Polynomial) -> None:
        x = 1.7
        assert a.add_polynomial(b).value(x) == pytest.approx(a.value(x) + b.value(x))
        assert a.multiply_polynomial(b).value(x) == pytest.approx(a.value(x) * b.value(x))


class TestToleranceProperties:
    """Свойства приближённого равенства"""

    @pytest.mark.parametrize("p", POLYNOMIALS)
    def test_reflexive(self, p: Polynomial) -> None:
        assert p.is_equal_within_tolerance_to(p)

    @pytest.mark.parametrize("delta", [1e-11, -1e-11])
    def test_reflexive_after_perturbation(self, delta: float) -> None:
        p = P((3, 4), (10, 3), (8, 2))
        perturbed = Polynomial.from_pairs((m.c + delta, m.e + delta) for m in p.monomials)
        assert p.is_equal_within_tolerance_to(perturbed)
        assert perturbed.is_equal_within_tolerance_to(p)
