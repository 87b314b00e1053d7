from hypothesis import given, strategies as st

from dsalgos.polynomial import Polynomial, Term

coefficient_maps = st.dictionaries(
    st.integers(0, 15), st.integers(-50, 50), max_size=8
)


def _descending(mapping):
    return Polynomial(sorted(((c, e) for e, c in mapping.items()), key=lambda t: -t[1]))


def _value_at(poly, x):
    return sum(term.coef * x**term.exp for term in poly)


def test_worked_example():
    first = Polynomial([(3, 2), (2, 1)])
    second = Polynomial([(4, 2), (1, 0)])
    total = first + second
    assert list(total) == [Term(7, 2), Term(2, 1), Term(1, 0)]
    assert str(total) == "7x^2+2x^1+1x^0"


def test_str_of_single_term():
    assert str(Polynomial([Term(5, 3)])) == "5x^3"


def test_accepts_terms_and_tuples_alike():
    assert Polynomial([Term(1, 2), (3, 0)]) == Polynomial([(1, 2), Term(3, 0)])


def test_cancelling_terms_are_kept():
    total = Polynomial([(2, 1)]) + Polynomial([(-2, 1)])
    assert list(total) == [Term(0, 1)]


def test_add_rejects_other_types():
    result = Polynomial([(1, 1)]).__add__(5)
    assert result is NotImplemented


@given(coefficient_maps)
def test_adding_empty_is_identity(mapping):
    poly = _descending(mapping)
    assert poly + Polynomial() == poly
    assert Polynomial() + poly == poly


@given(coefficient_maps, coefficient_maps)
def test_addition_commutes(m1, m2):
    p, q = _descending(m1), _descending(m2)
    assert p + q == q + p


@given(coefficient_maps, coefficient_maps)
def test_result_exponents_descend_and_cover_both(m1, m2):
    total = _descending(m1) + _descending(m2)
    exps = [term.exp for term in total]
    assert exps == sorted(set(m1) | set(m2), reverse=True)


@given(coefficient_maps, coefficient_maps, st.integers(-3, 3))
def test_sum_evaluates_to_sum_of_values(m1, m2, x):
    p, q = _descending(m1), _descending(m2)
    assert _value_at(p + q, x) == _value_at(p, x) + _value_at(q, x)