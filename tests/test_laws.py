import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from finpartord.core import BACKENDS, StructuralViolation, make_order
from finpartord.util.hypothesis_strategies import orders, declared_pairs


ELEMS = st.integers(min_value=0, max_value=15)


@pytest.mark.parametrize("backend", sorted(BACKENDS))
def test_empty(backend):
    order = make_order(backend)
    assert order.is_empty()
    assert order.le(0, 0)
    assert not order.lt(0, 1)

@pytest.mark.parametrize("backend", sorted(BACKENDS))
def test_self_pair_is_noop(backend):
    order = make_order(backend)
    assert order.le(5, 5)
    order = order.add(5, 5)
    assert order.le(5, 5)
    assert len(order) == 0

@pytest.mark.parametrize("backend", sorted(BACKENDS))
def test_failed_add_keeps_order(backend):
    order = make_order(backend).add(1, 2)
    with pytest.raises(StructuralViolation):
        order.add(2, 1)
    assert order.le(1, 2)
    assert not order.le(2, 1)

@pytest.mark.parametrize("backend", sorted(BACKENDS))
def test_lt_is_irreflexive(backend):
    order = make_order(backend).add(1, 2).add(2, 3)
    for x in [1, 2, 3, 4]:
        assert not order.lt(x, x)
        assert order.le(x, x)

@pytest.mark.parametrize("backend", sorted(BACKENDS))
def test_unrelated_pairs(backend):
    order = make_order(backend).add("a", "b").add("c", "d")
    assert not order.le("a", "d")
    assert not order.le("a", "c")
    assert not order.le("c", "b")

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@given(ELEMS, ELEMS)
def test_antisymmetric_two(backend, x, y):
    if x == y:
        return
    order = make_order(backend).add(x, y)
    with pytest.raises(StructuralViolation):
        order.add(y, x)

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@given(ELEMS, ELEMS, ELEMS)
def test_transitive_three(backend, x, y, z):
    if x == z:
        return
    order = make_order(backend)
    order = order.add(x, y)
    order = order.add(y, z)
    assert order.le(x, z)

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@settings(deadline=None)
@given(st.data(), ELEMS, ELEMS)
def test_add_le(backend, data, x, y):
    order = data.draw(orders(backend))
    try:
        order = order.add(x, y)
    except StructuralViolation:
        assert order.lt(y, x)
        return
    assert order.le(x, y)
    assert not order.le(y, x) or x == y

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@settings(deadline=None)
@given(st.data(), ELEMS)
def test_reflexive(backend, data, x):
    order = data.draw(orders(backend))
    assert order.le(x, x)

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@settings(deadline=None)
@given(st.data(), ELEMS, ELEMS)
def test_antisymmetric(backend, data, x, y):
    order = data.draw(orders(backend))
    if order.le(x, y) and order.le(y, x):
        assert x == y

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@settings(deadline=None)
@given(st.data(), ELEMS, ELEMS, ELEMS)
def test_transitive(backend, data, x, y, z):
    order = data.draw(orders(backend))
    if order.le(x, y) and order.le(y, z):
        assert order.le(x, z)

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@settings(deadline=None)
@given(st.data(), ELEMS, ELEMS)
def test_compatible(backend, data, x, y):
    order = data.draw(orders(backend))
    assert order.le(x, y) == (x == y or order.lt(x, y))

@pytest.mark.parametrize("backend", sorted(BACKENDS))
@settings(deadline=None)
@given(st.data(), st.integers(min_value=100, max_value=200))
def test_unknown_element_neutral(backend, data, unknown):
    order = data.draw(orders(backend))
    for x in range(16):
        assert not order.lt(unknown, x)
        assert not order.lt(x, unknown)

@settings(deadline=None)
@given(declared_pairs())
def test_backends_agree(pairs):
    pairs_order = make_order("pairs")
    dag_order = make_order("dag")
    for (lo, hi) in pairs:
        pairs_order = pairs_order.add(lo, hi)
        dag_order = dag_order.add(lo, hi)
    for x in range(16):
        for y in range(16):
            assert pairs_order.le(x, y) == dag_order.le(x, y)
    assert len(pairs_order) == len(dag_order)
