import pytest

from spinner.direct_sum import MultiplicityDirectSum


def test_constructors_agree():
    assert MultiplicityDirectSum([2, 3]) == MultiplicityDirectSum(2, 3)
    assert MultiplicityDirectSum(4).multiplicities == (4,)
    assert len(MultiplicityDirectSum(2, 3)) == 2


def test_empty_sum():
    empty = MultiplicityDirectSum()
    assert len(empty) == 0
    assert empty.multiplicities == ()


def test_add_concatenates_without_mutation():
    a = MultiplicityDirectSum(2, 3)
    b = MultiplicityDirectSum(5)
    result = a + b
    assert result.multiplicities == a.multiplicities + b.multiplicities
    assert a.multiplicities == (2, 3)


def test_iadd_is_in_place():
    a = MultiplicityDirectSum(2)
    same = a
    a += MultiplicityDirectSum(3, 4)
    assert a is same
    assert a.multiplicities == (2, 3, 4)


@pytest.mark.parametrize("m1, m2", [(1, 1), (2, 2), (2, 3), (4, 3), (5, 1), (6, 6)])
def test_product_preserves_dimension(m1, m2):
    product = MultiplicityDirectSum(m1) * MultiplicityDirectSum(m2)
    assert sum(product) == m1 * m2
    assert len(product) == min(m1, m2)


@pytest.mark.parametrize("m1, m2", [(2, 3), (4, 1), (3, 5)])
def test_product_commutes(m1, m2):
    assert MultiplicityDirectSum(m1) * MultiplicityDirectSum(m2) == (
        MultiplicityDirectSum(m2) * MultiplicityDirectSum(m1)
    )


def test_multiplying_by_singlet_is_identity():
    x = MultiplicityDirectSum(2, 4, 5)
    assert MultiplicityDirectSum(1) * x == x


def test_two_doublets_give_singlet_and_triplet():
    assert MultiplicityDirectSum(2) * MultiplicityDirectSum(2) == MultiplicityDirectSum(1, 3)


def test_imul_matches_mul():
    a = MultiplicityDirectSum(3, 2)
    b = MultiplicityDirectSum(4)
    expected = a * b
    same = a
    a *= b
    assert a is same
    assert a == expected


def test_distributivity():
    a = MultiplicityDirectSum(2)
    b = MultiplicityDirectSum(3)
    c = MultiplicityDirectSum(4)
    assert (a + b) * c == a * c + b * c


def test_equality_ignores_order_and_hash_agrees():
    a = MultiplicityDirectSum(3, 1, 2)
    b = MultiplicityDirectSum(1, 2, 3)
    assert a == b
    assert hash(a) == hash(b)
    assert not (MultiplicityDirectSum(2, 2) == MultiplicityDirectSum(2))
    assert not (MultiplicityDirectSum(2) == 2)


def test_iteration_yields_multiplicities():
    x = MultiplicityDirectSum(5, 3)
    assert list(x) == list(x.multiplicities)