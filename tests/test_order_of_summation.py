import pytest

from spinner.order_of_summation import AdditionInstruction, OrderOfSummation


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_pairwise_order_without_groups(n):
    order = OrderOfSummation.construct_from_orbits([], n, n - 1)
    assert len(order) == n - 1
    used = []
    for index, instruction in enumerate(order):
        assert instruction.position_of_sum == n + index
        assert instruction.number_of_group is None
        assert len(instruction.positions_of_summands) == 2
        assert all(p < instruction.position_of_sum for p in instruction.positions_of_summands)
        used.extend(instruction.positions_of_summands)
    # every position except the final total is consumed exactly once
    assert sorted(used) == list(range(2 * n - 2))


def test_orbits_are_summed_first():
    order = OrderOfSummation.construct_from_orbits([[{0, 1}, {2, 3}]], 4, 3)
    assert order[0].positions_of_summands == (0, 1)
    assert order[0].number_of_group == 0
    assert order[1].positions_of_summands == (2, 3)
    assert order[1].number_of_group == 0
    assert order[2].number_of_group is None
    assert order[2].positions_of_summands == (
        order[0].position_of_sum,
        order[1].position_of_sum,
    )


def test_single_element_orbit_is_skipped():
    order = OrderOfSummation.construct_from_orbits([[{0}, {1, 2}]], 3, 2)
    assert order[0].positions_of_summands == (1, 2)
    assert order[0].number_of_group == 0
    assert order[1].positions_of_summands == (0, order[0].position_of_sum)


def test_second_group_follows_previous_sums():
    order = OrderOfSummation.construct_from_orbits(
        [[{0, 1}, {2, 3}], [{0, 2}, {1, 3}]], 4, 3
    )
    assert len(order) == 3
    assert order[2].number_of_group == 1
    assert order[2].positions_of_summands == (
        order[0].position_of_sum,
        order[1].position_of_sum,
    )


def test_orbit_collapsing_to_one_position_is_skipped():
    order = OrderOfSummation.construct_from_orbits([[{0, 1}], [{0, 1}]], 3, 2)
    assert len(order) == 2
    assert order[1].number_of_group is None
    assert order[1].positions_of_summands == (2, order[0].position_of_sum)


def test_single_multiplicity_needs_no_summation():
    order = OrderOfSummation.construct_from_orbits([], 1, 0)
    assert len(order) == 0
    assert list(order) == []


def test_indexing_and_iteration_agree():
    order = OrderOfSummation.construct_from_orbits([], 4, 3)
    assert list(order) == [order[i] for i in range(len(order))]


def test_out_of_range_index_raises():
    instruction = AdditionInstruction((0, 1), 2)
    order = OrderOfSummation([instruction])
    assert len(order) == 1
    assert order[0] == instruction
    assert order[0].position_of_sum == 2
    with pytest.raises(IndexError):
        order[1]
    with pytest.raises(IndexError):
        order[-1]