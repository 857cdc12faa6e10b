import itertools
import random

import pytest

from pushswap.algorithm import (
    chunk_sort,
    generate_segments,
    in_range,
    is_sorted,
    max_position,
    move_to_a,
    move_to_b,
    select_algorithm,
    solve,
    sort_five,
    sort_four,
    sort_three,
)
from pushswap.stacks import Stacks


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        getattr(stacks, op)()
    return stacks


def _assert_sorts(values, ops):
    stacks = _replay(values, ops)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_is_sorted():
    assert is_sorted([1, 2, 3])
    assert is_sorted([1, 2, 2])
    assert is_sorted([7])
    assert not is_sorted([2, 1])
    assert not is_sorted([])


def test_max_position_first_occurrence():
    assert max_position([3, 9, 2, 9]) == 1
    assert max_position([9, 1]) == 0


def test_max_position_empty_raises():
    with pytest.raises(ValueError):
        max_position([])


def test_in_range_half_open():
    chunks = [0, 5, 10]
    assert in_range(0, 0, chunks)
    assert not in_range(5, 0, chunks)
    assert in_range(5, 1, chunks)
    assert not in_range(10, 1, chunks)


@pytest.mark.parametrize("size,count", [(5, 2), (10, 2), (11, 7), (100, 7), (101, 10)])
def test_generate_segments_shape(size, count):
    values = random.Random(size).sample(range(-1000, 1000), size)
    segments = generate_segments(values)
    assert len(segments) == count + 1
    assert segments[0] == min(values)
    assert segments[-1] == max(values) + 1
    assert segments == sorted(segments)
    for n in values:
        assert sum(in_range(n, i, segments) for i in range(count)) == 1


@pytest.mark.parametrize(
    "values,expected",
    [
        ([2, 1, 3], ["sa"]),
        ([3, 1, 2], ["sa", "sa", "ra"]),
        ([1, 3, 2], ["rra", "sa"]),
        ([3, 2, 1], ["ra", "sa"]),
        ([2, 3, 1], ["rra"]),
        ([1, 2, 3], []),
    ],
)
def test_sort_three_operations(values, expected):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.ops == expected
    assert list(stacks.a) == sorted(values)


@pytest.mark.parametrize("values", list(itertools.permutations([4, -2, 9, 0])))
def test_sort_four_all_permutations(values):
    stacks = Stacks(values)
    sort_four(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    _assert_sorts(values, stacks.ops)


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3, 4, 5])))
def test_sort_five_all_permutations(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5]
    assert not stacks.b
    _assert_sorts(values, stacks.ops)


def test_move_to_b_pushes_chunk_by_chunk():
    values = random.Random(3).sample(range(500), 60)
    chunks = generate_segments(values)
    stacks = Stacks(values)
    move_to_b(stacks, chunks)
    assert not stacks.a
    assert sorted(stacks.b) == sorted(values)
    pushed = list(reversed(stacks.b))
    indexes = [
        next(i for i in range(len(chunks) - 1) if in_range(n, i, chunks)) for n in pushed
    ]
    assert indexes == sorted(indexes)


def test_move_to_a_restores_sorted_order():
    values = random.Random(5).sample(range(-50, 50), 30)
    stacks = Stacks([])
    stacks.b.extend(values)
    move_to_a(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_chunk_sort_sorts():
    values = random.Random(8).sample(range(10000), 120)
    stacks = Stacks(values)
    chunk_sort(stacks)
    assert list(stacks.a) == sorted(values)
    _assert_sorts(values, stacks.ops)


def test_select_algorithm_two_elements_swaps():
    stacks = Stacks([2, 1])
    select_algorithm(stacks)
    assert stacks.ops == ["sa"]
    assert list(stacks.a) == [1, 2]


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5, 6]) == []
    assert solve([42]) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 7, 10, 11, 50, 100, 150])
def test_solve_random_inputs(size):
    values = random.Random(size * 31).sample(range(-(2**31), 2**31 - 1), size)
    if is_sorted(values):
        values.reverse()
    ops = solve(values)
    assert set(ops) <= {"sa", "sb", "pa", "pb", "ra", "rb", "rra", "rrb"}
    _assert_sorts(values, ops)


def test_solve_does_not_modify_input():
    values = [3, 1, 2, 5, 4]
    solve(values)
    assert values == [3, 1, 2, 5, 4]