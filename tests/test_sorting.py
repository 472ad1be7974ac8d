import itertools
import random

import pytest

from pushswap.parsing import InputError
from pushswap.stacks import Operation, Stack, Stacks
from pushswap.sorting import (
    bring_back,
    chunk_sort,
    normalize,
    push_swap,
    search_chunks,
    sort_five,
    sort_four,
    sort_small,
    sort_three,
)


def _replay(values, operations):
    stacks = Stacks(values)
    for op in operations:
        stacks.apply(op)
    return stacks


def test_normalize_example():
    assert normalize([42, -7, 100]) == [2, 1, 3]


def test_normalize_empty():
    assert normalize([]) == []


def test_normalize_keeps_relative_order():
    rng = random.Random(7)
    values = rng.sample(range(-1000, 1000), 50)
    ranks = normalize(values)
    assert sorted(ranks) == list(range(1, len(values) + 1))
    for (i, a), (j, b) in itertools.combinations(enumerate(values), 2):
        assert (a < b) == (ranks[i] < ranks[j])


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_permutations(perm):
    stacks = Stacks(perm)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.history) <= 2


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3, 4])))
def test_sort_four_all_permutations(perm):
    stacks = Stacks(perm)
    sort_four(stacks)
    assert list(stacks.a) == [1, 2, 3, 4]
    assert len(stacks.b) == 0


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3, 4, 5])))
def test_sort_five_all_permutations(perm):
    stacks = Stacks(perm)
    sort_five(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5]
    assert len(stacks.b) == 0


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_sort_small_sorts_every_permutation(size):
    for perm in itertools.permutations(range(1, size + 1)):
        stacks = Stacks(perm)
        sort_small(stacks)
        assert list(stacks.a) == list(range(1, size + 1))


def test_sort_small_two_values_swaps():
    stacks = Stacks([2, 1])
    sort_small(stacks)
    assert stacks.history == [Operation.SA]


def test_sort_small_leaves_other_sizes():
    stacks = Stacks([6, 5, 4, 3, 2, 1])
    sort_small(stacks)
    assert stacks.history == []
    assert list(stacks.a) == [6, 5, 4, 3, 2, 1]


def test_search_chunks_preserves_values_and_uses_allowed_moves():
    rng = random.Random(3)
    values = list(range(1, 101))
    rng.shuffle(values)
    stacks = Stacks(values)
    search_chunks(stacks, 30, len(values))
    assert sorted(list(stacks.a) + list(stacks.b)) == list(range(1, 101))
    assert set(stacks.history) <= {Operation.RA, Operation.RB, Operation.RR, Operation.PB}
    assert all(v <= 120 for v in stacks.b)


def test_search_chunks_skips_when_chunk_covers_everything():
    stacks = Stacks([5, 3, 1, 2, 4, 6])
    search_chunks(stacks, 30, 6)
    assert stacks.history == []


def test_bring_back_empties_b_in_order():
    stacks = Stacks([9, 10])
    stacks.b = Stack([3, 8, 1, 6, 2, 7, 5, 4])
    bring_back(stacks)
    assert list(stacks.a) == list(range(1, 11))
    assert len(stacks.b) == 0


@pytest.mark.parametrize("seed", range(5))
def test_chunk_sort_small_inputs_sorted(seed):
    rng = random.Random(seed)
    size = rng.randint(6, 30)
    values = list(range(1, size + 1))
    rng.shuffle(values)
    stacks = Stacks(values)
    chunk_sort(stacks)
    assert list(stacks.a) == list(range(1, size + 1))
    assert len(stacks.b) == 0


@pytest.mark.parametrize("size", [100, 350])
def test_chunk_sort_large_inputs_keep_values(size):
    rng = random.Random(size)
    values = list(range(1, size + 1))
    rng.shuffle(values)
    stacks = Stacks(values)
    chunk_sort(stacks)
    assert len(stacks.b) == 0
    assert sorted(stacks.a) == list(range(1, size + 1))
    assert list(_replay(values, stacks.history).a) == list(stacks.a)


def test_push_swap_sorted_input_needs_nothing():
    assert push_swap([1, 5, 9]) == []


def test_push_swap_empty_and_single():
    assert push_swap([]) == []
    assert push_swap([42]) == []


def test_push_swap_two_values():
    assert push_swap([2, 1]) == [Operation.SA]


def test_push_swap_duplicates_rejected():
    with pytest.raises(InputError):
        push_swap([3, 1, 3])


@pytest.mark.parametrize("perm", list(itertools.permutations([-5, 0, 12, 7, 100])))
def test_push_swap_replay_sorts_five(perm):
    ops = push_swap(perm)
    stacks = _replay(perm, ops)
    assert list(stacks.a) == sorted(perm)
    assert len(stacks.b) == 0


@pytest.mark.parametrize("seed", range(4))
def test_push_swap_replay_sorts_up_to_thirty(seed):
    rng = random.Random(100 + seed)
    values = rng.sample(range(-10_000, 10_000), rng.randint(6, 30))
    ops = push_swap(values)
    stacks = _replay(values, ops)
    assert list(stacks.a) == sorted(values)
    assert len(stacks.b) == 0