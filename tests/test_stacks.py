import pytest

from pushswap.stacks import Op, Stacks, is_sorted, rank


def contents(stacks):
    return list(stacks.a), list(stacks.b)


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert contents(s) == ([2, 1, 3], [])
    assert s.history == [Op.SA]


def test_swap_twice_is_identity():
    s = Stacks([4, 5, 6], [7, 8])
    s.sb()
    s.sb()
    s.sa()
    s.sa()
    assert contents(s) == ([4, 5, 6], [7, 8])


def test_sa_on_single_item_is_recorded_without_effect():
    s = Stacks([9])
    s.sa()
    assert contents(s) == ([9], [])
    assert s.history == [Op.SA]


def test_ss_swaps_both_when_possible():
    s = Stacks([1, 2], [3, 4])
    s.ss()
    assert contents(s) == ([2, 1], [4, 3])
    assert s.history == [Op.SS]


def test_ss_swaps_neither_if_one_stack_is_short():
    s = Stacks([1, 2], [3])
    s.ss()
    assert contents(s) == ([1, 2], [3])
    assert s.history == [Op.SS]


def test_push_moves_top_and_back():
    s = Stacks([1, 2, 3], [])
    s.pb()
    assert contents(s) == ([2, 3], [1])
    s.pa()
    assert contents(s) == ([1, 2, 3], [])
    assert s.history == [Op.PB, Op.PA]


def test_pa_from_empty_b_does_nothing_but_is_recorded():
    s = Stacks([1])
    s.pa()
    assert contents(s) == ([1], [])
    assert s.history == [Op.PA]


def test_ra_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.ra()
    assert contents(s) == ([2, 3, 1], [])


def test_rotate_then_reverse_is_identity():
    s = Stacks([1, 2, 3, 4], [5, 6, 7])
    s.rr()
    s.rrr()
    assert contents(s) == ([1, 2, 3, 4], [5, 6, 7])
    assert s.history == [Op.RR, Op.RRR]


def test_rra_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert contents(s) == ([3, 1, 2], [])
    assert s.history == [Op.RRA]


def test_reverse_rotate_on_short_stack_is_not_recorded():
    s = Stacks([1], [2, 3])
    s.rra()
    s.rrr()
    assert contents(s) == ([1], [2, 3])
    assert s.history == []


def test_rrb_rotates_b():
    s = Stacks([], [1, 2, 3])
    s.rrb()
    assert contents(s) == ([], [3, 1, 2])
    assert s.history == [Op.RRB]


def test_rr_records_even_without_effect():
    s = Stacks([1], [])
    s.rr()
    assert contents(s) == ([1], [])
    assert s.history == [Op.RR]


@pytest.mark.parametrize("op", list(Op))
def test_apply_accepts_names(op):
    by_enum = Stacks([3, 1, 2], [6, 4, 5])
    by_name = Stacks([3, 1, 2], [6, 4, 5])
    by_enum.apply(op)
    by_name.apply(op.value)
    assert contents(by_enum) == contents(by_name)
    assert by_name.history == [op]


def test_apply_rejects_unknown_name():
    with pytest.raises(ValueError):
        Stacks([1, 2]).apply("rx")


def test_operations_preserve_items():
    s = Stacks([5, 3, 8, 1], [7, 2])
    for op in ["pb", "rr", "ss", "rrr", "pa", "pa", "sa", "rb", "pb"]:
        s.apply(op)
    assert sorted(list(s.a) + list(s.b)) == [1, 2, 3, 5, 7, 8]


def test_recorded_ops_print_as_their_names():
    s = Stacks([1, 2, 3])
    s.rra()
    s.pb()
    assert [str(op) for op in s.history] == ["rra", "pb"]


def test_rank_example():
    assert rank([30, 10, 20]) == [2, 0, 1]


def test_rank_is_permutation_preserving_order():
    values = [42, -7, 1000, 3, 0, -2147483648, 2147483647]
    ranks = rank(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, x in enumerate(values):
        for j, y in enumerate(values):
            assert (x < y) == (ranks[i] < ranks[j])


def test_rank_equal_values_in_order_of_appearance():
    ranks = rank([5, 5, 1])
    assert ranks[2] < ranks[0] < ranks[1]


def test_rank_empty():
    assert rank([]) == []


@pytest.mark.parametrize(
    "items, expected",
    [([], True), ([5], True), ([1, 2, 3], True), ([1, 1], True), ([2, 1], False), ([1, 3, 2], False)],
)
def test_is_sorted(items, expected):
    assert is_sorted(items) is expected


def test_is_sorted_on_stack():
    s = Stacks([2, 1, 3])
    assert is_sorted(s.a) is False
    s.sa()
    assert is_sorted(s.a) is True