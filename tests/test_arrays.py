import pytest

from judgekit.arrays import (
    majority_element,
    max_lit_rows,
    max_stock_profit,
    merge_cost,
    queuestack,
    repunit_length,
    stack_sequence_ops,
)


def test_lit_rows_with_no_flips_counts_full_rows():
    assert max_lit_rows(["11", "11", "01"], 0) == 2


def test_lit_rows_parity_blocks():
    # One zero can never be fixed with an even number of flips.
    assert max_lit_rows(["01", "01"], 2) == 0


def test_lit_rows_bounded_by_row_count():
    rows = ["0101", "1010", "0101", "1111"]
    for k in range(6):
        assert 0 <= max_lit_rows(rows, k) <= len(rows)


def test_lit_rows_invalid_input():
    with pytest.raises(ValueError):
        max_lit_rows(["012"], 1)
    with pytest.raises(ValueError):
        max_lit_rows(["01", "1"], 1)
    with pytest.raises(ValueError):
        max_lit_rows(["01"], -1)


def test_majority_found():
    assert majority_element([1, 1, 2]) == 1


@pytest.mark.parametrize("values", [[1, 2], [1, 1, 2, 2], []])
def test_majority_absent(values):
    assert majority_element(values) is None


def _replay(ops):
    stack, out, nxt = [], [], 1
    for op in ops:
        if op == "+":
            stack.append(nxt)
            nxt += 1
        else:
            out.append(stack.pop())
    return out


@pytest.mark.parametrize("target", [[4, 3, 6, 8, 7, 5, 2, 1], [1], [1, 2, 3], [3, 2, 1]])
def test_stack_ops_produce_target(target):
    ops = stack_sequence_ops(target)
    assert _replay(ops) == target
    assert ops.count("+") == ops.count("-") == len(target)


def test_stack_ops_impossible():
    assert stack_sequence_ops([1, 2, 5, 3, 4]) is None
    assert stack_sequence_ops([3, 1, 2]) is None


@pytest.mark.parametrize("n", [1, 3, 7, 9, 13, 9901])
def test_repunit_divisible_and_minimal(n):
    length = repunit_length(n)
    assert int("1" * length) % n == 0
    assert all(int("1" * shorter) % n for shorter in range(1, length))


@pytest.mark.parametrize("n", [0, 2, 5, 10, -3])
def test_repunit_rejects_non_coprime(n):
    with pytest.raises(ValueError):
        repunit_length(n)


def test_merge_cost_single_and_empty():
    assert merge_cost([5]) == 0
    assert merge_cost([]) == 0


def test_merge_cost_pair():
    assert merge_cost([2, 1]) == 3


def test_merge_cost_order_independent():
    assert merge_cost([40, 30, 30, 50]) == merge_cost([30, 50, 40, 30])


def test_stock_falling_prices_gain_nothing():
    assert max_stock_profit([10, 7, 6]) == 0


def test_stock_profit():
    assert max_stock_profit([1, 1, 3, 1, 2]) == 5


def test_stock_profit_non_negative_and_empty():
    assert max_stock_profit([]) == 0
    assert max_stock_profit([5, 3, 8, 2, 9, 1]) >= 0


def test_queuestack_example():
    assert queuestack([0, 1, 1, 0], [1, 2, 3, 4], [2, 4, 7]) == [4, 1, 2]


def test_queuestack_all_stacks_pass_inserts_through():
    assert queuestack([1, 1], [8, 9], [3, 4, 5]) == [3, 4, 5]


def test_queuestack_length_mismatch():
    with pytest.raises(ValueError):
        queuestack([0, 1], [1], [2])


def test_queuestack_bad_kind():
    with pytest.raises(ValueError):
        queuestack([2], [1], [2])