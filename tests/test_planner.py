from collections import Counter

import pytest

from lottogen.planner import (
    MAX_SETS,
    TYPE_TEMPLATE,
    GenerationType,
    plan_types,
    shuffle_in_place,
)
from lottogen.rng import SeededStream


def test_template_has_ten_entries_of_known_types():
    assert len(TYPE_TEMPLATE) == MAX_SETS == 10
    assert set(TYPE_TEMPLATE) == set(GenerationType)


def test_count_ten_uses_whole_template():
    types = plan_types(10, SeededStream(5))
    assert Counter(types) == Counter(TYPE_TEMPLATE)


@pytest.mark.parametrize("count", [1, 3, 5, 7])
def test_count_selects_template_prefix(count):
    types = plan_types(count, SeededStream(11))
    assert len(types) == count
    assert Counter(types) == Counter(TYPE_TEMPLATE[:count])


def test_zero_count_plans_nothing():
    assert plan_types(0, SeededStream(1)) == []


@pytest.mark.parametrize("count", [-1, 11, 50])
def test_out_of_range_count_raises(count):
    with pytest.raises(ValueError):
        plan_types(count, SeededStream(1))


def test_order_is_seed_determined():
    assert plan_types(10, SeededStream(42)) == plan_types(10, SeededStream(42))


def test_shuffle_consumes_len_minus_one_values():
    rnd = SeededStream(8)
    shuffle_in_place(list(range(6)), rnd)
    ref = SeededStream(8)
    ref.take(5)
    assert rnd() == ref()


def test_shuffle_with_zero_stream_rotates_first_to_last():
    # j is always 0: each step swaps position i with the head
    assert shuffle_in_place([1, 2, 3, 4], lambda: 0.0) == [2, 3, 4, 1]


def test_every_type_has_label_and_explanation():
    for t in GenerationType:
        assert t.label
        assert t.explanation
