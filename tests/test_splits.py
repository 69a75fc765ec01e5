import pytest

from patternworks.splits import (
    EqualSplit,
    ExactSplit,
    PercentageSplit,
    Split,
    SplitType,
    split_strategy_for,
)


def test_equal_split_worked_example():
    splits = EqualSplit().calculate_split(800.0, ["a", "b", "c", "d"])
    assert [s.user_id for s in splits] == ["a", "b", "c", "d"]
    assert all(s.amount == 200.0 for s in splits)


@pytest.mark.parametrize("total", [10.0, 99.99, 1234.5])
def test_equal_split_sums_to_total(total):
    splits = EqualSplit().calculate_split(total, ["a", "b", "c"])
    assert sum(s.amount for s in splits) == pytest.approx(total)
    assert len({s.amount for s in splits}) == 1


def test_equal_split_with_no_users_is_empty():
    assert EqualSplit().calculate_split(100.0, []) == []


def test_exact_split_uses_given_values():
    splits = ExactSplit().calculate_split(700.0, ["u1", "u3", "u4"], [200.0, 300.0, 200.0])
    assert splits == [Split("u1", 200.0), Split("u3", 300.0), Split("u4", 200.0)]


def test_exact_split_rejects_missing_values():
    with pytest.raises(ValueError):
        ExactSplit().calculate_split(700.0, ["u1", "u2"], [200.0])


def test_percentage_split_sums_to_total_when_percents_do():
    splits = PercentageSplit().calculate_split(500.0, ["x", "y", "z"], [20.0, 30.0, 50.0])
    assert [s.user_id for s in splits] == ["x", "y", "z"]
    assert sum(s.amount for s in splits) == pytest.approx(500.0)


def test_percentage_split_hundred_percent_is_whole_amount():
    splits = PercentageSplit().calculate_split(321.0, ["only"], [100.0])
    assert splits == [Split("only", 321.0)]


def test_percentage_split_rejects_length_mismatch():
    with pytest.raises(ValueError):
        PercentageSplit().calculate_split(100.0, ["a"], [50.0, 50.0])


@pytest.mark.parametrize(
    "split_type, expected",
    [
        (SplitType.EQUAL, EqualSplit),
        (SplitType.EXACT, ExactSplit),
        (SplitType.PERCENTAGE, PercentageSplit),
    ],
)
def test_factory_returns_matching_strategy(split_type, expected):
    strategy = split_strategy_for(split_type)
    assert type(strategy) is expected