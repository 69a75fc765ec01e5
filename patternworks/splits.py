"""Ways of dividing an expense between the people involved in it."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence


class SplitType(enum.Enum):
    """How an expense is divided."""

    EQUAL = "equal"
    EXACT = "exact"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class Split:
    """The share of an expense owed by one user."""

    user_id: str
    amount: float


def _check_lengths(user_ids: Sequence[str], values: Sequence[float]) -> None:
    if len(values) != len(user_ids):
        raise ValueError(
            f"expected {len(user_ids)} split values, got {len(values)}"
        )


class SplitStrategy(ABC):
    """Turns a total amount into one split per user."""

    @abstractmethod
    def calculate_split(
        self,
        total_amount: float,
        user_ids: Sequence[str],
        values: Sequence[float] = (),
    ) -> List[Split]:
        """Return the splits for ``user_ids`` in the order given."""


class EqualSplit(SplitStrategy):
    """Every user owes the same share; ``values`` is ignored."""

    def calculate_split(
        self,
        total_amount: float,
        user_ids: Sequence[str],
        values: Sequence[float] = (),
    ) -> List[Split]:
        if not user_ids:
            return []
        share = total_amount / len(user_ids)
        return [Split(user_id, share) for user_id in user_ids]


class ExactSplit(SplitStrategy):
    """Each user owes the exact amount given for them in ``values``."""

    def calculate_split(
        self,
        total_amount: float,
        user_ids: Sequence[str],
        values: Sequence[float] = (),
    ) -> List[Split]:
        _check_lengths(user_ids, values)
        return [Split(user_id, value) for user_id, value in zip(user_ids, values)]


class PercentageSplit(SplitStrategy):
    """Each user owes the percentage of the total given in ``values``."""

    def calculate_split(
        self,
        total_amount: float,
        user_ids: Sequence[str],
        values: Sequence[float] = (),
    ) -> List[Split]:
        _check_lengths(user_ids, values)
        return [
            Split(user_id, total_amount * percent / 100.0)
            for user_id, percent in zip(user_ids, values)
        ]


_STRATEGIES = {
    SplitType.EQUAL: EqualSplit,
    SplitType.EXACT: ExactSplit,
    SplitType.PERCENTAGE: PercentageSplit,
}


def split_strategy_for(split_type: SplitType) -> SplitStrategy:
    """Return a strategy for ``split_type``, falling back to an equal split."""
    return _STRATEGIES.get(split_type, EqualSplit)()