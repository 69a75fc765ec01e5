"""A compact shared-expense ledger: users, groups, expenses and settlements."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from patternworks.splits import SplitType, split_strategy_for

_BALANCE_EPSILON = 0.01


@dataclass(eq=False)
class LedgerUser:
    """A person with balances against other users (positive: they owe you)."""

    _ids = itertools.count(1)

    name: str
    user_id: str = field(default="")
    balances: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.user_id:
            self.user_id = f"user{next(LedgerUser._ids)}"

    def update_balance(self, other_user_id: str, amount: float) -> None:
        """Add ``amount`` to the balance with another user, dropping it when settled."""
        balance = self.balances.get(other_user_id, 0.0) + amount
        if abs(balance) < _BALANCE_EPSILON:
            self.balances.pop(other_user_id, None)
        else:
            self.balances[other_user_id] = balance


@dataclass(eq=False)
class LedgerGroup:
    """A group of users sharing expenses, with pairwise balances between members."""

    _ids = itertools.count(1)

    name: str
    group_id: str = field(default="")
    members: List[LedgerUser] = field(default_factory=list)
    balances: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.group_id:
            self.group_id = f"group{next(LedgerGroup._ids)}"

    def add_member(self, user: LedgerUser) -> None:
        self.members.append(user)
        self.balances[user.user_id] = {}
        print(f"{user.name} added to group {self.name}")

    def is_member(self, user_id: str) -> bool:
        return user_id in self.balances

    def _user_name(self, user_id: str) -> str:
        return next((m.name for m in self.members if m.user_id == user_id), "")

    def _adjust(self, creditor: str, debtor: str, amount: float) -> None:
        owed = self.balances[creditor]
        owed[debtor] = owed.get(debtor, 0.0) + amount
        owing = self.balances[debtor]
        owing[creditor] = owing.get(creditor, 0.0) - amount

    def add_expense(
        self,
        description: str,
        amount: float,
        paid_by: str,
        user_ids: Sequence[str],
        split_type: SplitType,
        values: Sequence[float] = (),
    ) -> None:
        """Record an expense paid by one member and shared by ``user_ids``."""
        if not self.is_member(paid_by) or not all(self.is_member(u) for u in user_ids):
            raise ValueError("Invalid users in expense!")
        splits = split_strategy_for(split_type).calculate_split(amount, user_ids, values)
        for split in splits:
            if split.user_id != paid_by:
                self._adjust(paid_by, split.user_id, split.amount)
        print(
            f"Expense added: {description} (Rs {amount:g}) paid by {self._user_name(paid_by)}"
        )

    def settle_payment(self, from_user_id: str, to_user_id: str, amount: float) -> None:
        """Record that one member paid another."""
        if not self.is_member(from_user_id) or not self.is_member(to_user_id):
            raise ValueError("Invalid users!")
        self._adjust(from_user_id, to_user_id, amount)
        print(
            f"{self._user_name(from_user_id)} paid {self._user_name(to_user_id)} Rs {amount:g}"
        )

    def show_balances(self) -> str:
        """Print and return every member's outstanding balances."""
        lines = ["", f"Group Balances for {self.name}:"]
        for user_id in sorted(self.balances):
            user_balances = self.balances[user_id]
            lines.append(f"{self._user_name(user_id)}:")
            if not user_balances:
                lines.append("  No balances")
            for other_id in sorted(user_balances):
                balance = user_balances[other_id]
                other = self._user_name(other_id)
                if balance > 0:
                    lines.append(f"  {other} owes Rs {balance:.2f}")
                elif balance < 0:
                    lines.append(f"  Owes {other} Rs {abs(balance):.2f}")
        text = "\n".join(lines)
        print(text)
        return text


class Ledger:
    """Entry point that keeps users and groups and delegates to the right group."""

    def __init__(self) -> None:
        self.users: Dict[str, LedgerUser] = {}
        self.groups: Dict[str, LedgerGroup] = {}

    def _group(self, group_id: str) -> LedgerGroup:
        try:
            return self.groups[group_id]
        except KeyError:
            raise KeyError(f"Group not found: {group_id}") from None

    def create_user(self, name: str) -> LedgerUser:
        user = LedgerUser(name)
        self.users[user.user_id] = user
        print(f"User created: {name} (ID: {user.user_id})")
        return user

    def create_group(self, name: str) -> LedgerGroup:
        group = LedgerGroup(name)
        self.groups[group.group_id] = group
        print(f"Group created: {name} (ID: {group.group_id})")
        return group

    def add_user_to_group(self, user_id: str, group_id: str) -> None:
        user = self.users.get(user_id)
        group = self.groups.get(group_id)
        if user is None or group is None:
            raise KeyError("User or group not found!")
        group.add_member(user)

    def add_expense(
        self,
        group_id: str,
        description: str,
        amount: float,
        paid_by: str,
        user_ids: Sequence[str],
        split_type: SplitType,
        values: Sequence[float] = (),
    ) -> None:
        self._group(group_id).add_expense(
            description, amount, paid_by, user_ids, split_type, values
        )

    def settle_payment(
        self, group_id: str, from_user_id: str, to_user_id: str, amount: float
    ) -> None:
        self._group(group_id).settle_payment(from_user_id, to_user_id, amount)

    def show_group_balances(self, group_id: str) -> str:
        return self._group(group_id).show_balances()