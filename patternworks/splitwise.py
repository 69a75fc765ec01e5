"""Shared expenses: users, groups with their own books, and debt simplification."""

from __future__ import annotations

import argparse
import itertools
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from patternworks.splits import Split, SplitType, split_strategy_for

_BALANCE_EPSILON = 0.01

Balances = Dict[str, Dict[str, float]]


class NotAMemberError(LookupError):
    """Raised when a user takes part in a group they do not belong to."""


@dataclass(eq=False)
class User:
    """A person who receives notifications and keeps individual balances.

    A positive balance means the other user owes this one; negative, the reverse.
    """

    _ids = itertools.count(1)

    name: str
    email: str
    user_id: str = field(default="")
    balances: Dict[str, float] = field(default_factory=dict)
    notifications: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.user_id:
            self.user_id = f"user{next(User._ids)}"

    def update(self, message: str) -> None:
        """Receive a notification."""
        self.notifications.append(message)
        print(f"[NOTIFICATION to {self.name}]: {message}")

    def update_balance(self, other_user_id: str, amount: float) -> None:
        """Add ``amount`` to the balance with another user, dropping it when settled."""
        balance = self.balances.get(other_user_id, 0.0) + amount
        if abs(balance) < _BALANCE_EPSILON:
            self.balances.pop(other_user_id, None)
        else:
            self.balances[other_user_id] = balance

    def total_owed(self) -> float:
        """What this user owes everyone else together."""
        return sum(-balance for balance in self.balances.values() if balance < 0)

    def total_owing(self) -> float:
        """What everyone else owes this user together."""
        return sum(balance for balance in self.balances.values() if balance > 0)


@dataclass(eq=False)
class Expense:
    """One recorded expense and how it was split."""

    _ids = itertools.count(1)

    description: str
    total_amount: float
    paid_by_user_id: str
    splits: List[Split]
    group_id: str = ""
    expense_id: str = field(default="")

    def __post_init__(self) -> None:
        if not self.expense_id:
            self.expense_id = f"expense{next(Expense._ids)}"


def simplify_debts(group_balances: Mapping[str, Mapping[str, float]]) -> Balances:
    """Return balances that settle the same net amounts in fewer payments.

    ``group_balances[a][b] > 0`` means ``b`` owes ``a`` that much. Every user
    in the input gets an entry in the result, possibly empty.
    """
    net: Dict[str, float] = {user_id: 0.0 for user_id in group_balances}
    for creditor_id, row in group_balances.items():
        for debtor_id, amount in row.items():
            if amount > 0:
                net[creditor_id] = net.get(creditor_id, 0.0) + amount
                net[debtor_id] = net.get(debtor_id, 0.0) - amount

    ordered = sorted(net)
    creditors = [[user_id, net[user_id]] for user_id in ordered if net[user_id] > _BALANCE_EPSILON]
    debtors = [[user_id, -net[user_id]] for user_id in ordered if net[user_id] < -_BALANCE_EPSILON]
    creditors.sort(key=lambda entry: entry[1], reverse=True)
    debtors.sort(key=lambda entry: entry[1], reverse=True)

    simplified: Balances = {user_id: {} for user_id in group_balances}
    pending_creditors = deque(creditors)
    pending_debtors = deque(debtors)
    while pending_creditors and pending_debtors:
        creditor = pending_creditors[0]
        debtor = pending_debtors[0]
        settle = min(creditor[1], debtor[1])
        simplified.setdefault(creditor[0], {})[debtor[0]] = settle
        simplified.setdefault(debtor[0], {})[creditor[0]] = -settle
        creditor[1] -= settle
        debtor[1] -= settle
        if creditor[1] < _BALANCE_EPSILON:
            pending_creditors.popleft()
        if debtor[1] < _BALANCE_EPSILON:
            pending_debtors.popleft()
    return simplified


@dataclass(eq=False)
class Group:
    """A group of members with its own expense book and pairwise balances."""

    _ids = itertools.count(1)

    name: str
    group_id: str = field(default="")
    members: List[User] = field(default_factory=list)
    group_expenses: Dict[str, Expense] = field(default_factory=dict)
    group_balances: Balances = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.group_id:
            self.group_id = f"group{next(Group._ids)}"

    def _member(self, user_id: str) -> Optional[User]:
        return next((member for member in self.members if member.user_id == user_id), None)

    def _name(self, user_id: str) -> str:
        member = self._member(user_id)
        return member.name if member is not None else ""

    def _require_member(self, user_id: str) -> None:
        if not self.is_member(user_id):
            raise NotAMemberError("user is not a part of this group")

    def add_member(self, user: User) -> None:
        self.members.append(user)
        self.group_balances[user.user_id] = {}
        print(f"{user.name} added to group {self.name}")

    def remove_member(self, user_id: str) -> bool:
        """Remove a member with no outstanding balance; return whether it happened."""
        if not self.can_user_leave_group(user_id):
            print("\nUser not allowed to leave group without clearing expenses")
            return False
        self.members = [member for member in self.members if member.user_id != user_id]
        del self.group_balances[user_id]
        for row in self.group_balances.values():
            row.pop(user_id, None)
        return True

    def notify_members(self, message: str) -> None:
        for member in self.members:
            member.update(message)

    def is_member(self, user_id: str) -> bool:
        return user_id in self.group_balances

    def update_group_balance(self, from_user_id: str, to_user_id: str, amount: float) -> None:
        """Credit ``from_user_id`` with ``amount`` owed by ``to_user_id``."""
        forward = self.group_balances.setdefault(from_user_id, {})
        backward = self.group_balances.setdefault(to_user_id, {})
        forward[to_user_id] = forward.get(to_user_id, 0.0) + amount
        backward[from_user_id] = backward.get(from_user_id, 0.0) - amount
        if abs(forward[to_user_id]) < _BALANCE_EPSILON:
            del forward[to_user_id]
        if abs(backward[from_user_id]) < _BALANCE_EPSILON:
            del backward[from_user_id]

    def can_user_leave_group(self, user_id: str) -> bool:
        self._require_member(user_id)
        return all(
            abs(balance) <= _BALANCE_EPSILON
            for balance in self.group_balances[user_id].values()
        )

    def user_group_balances(self, user_id: str) -> Dict[str, float]:
        """A copy of one member's balances within the group."""
        self._require_member(user_id)
        return dict(self.group_balances[user_id])

    def add_expense(
        self,
        description: str,
        amount: float,
        paid_by_user_id: str,
        involved_users: Sequence[str],
        split_type: SplitType,
        split_values: Sequence[float] = (),
    ) -> Expense:
        """Record an expense paid by one member and shared by ``involved_users``."""
        self._require_member(paid_by_user_id)
        if not all(self.is_member(user_id) for user_id in involved_users):
            raise NotAMemberError("involvedUsers are not a part of this group")

        splits = split_strategy_for(split_type).calculate_split(
            amount, involved_users, split_values
        )
        expense = Expense(description, amount, paid_by_user_id, splits, self.group_id)
        self.group_expenses[expense.expense_id] = expense

        for split in splits:
            if split.user_id != paid_by_user_id:
                self.update_group_balance(paid_by_user_id, split.user_id, split.amount)

        print("\n=========== Sending Notifications ====================")
        self.notify_members(f"New expense added: {description} (Rs {amount:.6f})")

        print("\n=========== Expense Message ====================")
        print(
            f"Expense added to {self.name}: {description} (Rs {amount:g}) paid by "
            f"{self._name(paid_by_user_id)} and involved people are : "
        )
        if split_values:
            for user_id, value in zip(involved_users, split_values):
                print(f"{self._name(user_id)} : {value:g}")
        else:
            print("".join(f"{self._name(user_id)}, " for user_id in involved_users))
            print("Will be Paid Equally")
        return expense

    def settle_payment(self, from_user_id: str, to_user_id: str, amount: float) -> None:
        """Record that one member paid another."""
        self._require_member(from_user_id)
        self._require_member(to_user_id)
        self.update_group_balance(from_user_id, to_user_id, amount)
        from_name = self._name(from_user_id)
        to_name = self._name(to_user_id)
        self.notify_members(f"Settlement: {from_name} paid {to_name} Rs {amount:.6f}")
        print(f"Settlement in {self.name}: {from_name} settled Rs {amount:g} with {to_name}")

    def show_group_balances(self) -> str:
        """Print and return every member's balances within the group."""
        lines = ["", f"=== Group Balances for {self.name} ==="]
        for member_id in sorted(self.group_balances):
            lines.append(f"{self._name(member_id)}'s balances in group:")
            row = self.group_balances[member_id]
            if not row:
                lines.append("  No outstanding balances")
            for other_id in sorted(row):
                balance = row[other_id]
                other = self._name(other_id)
                if balance > 0:
                    lines.append(f"  {other} owes: Rs {balance:.2f}")
                else:
                    lines.append(f"  Owes {other}: Rs {abs(balance):.2f}")
        text = "\n".join(lines)
        print(text)
        return text

    def simplify_group_debts(self) -> None:
        self.group_balances = simplify_debts(self.group_balances)
        print(f"\nDebts have been simplified for group: {self.name}")


class Splitwise:
    """Keeps users, groups and individual expenses, delegating group work to groups."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.groups: Dict[str, Group] = {}
        self.expenses: Dict[str, Expense] = {}

    def _require_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise KeyError(f"User not found: {user_id}")
        return user

    def _require_group(self, group_id: str) -> Group:
        group = self.groups.get(group_id)
        if group is None:
            raise KeyError(f"Group not found: {group_id}")
        return group

    def create_user(self, name: str, email: str) -> User:
        user = User(name, email)
        self.users[user.user_id] = user
        print(f"User created: {name} (ID: {user.user_id})")
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def create_group(self, name: str) -> Group:
        group = Group(name)
        self.groups[group.group_id] = group
        print(f"Group created: {name} (ID: {group.group_id})")
        return group

    def get_group(self, group_id: str) -> Optional[Group]:
        return self.groups.get(group_id)

    def add_user_to_group(self, user_id: str, group_id: str) -> None:
        user = self._require_user(user_id)
        self._require_group(group_id).add_member(user)

    def remove_user_from_group(self, user_id: str, group_id: str) -> bool:
        """Try to take a user out of a group; return whether they left."""
        group = self._require_group(group_id)
        user = self._require_user(user_id)
        removed = group.remove_member(user_id)
        if removed:
            print(f"{user.name} successfully left {group.name}")
        return removed

    def add_expense_to_group(
        self,
        group_id: str,
        description: str,
        amount: float,
        paid_by_user_id: str,
        involved_users: Sequence[str],
        split_type: SplitType,
        split_values: Sequence[float] = (),
    ) -> Expense:
        return self._require_group(group_id).add_expense(
            description, amount, paid_by_user_id, involved_users, split_type, split_values
        )

    def settle_payment_in_group(
        self, group_id: str, from_user_id: str, to_user_id: str, amount: float
    ) -> None:
        self._require_group(group_id).settle_payment(from_user_id, to_user_id, amount)

    def settle_individual_payment(self, from_user_id: str, to_user_id: str, amount: float) -> None:
        from_user = self._require_user(from_user_id)
        to_user = self._require_user(to_user_id)
        from_user.update_balance(to_user_id, amount)
        to_user.update_balance(from_user_id, -amount)
        print(f"{from_user.name} settled Rs{amount:g} with {to_user.name}")

    def add_individual_expense(
        self,
        description: str,
        amount: float,
        paid_by_user_id: str,
        to_user_id: str,
        split_type: SplitType,
        split_values: Sequence[float] = (),
    ) -> Expense:
        """Record an expense outside any group; the other user owes the full amount."""
        paid_by = self._require_user(paid_by_user_id)
        to_user = self._require_user(to_user_id)
        splits = split_strategy_for(split_type).calculate_split(
            amount, [paid_by_user_id, to_user_id], split_values
        )
        expense = Expense(description, amount, paid_by_user_id, splits)
        self.expenses[expense.expense_id] = expense

        paid_by.update_balance(to_user_id, amount)
        to_user.update_balance(paid_by_user_id, -amount)
        print(
            f"Individual expense added: {description} (Rs {amount:g}) paid by "
            f"{paid_by.name} for {to_user.name}"
        )
        return expense

    def show_user_balance(self, user_id: str) -> str:
        """Print and return a user's individual balances."""
        user = self._require_user(user_id)
        lines = [
            "",
            f"=========== Balance for {user.name} ====================",
            f"Total you owe: Rs {user.total_owed():.2f}",
            f"Total others owe you: Rs {user.total_owing():.2f}",
            "Detailed balances:",
        ]
        for other_id in sorted(user.balances):
            other = self.users.get(other_id)
            if other is None:
                continue
            balance = user.balances[other_id]
            if balance > 0:
                lines.append(f"  {other.name} owes you: Rs{balance:.2f}")
            else:
                lines.append(f"  You owe {other.name}: Rs{abs(balance):.2f}")
        text = "\n".join(lines)
        print(text)
        return text

    def show_group_balances(self, group_id: str) -> str:
        return self._require_group(group_id).show_group_balances()

    def simplify_group_debts(self, group_id: str) -> None:
        self._require_group(group_id).simplify_group_debts()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a sample session of shared hostel expenses."""
    parser = argparse.ArgumentParser(description="Shared expense demo.")
    parser.parse_args(argv)

    manager = Splitwise()

    print("\n=========== Creating Users ====================")
    aditya = manager.create_user("Aditya", "aditya@example.com")
    rohit = manager.create_user("Rohit", "rohit@example.com")
    manish = manager.create_user("Manish", "manish@example.com")
    saurav = manager.create_user("Saurav", "saurav@example.com")
    everyone = [aditya, rohit, manish, saurav]

    print("\n=========== Creating Group and Adding Members ====================")
    hostel = manager.create_group("Hostel Expenses")
    for user in everyone:
        manager.add_user_to_group(user.user_id, hostel.group_id)

    print("\n=========== Adding Expenses in group ====================")
    manager.add_expense_to_group(
        hostel.group_id, "Lunch", 800.0, aditya.user_id,
        [user.user_id for user in everyone], SplitType.EQUAL,
    )
    manager.add_expense_to_group(
        hostel.group_id, "Dinner", 700.0, manish.user_id,
        [aditya.user_id, manish.user_id, saurav.user_id], SplitType.EXACT,
        [200.0, 300.0, 200.0],
    )

    print("\n=========== printing Group-Specific Balances ====================")
    manager.show_group_balances(hostel.group_id)

    print("\n=========== Debt Simplification ====================")
    manager.simplify_group_debts(hostel.group_id)

    print("\n=========== printing Group-Specific Balances ====================")
    manager.show_group_balances(hostel.group_id)

    print("\n=========== Adding Individual Expense ====================")
    manager.add_individual_expense("Coffee", 40.0, rohit.user_id, saurav.user_id, SplitType.EQUAL)

    print("\n=========== printing User Balances ====================")
    for user in everyone:
        manager.show_user_balance(user.user_id)

    print("\n==========Attempting to remove Rohit from group==========")
    manager.remove_user_from_group(rohit.user_id, hostel.group_id)

    print("\n======== Making Settlement to Clear Rohit's Debt ==========")
    manager.settle_payment_in_group(hostel.group_id, rohit.user_id, manish.user_id, 200.0)

    print("\n======== Attempting to Remove Rohit Again ==========")
    manager.remove_user_from_group(rohit.user_id, hostel.group_id)

    print("\n=========== Updated Group Balances ====================")
    manager.show_group_balances(hostel.group_id)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())