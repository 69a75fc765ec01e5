"""A water-bottle vending machine driven by explicit state objects."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Optional, Sequence


class VendingState(ABC):
    """One state of the machine; every action returns the state to move to."""

    name = ""

    @abstractmethod
    def insert_coin(self, machine: "VendingMachine", coin: int) -> "VendingState":
        """Handle a coin being inserted."""

    @abstractmethod
    def select_item(self, machine: "VendingMachine") -> "VendingState":
        """Handle the item button being pressed."""

    @abstractmethod
    def dispense(self, machine: "VendingMachine") -> "VendingState":
        """Handle a request to dispense the item."""

    @abstractmethod
    def return_coin(self, machine: "VendingMachine") -> "VendingState":
        """Handle the coin-return lever."""

    @abstractmethod
    def refill(self, machine: "VendingMachine", quantity: int) -> "VendingState":
        """Handle an operator refilling the machine."""


class NoCoinState(VendingState):
    """Waiting for money."""

    name = "NO_COIN"

    def insert_coin(self, machine: "VendingMachine", coin: int) -> VendingState:
        machine.inserted_coins = coin
        print(f"Coin inserted. Current balance: Rs {coin}")
        return machine.has_coin_state

    def select_item(self, machine: "VendingMachine") -> VendingState:
        print("Please insert coin first!")
        return self

    def dispense(self, machine: "VendingMachine") -> VendingState:
        print("Please insert coin and select item first!")
        return self

    def return_coin(self, machine: "VendingMachine") -> VendingState:
        print("No coin to return!")
        return self

    def refill(self, machine: "VendingMachine", quantity: int) -> VendingState:
        print("Items refilling")
        machine.item_count += quantity
        return self


class HasCoinState(VendingState):
    """Money has been inserted; waiting for a selection."""

    name = "HAS_COIN"

    def insert_coin(self, machine: "VendingMachine", coin: int) -> VendingState:
        machine.inserted_coins += coin
        print(f"Additional coin inserted. Current balance: Rs {machine.inserted_coins}")
        return self

    def select_item(self, machine: "VendingMachine") -> VendingState:
        if machine.inserted_coins >= machine.item_price:
            print("Item selected. Dispensing...")
            change = machine.inserted_coins - machine.item_price
            if change > 0:
                print(f"Change returned: Rs {change}")
            machine.inserted_coins = 0
            return machine.dispense_state
        needed = machine.item_price - machine.inserted_coins
        print(f"Insufficient funds. Need Rs {needed} more.")
        return self

    def dispense(self, machine: "VendingMachine") -> VendingState:
        print("Please select an item first!")
        return self

    def return_coin(self, machine: "VendingMachine") -> VendingState:
        print(f"Coin returned: Rs {machine.inserted_coins}")
        machine.inserted_coins = 0
        return machine.no_coin_state

    def refill(self, machine: "VendingMachine", quantity: int) -> VendingState:
        print("Can't refil in this state")
        return self


class DispenseState(VendingState):
    """An item has been paid for and is on its way out."""

    name = "DISPENSING"

    def insert_coin(self, machine: "VendingMachine", coin: int) -> VendingState:
        print(f"Please wait, already dispensing item. Coin returned: Rs {coin}")
        return self

    def select_item(self, machine: "VendingMachine") -> VendingState:
        print("Already dispensing item. Please wait.")
        return self

    def dispense(self, machine: "VendingMachine") -> VendingState:
        print("Item dispensed!")
        machine.item_count -= 1
        if machine.item_count > 0:
            return machine.no_coin_state
        print("Machine is now sold out!")
        return machine.sold_out_state

    def return_coin(self, machine: "VendingMachine") -> VendingState:
        print("Cannot return coin while dispensing item!")
        return self

    def refill(self, machine: "VendingMachine", quantity: int) -> VendingState:
        print("Can't refil in this state")
        return self


class SoldOutState(VendingState):
    """No items left; only a refill helps."""

    name = "SOLD_OUT"

    def insert_coin(self, machine: "VendingMachine", coin: int) -> VendingState:
        print(f"Machine is sold out. Coin returned: Rs {coin}")
        return self

    def select_item(self, machine: "VendingMachine") -> VendingState:
        print("Machine is sold out!")
        return self

    def dispense(self, machine: "VendingMachine") -> VendingState:
        print("Machine is sold out!")
        return self

    def return_coin(self, machine: "VendingMachine") -> VendingState:
        print("Machine is sold out. No coin inserted.")
        return self

    def refill(self, machine: "VendingMachine", quantity: int) -> VendingState:
        print("Items refilling")
        machine.item_count += quantity
        return machine.no_coin_state


class VendingMachine:
    """Sells one kind of item at a fixed price, delegating to its current state."""

    def __init__(self, item_count: int, item_price: int) -> None:
        self.item_count = item_count
        self.item_price = item_price
        self.inserted_coins = 0
        self.no_coin_state = NoCoinState()
        self.has_coin_state = HasCoinState()
        self.dispense_state = DispenseState()
        self.sold_out_state = SoldOutState()
        self.state: VendingState = (
            self.no_coin_state if item_count > 0 else self.sold_out_state
        )

    def insert_coin(self, coin: int) -> None:
        self.state = self.state.insert_coin(self, coin)

    def select_item(self) -> None:
        self.state = self.state.select_item(self)

    def dispense(self) -> None:
        self.state = self.state.dispense(self)

    def return_coin(self) -> None:
        self.state = self.state.return_coin(self)

    def refill(self, quantity: int) -> None:
        self.state = self.state.refill(self, quantity)

    @property
    def state_name(self) -> str:
        """Name of the current state, such as ``NO_COIN``."""
        return self.state.name

    def status(self) -> str:
        """Print and return a summary of the machine."""
        text = (
            "\n--- Vending Machine Status ---\n"
            f"Items remaining: {self.item_count}\n"
            f"Inserted coin: Rs {self.inserted_coins}\n"
            f"Current state: {self.state_name}\n"
        )
        print(text)
        return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Walk a vending machine through a series of purchases."""
    parser = argparse.ArgumentParser(description="Vending machine demo.")
    parser.add_argument("--items", type=int, default=2, help="initial item count")
    parser.add_argument("--price", type=int, default=20, help="price of one item")
    args = parser.parse_args(argv)

    print("=== Water Bottle VENDING MACHINE ===")
    machine = VendingMachine(args.items, args.price)
    machine.status()

    print("1. Trying to select item without coin:")
    machine.select_item()
    machine.status()

    print("2. Inserting coin:")
    machine.insert_coin(10)
    machine.status()

    print("3. Selecting item with insufficient funds:")
    machine.select_item()
    machine.status()

    print("4. Adding more coins:")
    machine.insert_coin(10)
    machine.status()

    print("5. Selecting item Now")
    machine.select_item()
    machine.status()

    print("6. Dispensing item:")
    machine.dispense()
    machine.status()

    print("7. Buying last item:")
    machine.insert_coin(20)
    machine.select_item()
    machine.dispense()
    machine.status()

    print("8. Trying to use sold out machine:")
    machine.insert_coin(5)

    print("9. Trying to use sold out machine:")
    machine.refill(2)
    machine.status()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())