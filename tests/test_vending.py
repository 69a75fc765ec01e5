import pytest

from patternworks.vending import (
    DispenseState,
    HasCoinState,
    NoCoinState,
    SoldOutState,
    VendingMachine,
    main,
)


@pytest.fixture
def machine():
    return VendingMachine(2, 20)


def test_initial_state_with_items(machine):
    assert machine.state_name == "NO_COIN"
    assert isinstance(machine.state, NoCoinState)
    assert machine.inserted_coins == 0


def test_initial_state_without_items():
    empty = VendingMachine(0, 20)
    assert empty.state_name == "SOLD_OUT"
    assert isinstance(empty.state, SoldOutState)


def test_select_without_coin_stays(machine, capsys):
    machine.select_item()
    assert machine.state_name == "NO_COIN"
    assert "Please insert coin first!" in capsys.readouterr().out


def test_return_coin_without_coin(machine, capsys):
    machine.return_coin()
    assert machine.state_name == "NO_COIN"
    assert "No coin to return!" in capsys.readouterr().out


def test_insert_coin_moves_to_has_coin(machine):
    machine.insert_coin(10)
    assert machine.state_name == "HAS_COIN"
    assert isinstance(machine.state, HasCoinState)
    assert machine.inserted_coins == 10


def test_insufficient_funds(machine, capsys):
    machine.insert_coin(10)
    machine.select_item()
    assert machine.state_name == "HAS_COIN"
    assert machine.inserted_coins == 10
    assert f"Insufficient funds. Need Rs {10} more." in capsys.readouterr().out


def test_additional_coins_accumulate(machine):
    machine.insert_coin(10)
    machine.insert_coin(10)
    assert machine.inserted_coins == 10 + 10
    assert machine.state_name == "HAS_COIN"


def test_full_purchase(machine):
    machine.insert_coin(20)
    machine.select_item()
    assert machine.state_name == "DISPENSING"
    assert isinstance(machine.state, DispenseState)
    assert machine.inserted_coins == 0
    machine.dispense()
    assert machine.state_name == "NO_COIN"
    assert machine.item_count == 2 - 1


def test_change_returned(machine, capsys):
    machine.insert_coin(25)
    machine.select_item()
    assert "Change returned: Rs 5" in capsys.readouterr().out
    assert machine.inserted_coins == 0


def test_last_item_sells_out(capsys):
    machine = VendingMachine(1, 20)
    machine.insert_coin(20)
    machine.select_item()
    machine.dispense()
    assert machine.state_name == "SOLD_OUT"
    assert machine.item_count == 0
    assert "Machine is now sold out!" in capsys.readouterr().out


def test_return_coin_from_has_coin(machine, capsys):
    machine.insert_coin(15)
    machine.return_coin()
    assert machine.state_name == "NO_COIN"
    assert machine.inserted_coins == 0
    assert "Coin returned: Rs 15" in capsys.readouterr().out


def test_refill_refused_with_coin(machine):
    machine.insert_coin(10)
    machine.refill(5)
    assert machine.item_count == 2
    assert machine.state_name == "HAS_COIN"


def test_refill_refused_while_dispensing(machine):
    machine.insert_coin(20)
    machine.select_item()
    machine.refill(5)
    assert machine.item_count == 2
    assert machine.state_name == "DISPENSING"


def test_dispensing_ignores_coins_and_returns(machine):
    machine.insert_coin(20)
    machine.select_item()
    machine.insert_coin(10)
    machine.return_coin()
    machine.select_item()
    assert machine.inserted_coins == 0
    assert machine.state_name == "DISPENSING"


def test_dispense_from_has_coin_needs_selection(machine, capsys):
    machine.insert_coin(20)
    machine.dispense()
    assert machine.state_name == "HAS_COIN"
    assert "Please select an item first!" in capsys.readouterr().out


def test_refill_from_sold_out():
    machine = VendingMachine(0, 20)
    machine.insert_coin(5)
    assert machine.inserted_coins == 0
    machine.refill(3)
    assert machine.state_name == "NO_COIN"
    assert machine.item_count == 3


def test_refill_in_no_coin_adds_items(machine):
    machine.refill(4)
    assert machine.item_count == 2 + 4
    assert machine.state_name == "NO_COIN"


def test_status_text(machine):
    machine.insert_coin(10)
    text = machine.status()
    assert "Items remaining: 2" in text
    assert "Inserted coin: Rs 10" in text
    assert "Current state: HAS_COIN" in text


def test_main_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== Water Bottle VENDING MACHINE ===" in out
    assert "Machine is sold out. Coin returned: Rs 5" in out
    assert out.rstrip().endswith("Current state: NO_COIN")