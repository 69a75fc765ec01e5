# patternworks

Small, self-contained models of classic object-oriented design patterns and
low-level design exercises. Every module can be imported and used as a
library. Four of them also have a command that runs a short demonstration.
The package needs nothing beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Pattern / topic | Main names |
| --- | --- | --- |
| `patternworks.flyweight` | Flyweight, with a baseline that does not use it | `AsteroidFlyweight`, `AsteroidFactory`, `AsteroidContext`, `SpaceGameWithFlyweight`, `Asteroid`, `SpaceGame` |
| `patternworks.chat` | Mediator, with a peer-to-peer baseline | `ChatMediator`, `ChatUser`, `PeerUser` |
| `patternworks.shopping_cart` | Single responsibility, open/closed | `Product`, `ShoppingCart`, `ShoppingCartPrinter`, `Persistence`, `SQLPersistence`, `MongoPersistence`, `FilePersistence` |
| `patternworks.prototype` | Prototype | `NPC` with `clone()` and `describe()` |
| `patternworks.splits` | Strategy for splitting expenses | `SplitType`, `Split`, `SplitStrategy`, `EqualSplit`, `ExactSplit`, `PercentageSplit`, `split_strategy_for` |
| `patternworks.ledger` | Compact group expense ledger | `LedgerUser`, `LedgerGroup`, `Ledger` |
| `patternworks.splitwise` | Expense sharing with groups, notifications and debt simplification | `User`, `Expense`, `Group`, `Splitwise`, `simplify_debts`, `NotAMemberError` |
| `patternworks.cars` | Abstraction and encapsulation | `Car`, `SportsCar` |
| `patternworks.vending` | State | `VendingMachine`, `VendingState`, `NoCoinState`, `HasCoinState`, `DispenseState`, `SoldOutState` |
| `patternworks.tictactoe` | Strategy, observer and factory | `Board`, `Symbol`, `TicTacToePlayer`, `StandardTicTacToeRules`, `TicTacToeGame`, `ConsoleNotifier`, `GameType`, `create_game` |

Most actions print what happens and also return the printed text, so they
can be used both interactively and from code.

## Commands

```
patternworks-flyweight [--count N] [--plain]
    Spawns N asteroids (default 1000000) sharing flyweights, renders the first
    five and reports the estimated memory use. With --plain every asteroid
    carries its full state instead.

patternworks-splitwise
    A hostel group shares lunch and dinner, simplifies its debts, records an
    individual expense and settles up before a member leaves.

patternworks-vending [--items N] [--price P]
    Walks a water bottle vending machine (default 2 items at Rs 20) through
    its states.

patternworks-tictactoe [--size N]
    An interactive two-player game on the terminal. The board size is asked
    for when --size is not given; each move is entered as "row column".
```

## Notes on behaviour

* An equal split divides the total by the number of people involved; an
  exact split takes the amounts as given; a percentage split takes each value
  as a percentage of the total. Exact and percentage splits raise
  `ValueError` when the number of values does not match the number of users.
* Balances that come within 0.01 of zero are treated as settled and dropped.
* In `patternworks.splitwise`, a member cannot leave a `Group` while they
  still owe or are owed money (`remove_member` returns `False`); acting for a
  user who is not a member raises `NotAMemberError`. An unknown user or group
  id passed to `Splitwise` raises `KeyError`.
* `simplify_debts` replaces a balance sheet with a smaller set of payments
  that settles the same net amounts, matching the largest creditors with the
  largest debtors first.
* In `patternworks.ledger`, expenses or payments that involve non-members
  raise `ValueError`, and unknown users or groups raise `KeyError`.
* `SportsCar.shift_gear` and `SportsCar.accelerate` raise `RuntimeError`
  while the engine is off; braking never takes the speed below zero.
* `Board.place_mark` raises `ValueError` for a cell that is off the board or
  already taken; `TicTacToeGame.play` raises `ValueError` with fewer than two
  players and returns the winner, or `None` for a draw.

## What it does not do

* Nothing is stored: the persistence classes in `patternworks.shopping_cart`
  only print a message, and all users, groups and balances live in memory for
  the life of the program.
* The memory figures reported by `patternworks.flyweight` are fixed estimates
  per object, not measurements of the running interpreter.
* There is no bank-account model and no snakes-and-ladders game here.