# consoleapps

A handful of small interactive programs for the terminal. Each one is a
command and also a module whose logic can be used from Python.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

| Command                  | What it does                                                              |
|--------------------------|---------------------------------------------------------------------------|
| `consoleapps-banking`    | Create accounts, deposit, withdraw and check balances kept in a binary file |
| `consoleapps-clock`      | Clears the screen and shows the time and date, once a second              |
| `consoleapps-guess`      | Guess a secret number between 1 and 100                                   |
| `consoleapps-progress`   | Progress bars for five tasks advancing at random speeds                   |
| `consoleapps-calculator` | Menu calculator: add, subtract, multiply, divide, modulus, power          |
| `consoleapps-sudoku`     | Prints a sample sudoku, then its solution found by backtracking           |
| `consoleapps-tictactoe`  | Tic-tac-toe against the computer, in easy or hard mode                    |
| `consoleapps-users`      | Register users and log in, with the password masked as it is typed        |

Options:

- `consoleapps-banking --file PATH` — data file to use (default `account.bin`
  in the current directory).
- `consoleapps-clock --ticks N` — stop after N updates instead of running
  until interrupted.
- `consoleapps-guess --seed N`, `consoleapps-tictactoe --seed N` — seed the
  random choices.
- `consoleapps-progress --seed N --interval SECONDS` — seed the task speeds and
  set the delay between frames (default 1 second).

The interactive commands end quietly when their input runs out.

## Library use

```python
from consoleapps.sudoku import PUZZLE, solve, format_grid

solved = solve(PUZZLE)          # a new grid; raises ValueError if unsolvable
print(format_grid(solved))
```

```python
from consoleapps.banking import AccountStore, InsufficientFundsError

store = AccountStore("account.bin")
store.create("Ada", "Example", 1001)
store.deposit(1001, 50.0)
try:
    store.withdraw(1001, 80.0)
except InsufficientFundsError:
    print("not enough money")
print(store.balance(1001))
```

Balances are stored as single-precision floats in fixed-size records; names
keep at most 49 bytes. An unknown account number raises
`AccountNotFoundError`, and a withdrawal needs a balance strictly greater than
the amount.

```python
from consoleapps.calculator import divide, modulus, power

print(divide(7, 2), modulus(-7, 3), power(2, 10))
```

`divide` and `modulus` raise `ZeroDivisionError` for a zero divisor;
`modulus` gives a remainder whose sign follows the dividend.

Other modules:

- `consoleapps.clock`: `format_time`, `format_date`, `clear_screen`.
- `consoleapps.guessing`: `GuessingGame` (with `guess`, `attempts`, `solved`)
  and the `Hint` enum.
- `consoleapps.progress`: `Task` (with `advance` and `done`), `make_tasks`,
  `render_progress`.
- `consoleapps.tictactoe`: `new_board`, `check_win`, `check_draw`,
  `is_valid_move`, `computer_move`, `format_board`, `Difficulty`, `Score`.
- `consoleapps.users`: `UserRegistry` (with `register` and `login`), `User`,
  `RegistryFullError`, `read_password`.

## Limitations

- `consoleapps-users` keeps users in memory only: registrations are lost when
  the program exits, at most 10 users are accepted, and passwords are held as
  plain text.
- `consoleapps-sudoku` solves only its built-in sample puzzle; other grids can
  be solved through `consoleapps.sudoku.solve`.
- The bank file has no locking; two programs writing it at once can clash.