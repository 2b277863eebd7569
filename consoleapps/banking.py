"""Bank accounts kept as fixed-size binary records in a single file."""

from __future__ import annotations

import argparse
import os
import struct
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Iterator

DEFAULT_PATH = "account.bin"
NAME_SIZE = 50
_RECORD = struct.Struct(f"<{NAME_SIZE}s{NAME_SIZE}sif")
RECORD_SIZE = _RECORD.size

MENU = "\n".join(
    [
        "+------------------------------------------+",
        "|     Welcome to Bank Management System    |",
        "+------------------------------------------+",
        "1. Create Account",
        "2. Deposite Money",
        "3. Withdraw Money",
        "4. Check Balance",
        "5. Exit",
    ]
)


def _single(value: float) -> float:
    """Round a number to single precision, as the record stores it."""
    return _RECORD.unpack(_RECORD.pack(b"", b"", 0, value))[3]


def _encode_name(name: str) -> bytes:
    return name.encode("utf-8")[: NAME_SIZE - 1]


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


class AccountNotFoundError(LookupError):
    """No record carries the requested account number."""

    def __init__(self, account_number: int) -> None:
        super().__init__(f"Account Number : {account_number} is not found.!!")
        self.account_number = account_number


class InsufficientFundsError(ValueError):
    """The balance does not exceed the amount to withdraw."""


@dataclass(frozen=True)
class Account:
    first_name: str
    last_name: str
    account_number: int
    balance: float = 0.0

    def pack(self) -> bytes:
        """Serialise the account to one fixed-size record."""
        return _RECORD.pack(
            _encode_name(self.first_name),
            _encode_name(self.last_name),
            self.account_number,
            self.balance,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Account":
        """Build an account from one record."""
        first, last, number, balance = _RECORD.unpack(data)
        return cls(_decode_name(first), _decode_name(last), number, balance)


class AccountStore:
    """Accounts appended to and updated in place within a binary file."""

    def __init__(self, path: str | os.PathLike = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def accounts(self) -> Iterator[Account]:
        """Yield every stored account in file order."""
        with open(self.path, "rb") as fh:
            while len(record := fh.read(RECORD_SIZE)) == RECORD_SIZE:
                yield Account.unpack(record)

    def create(self, first_name: str, last_name: str, account_number: int) -> Account:
        """Append a new account with a zero balance."""
        account = Account(first_name, last_name, account_number, 0.0)
        with open(self.path, "ab") as fh:
            fh.write(account.pack())
        return Account.unpack(account.pack())

    def _modify(self, account_number: int, update: Callable[[Account], Account]) -> Account:
        with open(self.path, "r+b") as fh:
            while len(record := fh.read(RECORD_SIZE)) == RECORD_SIZE:
                account = Account.unpack(record)
                if account.account_number == account_number:
                    packed = update(account).pack()
                    fh.seek(-RECORD_SIZE, os.SEEK_CUR)
                    fh.write(packed)
                    return Account.unpack(packed)
        raise AccountNotFoundError(account_number)

    def deposit(self, account_number: int, amount: float) -> float:
        """Add to the first matching account and return its new balance."""
        amount = _single(amount)
        updated = self._modify(
            account_number, lambda acc: replace(acc, balance=acc.balance + amount)
        )
        return updated.balance

    def withdraw(self, account_number: int, amount: float) -> float:
        """Take from the first matching account and return its new balance."""
        amount = _single(amount)

        def take(acc: Account) -> Account:
            if not acc.balance > amount:
                raise InsufficientFundsError("Insufficient Funds.!!")
            return replace(acc, balance=acc.balance - amount)

        return self._modify(account_number, take).balance

    def balance(self, account_number: int) -> float:
        """Return the balance of the first matching account."""
        for account in self.accounts():
            if account.account_number == account_number:
                return account.balance
        raise AccountNotFoundError(account_number)


def _read(prompt: str, convert: Callable[[str], object]):
    while True:
        words = input(prompt).split()
        if not words:
            continue
        try:
            return convert(words[0])
        except ValueError:
            continue


def _create(store: AccountStore) -> None:
    first = _read("Enter your First Name : ", str)[: NAME_SIZE - 1]
    last = _read("Enter your Last Name : ", str)[: NAME_SIZE - 1]
    number = _read("Enter your Account Number : ", int)
    print(f"{first} {last} {number}")
    try:
        store.create(first, last, number)
    except OSError:
        print("Error while Opening the file.!!")
        return
    print("Account Created Successfully.!!")


def _deposit(store: AccountStore) -> None:
    number = _read("Enter your Account Number : ", int)
    amount = _read("Enter amount to deposite : ", float)
    try:
        balance = store.deposit(number, amount)
    except OSError:
        print("Error while Opening the file.!!")
    except AccountNotFoundError as exc:
        print(exc)
    else:
        print(
            f"You Deposidted {amount:.2f} Successfully in your Account.\n"
            f"Your Current Account Balance is : {balance:.2f}"
        )


def _withdraw(store: AccountStore) -> None:
    number = _read("Enter your Account Number : ", int)
    amount = _read("Enter amount to withdraw : ", float)
    try:
        balance = store.withdraw(number, amount)
    except OSError:
        print("Error while Opening the file.!!")
    except (AccountNotFoundError, InsufficientFundsError) as exc:
        print(exc.args[0])
    else:
        print(
            f"You Withdrawal {amount:.2f} Successfully in your Account.\n"
            f"Your Current Account Balance is : {balance:.2f}"
        )


def _check(store: AccountStore) -> None:
    number = _read("Enter your Account Number : ", int)
    try:
        balance = store.balance(number)
    except OSError:
        print("Error while Opening the file.!!")
    except AccountNotFoundError as exc:
        print(exc)
    else:
        print(f"Your Current Account Balance is : {balance:.2f}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simple bank account manager.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="account data file")
    args = parser.parse_args(argv)
    store = AccountStore(args.file)
    actions = {1: _create, 2: _deposit, 3: _withdraw, 4: _check}
    try:
        while True:
            print(MENU)
            choice = _read("Enter your choice : ", int)
            if choice == 5:
                print("Exiting")
                break
            action = actions.get(choice)
            if action is None:
                print("Wrong Choice")
            else:
                action(store)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())