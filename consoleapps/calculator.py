"""A menu-driven calculator for two operands."""

from __future__ import annotations

import argparse
import math
from typing import Callable

MENU = "\n".join(
    [
        "",
        "+-------------------------------------+",
        "|    Welcome to Simple Calculator     |",
        "+-------------------------------------+",
        "Choose one of the following options:",
        "1. Addition",
        "2. Substraction",
        "3. Multiplication",
        "4. Division",
        "5. Modulus",
        "6. Power",
        "7. Exit",
    ]
)
ZERO_DIVISOR = "Second Number should not be 0."


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    if b == 0:
        raise ZeroDivisionError(ZERO_DIVISOR)
    return a / b


def modulus(a: int, b: int) -> int:
    """Integer remainder whose sign follows the dividend."""
    if b == 0:
        raise ZeroDivisionError(ZERO_DIVISOR)
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _odd_integer(value: float) -> bool:
    return float(value).is_integer() and int(value) % 2 == 1


def power(a: float, b: float) -> float:
    """Raise a to b with IEEE results in place of domain and range errors."""
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _odd_integer(b) else math.inf
    except ValueError:
        if a == 0 and b < 0:
            return math.copysign(math.inf, a) if _odd_integer(b) else math.inf
        return math.nan


def _read(prompt: str, convert: Callable[[str], object]):
    while True:
        words = input(prompt).split()
        if not words:
            continue
        try:
            return convert(words[0])
        except ValueError:
            continue


_FLOAT_OPERATIONS = {1: add, 2: subtract, 3: multiply, 4: divide, 6: power}


def _operands(convert):
    first = _read("Enter the first number : ", convert)
    second = _read("Enter the second number : ", convert)
    return first, second


def _run(choice: int) -> None:
    if choice == 5:
        first, second = _operands(int)
        try:
            print(f"The result is : {modulus(first, second)}")
        except ZeroDivisionError as exc:
            print(exc)
        return
    operation = _FLOAT_OPERATIONS[choice]
    first, second = _operands(float)
    try:
        print(f"The result is : {operation(first, second):.2f}")
    except ZeroDivisionError as exc:
        print(exc)


def main(argv=None) -> int:
    argparse.ArgumentParser(description="Simple calculator.").parse_args(argv)
    try:
        while True:
            print(MENU)
            choice = _read("Enter your choice : ", int)
            if choice == 7:
                print("Exit!!")
                break
            if choice in _FLOAT_OPERATIONS or choice == 5:
                _run(choice)
            else:
                print("Wrong Choice !!")
    except EOFError:
        return 1
    print("Thanks for Using this calculator.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())