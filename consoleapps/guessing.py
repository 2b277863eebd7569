"""Guess a secret number between 1 and 100."""

from __future__ import annotations

import argparse
import enum
import random

LOWEST = 1
HIGHEST = 100


class Hint(enum.Enum):
    LARGER = "Guess Larger Numbers."
    SMALLER = "Guess Smaller Numbers."
    CORRECT = "Correct"


class GuessingGame:
    """One round: a secret number and the count of guesses made."""

    def __init__(self, secret: int | None = None, rng: random.Random | None = None) -> None:
        if secret is None:
            secret = (rng or random.Random()).randint(LOWEST, HIGHEST)
        self.secret = secret
        self.attempts = 0
        self.solved = False

    def guess(self, number: int) -> Hint:
        """Record a guess and say which way the secret lies."""
        self.attempts += 1
        if number < self.secret:
            return Hint.LARGER
        if number > self.secret:
            return Hint.SMALLER
        self.solved = True
        return Hint.CORRECT


def _read_int(prompt: str) -> int:
    while True:
        words = input(prompt).split()
        if not words:
            continue
        try:
            return int(words[0])
        except ValueError:
            continue


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Number guessing game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the secret number")
    args = parser.parse_args(argv)
    game = GuessingGame(rng=random.Random(args.seed))
    print("Welcome to the world of Number Guessing Game.")
    try:
        while not game.solved:
            hint = game.guess(_read_int(f"Please enter your Guess ({LOWEST}-{HIGHEST}) : "))
            if hint is Hint.CORRECT:
                print(
                    "Congratulations ##You successfully guessed the number "
                    f"in {game.attempts} attemps.##"
                )
            else:
                print(hint.value)
    except EOFError:
        return 1
    print("Thanks for Playing the game.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())