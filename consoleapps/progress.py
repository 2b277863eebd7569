"""Several tasks advancing at random speeds, drawn as progress bars."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass

from consoleapps.clock import clear_screen

BAR_LENGTH = 50
MAX_TASKS = 5


@dataclass
class Task:
    number: int
    steps: int
    progress: int = 0

    def advance(self) -> None:
        """Move forward by one step, capped at 100 percent."""
        self.progress = min(self.progress + self.steps, 100)

    def done(self) -> bool:
        return self.progress >= 100


def make_tasks(count: int = MAX_TASKS, rng: random.Random | None = None) -> list[Task]:
    """Create tasks numbered from 1, each stepping 1 to 5 percent per tick."""
    rng = rng or random.Random()
    return [Task(number=number, steps=rng.randint(1, 5)) for number in range(1, count + 1)]


def render_progress(task: Task) -> str:
    """Return one line with the task's bar and percentage."""
    filled = task.progress * BAR_LENGTH // 100

    def cell(position: int) -> str:
        if position < filled:
            return "="
        if position == filled:
            return ">"
        return " "

    bar = "".join(cell(position) for position in range(1, BAR_LENGTH))
    return f"Task {task.number} : [{bar}] {task.progress}%"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Animated progress bars.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between frames")
    args = parser.parse_args(argv)
    tasks = make_tasks(MAX_TASKS, random.Random(args.seed))
    while True:
        clear_screen()
        for task in tasks:
            task.advance()
            print(render_progress(task))
        time.sleep(args.interval)
        if all(task.done() for task in tasks):
            break
    print("All Tasks Completed!!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())