[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoleapps"
version = "0.1.0"
description = "Small terminal programs: bank accounts, clock, number guessing, progress bars, calculator, sudoku solver, tic-tac-toe and user login."
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "terminal", "games", "sudoku", "tic-tac-toe", "calculator"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consoleapps-banking = "consoleapps.banking:main"
consoleapps-clock = "consoleapps.clock:main"
consoleapps-guess = "consoleapps.guessing:main"
consoleapps-progress = "consoleapps.progress:main"
consoleapps-calculator = "consoleapps.calculator:main"
consoleapps-sudoku = "consoleapps.sudoku:main"
consoleapps-tictactoe = "consoleapps.tictactoe:main"
consoleapps-users = "consoleapps.users:main"

[tool.hatch.build.targets.wheel]
packages = ["consoleapps"]

[tool.pytest.ini_options]
addopts = "-ra"
