"""Small interactive terminal programs and the logic behind them."""

__version__ = "0.1.0"