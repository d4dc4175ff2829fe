"""Text messaging between processes over SIGUSR1/SIGUSR2 signals, with small text helpers."""

__version__ = "0.1.0"