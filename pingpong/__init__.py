"""A paddle-and-ball arcade game against a computer opponent, played with pygame."""

__version__ = "0.1.0"