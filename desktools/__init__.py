"""Small desktop tools: a status-line generator, file tests and a menu engine."""

__version__ = "0.1.0"