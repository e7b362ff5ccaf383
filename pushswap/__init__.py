"""Two-stack integer sorting that prints the operations it performs, with small string, memory and I/O helpers."""

__version__ = "1.0.0"