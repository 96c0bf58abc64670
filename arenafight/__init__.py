"""Terminal arena battle between fighters drawn from a SQLite store of cities."""

__version__ = "0.1.0"
__all__ = ["__version__"]