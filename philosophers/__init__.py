"""Dining philosophers simulation with per-fork locks or a shared fork semaphore."""

__version__ = "1.0.0"
__all__ = ["args", "clock", "config", "table", "semaphore_table", "cli"]