"""CPU-time and steady clocks and RFC 3339 timestamps for benchmarks, in the timers module."""

__version__ = "0.1.0"
__all__ = ["timers"]