"""Mini README: Shared utilities used across Ledgerly packages."""

from .clock import Clock, FixedClock, SystemClock

__all__ = ["Clock", "FixedClock", "SystemClock"]
