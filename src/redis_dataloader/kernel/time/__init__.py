"""Kernel time – Clock port + implementations."""
from redis_dataloader.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
