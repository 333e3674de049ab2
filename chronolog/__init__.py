"""Logging building blocks: fractional-second timestamps, a thread-safe queue, exception naming, stack dumps and latency bucketing."""

__version__ = "0.1.0"
__all__ = ["timefmt", "shared_queue", "stacktrace", "performance"]