"""Cancellable one-shot and periodic timers backed by a thread."""

__version__ = "1.0.0"
__all__ = ["timer"]