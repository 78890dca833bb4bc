"""Platform integrations."""

from .wakelock import CaffeinateWakeLock

__all__ = ["CaffeinateWakeLock"]
