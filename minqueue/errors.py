"""Exceptions raised by minqueue.

Every error is local to the call that raised it: the queue is left exactly
as it was before the call.
"""


class QueueError(Exception):
    """Base class for all minqueue errors."""


class NotConfigured(QueueError, TypeError):
    """No callable key extractor was supplied."""


class CapacityExceeded(QueueError, OverflowError):
    """Adding one more entry would exceed the queue's maximum size."""

    def __init__(self, max_size: int) -> None:
        super().__init__(f"queue is full ({max_size} entries)")
        self.max_size = max_size


class InvalidKey(QueueError, ValueError):
    """The extractor returned something that is not a usable numeric key."""

    def __init__(self, obj: object, key: object) -> None:
        super().__init__(f"invalid key {key!r} for {obj!r}")
        self.obj = obj
        self.key = key
