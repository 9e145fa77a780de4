"""How a Subject reacts when one of its listeners raises."""

from enum import StrEnum


class FailurePolicy(StrEnum):
    # Keep notifying the rest, then raise NotificationError.
    ISOLATE = "isolate"
    # Raise ListenerFailure at once; later listeners miss this value.
    ABORT = "abort"
