"""Domain models for the loading state of upstream feeds."""

from dataclasses import dataclass
from enum import Enum


class FeedStatus(Enum):
    """Lifecycle of a single upstream feed."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class FeedState:
    """Status of one feed plus the message shown when it failed."""

    status: FeedStatus = FeedStatus.IDLE
    error_message: str = ""

    @property
    def is_loading(self) -> bool:
        return self.status is FeedStatus.LOADING

    @property
    def has_error(self) -> bool:
        return self.status is FeedStatus.ERROR

    @classmethod
    def idle(cls) -> "FeedState":
        return cls(status=FeedStatus.IDLE)

    @classmethod
    def loading(cls) -> "FeedState":
        return cls(status=FeedStatus.LOADING)

    @classmethod
    def ready(cls) -> "FeedState":
        return cls(status=FeedStatus.READY)

    @classmethod
    def failed(cls, message: str) -> "FeedState":
        """Return an error state carrying the given message."""
        return cls(status=FeedStatus.ERROR, error_message=message)


def combine_feed_states(*states: FeedState) -> FeedState:
    """Fold several feed states into the one shown to the user.

    Args:
        *states: Feed states in display order.

    Returns:
        FeedState: Error if any feed failed, else loading if any feed is
        in flight, else ready when every feed is ready, else idle.
    """
    messages = [state.error_message for state in states if state.has_error]
    if messages:
        return FeedState.failed("; ".join(messages))
    if any(state.is_loading for state in states):
        return FeedState.loading()
    if states and all(state.status is FeedStatus.READY for state in states):
        return FeedState.ready()
    return FeedState.idle()


__all__ = ["FeedStatus", "FeedState", "combine_feed_states"]
