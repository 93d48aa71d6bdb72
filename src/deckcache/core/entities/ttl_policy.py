"""TTL policy value object."""

from dataclasses import dataclass
from datetime import timedelta

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR


@dataclass(frozen=True)
class TTLPolicy:
    """Positive and negative entry lifetimes for one source, in seconds.

    A negative entry must always expire before a positive one would, so a
    failing upstream is retried sooner than a healthy one is refreshed.
    """

    positive: int
    negative: int = HOUR

    def __post_init__(self) -> None:
        if self.negative <= 0:
            raise ValueError("Negative TTL must be greater than zero")
        if self.negative >= self.positive:
            raise ValueError(
                f"Negative TTL ({self.negative}s) must be shorter than "
                f"positive TTL ({self.positive}s)"
            )

    @property
    def positive_ttl(self) -> timedelta:
        """Positive lifetime as a timedelta."""
        return timedelta(seconds=self.positive)

    @property
    def negative_ttl(self) -> timedelta:
        """Negative lifetime as a timedelta."""
        return timedelta(seconds=self.negative)

    @classmethod
    def for_listing(cls, positive: int) -> "TTLPolicy":
        """Build a policy for short-lived listings with a configurable TTL.

        The negative TTL is an hour, or half the positive TTL when that is
        shorter, so the ordering holds for any configured value.
        """
        if positive < 2:
            raise ValueError("Listing TTL must be at least 2 seconds")
        return cls(positive=positive, negative=min(HOUR, positive // 2))
