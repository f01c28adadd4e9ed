"""Balance trend classification."""

from enum import Enum


class Trend(str, Enum):
    """Three-way classification of a balance figure."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
