"""Domain entity — a self-assessed area of life such as Health or Work."""

from dataclasses import dataclass


@dataclass
class LifeDomain:
    """A named life area with a 0–100 score.

    The score is stored unclamped; clamping happens when it is displayed.
    """

    user_id: int
    name: str
    score: int
    icon: str
    color: str
    id: int | None = None
