"""Overall life-balance score across the user's life domains."""

from aion.domain.analytics.common import clamp, round_half_up
from aion.domain.entities import LifeDomain


def overall_score(domains: list[LifeDomain]) -> int:
    """Mean domain score, rounded half-up; 0 when there are no domains."""
    if not domains:
        return 0
    return round_half_up(sum(d.score for d in domains) / len(domains))


def lowest_domain(domains: list[LifeDomain]) -> LifeDomain | None:
    """The domain with the lowest score; the first one wins a tie."""
    lowest = None
    for domain in domains:
        if lowest is None or domain.score < lowest.score:
            lowest = domain
    return lowest


def display_score(score: float) -> int:
    return int(clamp(score))
