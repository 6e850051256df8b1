"""
Enumeration driver — runs a candidate stream through a CandidateFilter.

The stream is consumed lazily: nothing after the first STOP is pulled
from the iterable.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from convfilter.filtering.candidate_filter import CandidateFilter, FilterResult
from convfilter.models.candidate import Candidate

logger = logging.getLogger(__name__)


@dataclass
class EnumerationResult:
    """Outcome of filtering one candidate stream."""

    accepted: list[Candidate] = field(default_factory=list)
    rejected_count: int = 0
    consumed: int = 0
    stopped: bool = False

    @property
    def values(self) -> list[str]:
        return [c.value for c in self.accepted]


def filter_candidates(
    candidates: Iterable[Candidate],
    candidate_filter: CandidateFilter,
    *,
    reset: bool = True,
) -> EnumerationResult:
    """
    Filter a stream of candidates supplied in ascending cost order.

    Args:
        candidates: Candidates, cheapest first
        candidate_filter: Filter to use
        reset: Start a new filter session first (default True)

    Returns:
        EnumerationResult with the GOOD candidates in input order
    """
    if reset:
        candidate_filter.reset()

    result = EnumerationResult()
    for candidate in candidates:
        result.consumed += 1
        outcome = candidate_filter.filter(candidate)
        if outcome is FilterResult.STOP:
            result.stopped = True
            break
        if outcome is FilterResult.GOOD:
            result.accepted.append(candidate)
        else:
            result.rejected_count += 1

    logger.info(
        "candidate_enumeration_filtered",
        extra={
            "consumed": result.consumed,
            "accepted": len(result.accepted),
            "rejected": result.rejected_count,
            "stopped": result.stopped,
        },
    )
    return result
