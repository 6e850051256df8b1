"""
Candidate Filter — single-pass pruning of ranked conversion candidates.

Candidates are fed one at a time in ascending cost order. Each one is
judged against the session's top candidate and the values already
accepted, and classified as GOOD (keep), BAD (drop, keep enumerating) or
STOP (drop and stop enumerating).

INVARIANTS:
- The top candidate is set once per session, by the first candidate that
  is not CONTEXT_SENSITIVE
- The seen set only grows within a session, and only with GOOD values
- A value accepted once is never accepted again in the same session
- Reset() ends the session: nothing leaks into the next one

PRECONDITION:
- Candidates arrive in non-decreasing cost order. The stop rule depends on
  it. Enable ``check_order`` to verify it while debugging.

Not thread-safe. Use one instance per enumeration.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from convfilter.config import FilterThresholds, settings
from convfilter.models.candidate import Candidate
from convfilter.models.failure import CandidateOrderError, FilterContractError
from convfilter.models.pos_matcher import PosMatcher

logger = logging.getLogger(__name__)


class FilterResult(str, Enum):
    """Outcome for a single candidate."""

    GOOD = "good"
    BAD = "bad"
    STOP = "stop"


class FilterReason(str, Enum):
    """The rule that decided a candidate."""

    CONTEXT_SENSITIVE = "context_sensitive"
    CAPACITY = "capacity"
    DUPLICATE = "duplicate"
    SINGLE_NODE = "single_node"
    SINGLE_CHARACTER = "single_character"
    EARLY_RANK = "early_rank"
    NOISY_PREFIX = "noisy_prefix"
    COST = "cost"
    STRUCTURE_COST = "structure_cost"
    ACCEPTED = "accepted"


@dataclass
class FilterMetrics:
    """Counts recorded over one filtering session."""

    good: int = 0
    bad: int = 0
    stop: int = 0
    reason_counts: dict[FilterReason, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.good + self.bad + self.stop

    def record(self, result: FilterResult, reason: FilterReason) -> None:
        if result is FilterResult.GOOD:
            self.good += 1
        elif result is FilterResult.BAD:
            self.bad += 1
        else:
            self.stop += 1
        self.reason_counts[reason] = self.reason_counts.get(reason, 0) + 1


class CandidateFilter:
    """
    Stateful GOOD/BAD/STOP classifier for one candidate enumeration.

    Usage:
        candidate_filter = CandidateFilter(pos_matcher)
        for candidate in candidates:
            result = candidate_filter.filter(candidate)
            if result is FilterResult.STOP:
                break
            if result is FilterResult.GOOD:
                keep(candidate)
        candidate_filter.reset()
    """

    def __init__(
        self,
        pos_matcher: PosMatcher,
        thresholds: FilterThresholds | None = None,
        check_order: bool | None = None,
    ):
        self._pos_matcher = pos_matcher
        self._thresholds = thresholds or FilterThresholds()
        self._check_order = settings.debug if check_order is None else check_order
        self._seen: set[str] = set()
        self._top_candidate: Candidate | None = None
        self._last_cost: int | None = None
        self._last_reason: FilterReason | None = None
        self._metrics = FilterMetrics()

    @property
    def thresholds(self) -> FilterThresholds:
        return self._thresholds

    @property
    def top_candidate(self) -> Candidate | None:
        """Cost baseline for the current session."""
        return self._top_candidate

    @property
    def seen(self) -> frozenset[str]:
        """Values accepted in the current session."""
        return frozenset(self._seen)

    @property
    def rank(self) -> int:
        """Number of candidates accepted so far."""
        return len(self._seen)

    @property
    def last_reason(self) -> FilterReason | None:
        return self._last_reason

    @property
    def metrics(self) -> FilterMetrics:
        return self._metrics

    def reset(self) -> None:
        """Start a new session."""
        self._seen.clear()
        self._top_candidate = None
        self._last_cost = None
        self._last_reason = None
        self._metrics = FilterMetrics()

    def filter(self, candidate: Candidate) -> FilterResult:
        """
        Classify a candidate and record it if it is GOOD.

        Raises:
            FilterContractError: If candidate is not a Candidate
            CandidateOrderError: If order checking is on and the cost
                went down since the previous candidate
        """
        if not isinstance(candidate, Candidate):
            raise FilterContractError(
                "filter() requires a Candidate",
                detail=f"got {type(candidate).__name__}",
            )

        result, reason = self._evaluate(candidate)
        self._last_reason = reason
        self._metrics.record(result, reason)

        if result is FilterResult.GOOD:
            self._seen.add(candidate.value)
        return result

    def _evaluate(self, candidate: Candidate) -> tuple[FilterResult, FilterReason]:
        t = self._thresholds

        # The cost of a context-sensitive candidate is unreliable, so it is
        # neither compared against nor used as the baseline.
        if candidate.is_context_sensitive:
            return FilterResult.GOOD, FilterReason.CONTEXT_SENSITIVE

        if self._check_order:
            self._verify_order(candidate)

        rank = len(self._seen)
        if self._top_candidate is None or rank == 0:
            self._top_candidate = candidate
        top = self._top_candidate

        if rank + 1 >= t.max_candidates_size:
            logger.debug("stopping enumeration: %d candidates seen", rank)
            return FilterResult.STOP, FilterReason.CAPACITY

        if candidate.value in self._seen:
            return FilterResult.BAD, FilterReason.DUPLICATE

        if candidate.is_single_node:
            logger.debug("don't filter single segment: %s", candidate.value)
            return FilterResult.GOOD, FilterReason.SINGLE_NODE

        if len(candidate.value) == 1:
            logger.debug("don't filter single character: %s", candidate.value)
            return FilterResult.GOOD, FilterReason.SINGLE_CHARACTER

        top_cost = max(t.min_cost, top.cost)
        top_structure_cost = max(t.min_cost, top.structure_cost)

        # A compound top candidate can have a structure cost of 0, which
        # would make regular 2nd and 3rd candidates look implausible.
        if (
            rank < t.no_filter_rank
            and candidate.cost < top_cost + t.no_filter_cost_offset
            and candidate.structure_cost < t.no_filter_structure_cost
        ):
            return FilterResult.GOOD, FilterReason.EARLY_RANK

        if rank >= t.no_filter_rank and self._starts_with_noun_prefix(candidate):
            logger.debug("removing noisy prefix pattern: %s", candidate.value)
            return FilterResult.BAD, FilterReason.NOISY_PREFIX

        # Personal names are rare but must still be offered: only the
        # structure cost can reject them.
        cost_offset: float = t.cost_offset
        if candidate.lid in (
            self._pos_matcher.get_last_name_id(),
            self._pos_matcher.get_first_name_id(),
        ):
            cost_offset = math.inf

        if (
            top_cost + cost_offset < candidate.cost
            and top_structure_cost + t.min_structure_cost_offset < candidate.structure_cost
        ):
            logger.debug(
                "cost is invalid: top_cost=%d cost_offset=%s value=%s cost=%d "
                "top_structure_cost=%d structure_cost=%d lid=%d rid=%d",
                top_cost,
                cost_offset,
                candidate.value,
                candidate.cost,
                top_structure_cost,
                candidate.structure_cost,
                candidate.lid,
                candidate.rid,
            )
            # There may still be valid candidates right after this one
            # while few have been accepted.
            if rank < t.stop_enumeration_cache_size:
                return FilterResult.BAD, FilterReason.COST
            return FilterResult.STOP, FilterReason.COST

        if top_structure_cost + t.structure_cost_offset < candidate.structure_cost:
            logger.debug(
                "structure cost is invalid: %s %d %d",
                candidate.value,
                candidate.structure_cost,
                candidate.cost,
            )
            return FilterResult.BAD, FilterReason.STRUCTURE_COST

        return FilterResult.GOOD, FilterReason.ACCEPTED

    def _starts_with_noun_prefix(self, candidate: Candidate) -> bool:
        """True for multi-node candidates led by a standalone noun prefix."""
        if len(candidate.nodes) <= 1:
            return False
        first = candidate.nodes[0]
        return first.lid == first.rid and self._pos_matcher.is_noun_prefix(first.lid)

    def _verify_order(self, candidate: Candidate) -> None:
        if self._last_cost is not None and candidate.cost < self._last_cost:
            raise CandidateOrderError(self._last_cost, candidate.cost, candidate.value)
        self._last_cost = candidate.cost
