"""
convfilter — candidate pruning for lattice-based conversion.

Decides, one candidate at a time, whether a ranked conversion candidate is
kept, dropped, or whether enumeration should stop.
"""

from convfilter.filtering import (
    CandidateFilter,
    EnumerationResult,
    FilterMetrics,
    FilterReason,
    FilterResult,
    filter_candidates,
)
from convfilter.models import (
    Candidate,
    CandidateOrderError,
    FilterContractError,
    LearningType,
    Node,
    PosMatcher,
    TablePosMatcher,
)

__all__ = [
    "Candidate",
    "CandidateFilter",
    "CandidateOrderError",
    "EnumerationResult",
    "FilterContractError",
    "FilterMetrics",
    "FilterReason",
    "FilterResult",
    "LearningType",
    "Node",
    "PosMatcher",
    "TablePosMatcher",
    "filter_candidates",
]
