"""
Candidate filtering for lattice-based conversion.

A CandidateFilter classifies ranked candidates one at a time;
filter_candidates() drives a whole stream through it.
"""

from convfilter.filtering.candidate_filter import (
    CandidateFilter,
    FilterMetrics,
    FilterReason,
    FilterResult,
)
from convfilter.filtering.enumeration import EnumerationResult, filter_candidates

__all__ = [
    "CandidateFilter",
    "EnumerationResult",
    "FilterMetrics",
    "FilterReason",
    "FilterResult",
    "filter_candidates",
]
