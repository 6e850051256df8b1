from convfilter.models.candidate import (
    Candidate,
    CandidateRecord,
    LearningType,
    Node,
    NodeRecord,
)
from convfilter.models.failure import CandidateOrderError, FilterContractError
from convfilter.models.pos_matcher import PosMatcher, PosTableRecord, TablePosMatcher

__all__ = [
    "Candidate",
    "CandidateOrderError",
    "CandidateRecord",
    "FilterContractError",
    "LearningType",
    "Node",
    "NodeRecord",
    "PosMatcher",
    "PosTableRecord",
    "TablePosMatcher",
]
