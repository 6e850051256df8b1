"""
Conversion candidates as produced by the lattice engine.

Candidates arrive fully scored: the filter only reads them. ``cost`` is
``-500 * log(prob)`` from the language model, ``structure_cost`` penalizes
implausible segmentation and joins.
"""

from dataclasses import dataclass
from enum import IntFlag

from pydantic import BaseModel, Field


class LearningType(IntFlag):
    """Bit flags attached to a candidate by the learning layer."""

    NONE = 0
    BEST_CANDIDATE = 1
    NO_LEARNING = 2
    NO_SUGGEST_LEARNING = 4
    # Cost was adjusted by context-specific scoring and is unreliable
    CONTEXT_SENSITIVE = 8


@dataclass(frozen=True, slots=True)
class Node:
    """One lexical unit of a candidate."""

    value: str
    lid: int
    rid: int
    key: str = ""


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    A ranked conversion candidate.

    Lower cost is better. ``lid``/``rid`` are the connection ids of the
    first and last node.
    """

    value: str
    cost: int
    structure_cost: int
    lid: int
    rid: int
    nodes: tuple[Node, ...] = ()
    learning_type: LearningType = LearningType.NONE
    key: str = ""

    @property
    def is_context_sensitive(self) -> bool:
        return bool(self.learning_type & LearningType.CONTEXT_SENSITIVE)

    @property
    def is_single_node(self) -> bool:
        return len(self.nodes) == 1


# =============================================================================
# SERIALIZED FORMS (candidate dumps)
# =============================================================================


class NodeRecord(BaseModel):
    """Node as it appears in a JSON candidate dump."""

    value: str
    lid: int
    rid: int
    key: str = ""

    def to_node(self) -> Node:
        return Node(value=self.value, lid=self.lid, rid=self.rid, key=self.key)


class CandidateRecord(BaseModel):
    """Candidate as it appears in a JSON candidate dump."""

    value: str
    cost: int
    structure_cost: int = 0
    lid: int
    rid: int
    nodes: list[NodeRecord] = Field(default_factory=list)
    learning_type: int = Field(default=0, ge=0)
    key: str = ""

    def to_candidate(self) -> Candidate:
        """Convert to the immutable Candidate used by the filter."""
        return Candidate(
            value=self.value,
            cost=self.cost,
            structure_cost=self.structure_cost,
            lid=self.lid,
            rid=self.rid,
            nodes=tuple(n.to_node() for n in self.nodes),
            learning_type=LearningType(self.learning_type),
            key=self.key,
        )
