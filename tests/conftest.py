from collections.abc import Callable

import pytest

from convfilter.filtering.candidate_filter import CandidateFilter, FilterResult
from convfilter.models.candidate import Candidate, LearningType, Node
from convfilter.models.pos_matcher import TablePosMatcher

NOUN_PREFIX_ID = 1850
LAST_NAME_ID = 1923
FIRST_NAME_ID = 1924
NOUN_ID = 1500

CandidateFactory = Callable[..., Candidate]


@pytest.fixture
def pos_matcher() -> TablePosMatcher:
    """POS table with one noun prefix id and the two name ids."""
    return TablePosMatcher.create(
        noun_prefix_ids={NOUN_PREFIX_ID},
        last_name_id=LAST_NAME_ID,
        first_name_id=FIRST_NAME_ID,
    )


@pytest.fixture
def candidate_filter(pos_matcher: TablePosMatcher) -> CandidateFilter:
    """Filter with default thresholds and no order check."""
    return CandidateFilter(pos_matcher, check_order=False)


@pytest.fixture
def make_candidate() -> CandidateFactory:
    """
    Build a candidate.

    ``node_count`` nodes are created with the candidate's lid/rid unless
    ``nodes`` is given explicitly.
    """

    def _make(
        value: str,
        cost: int = 1000,
        structure_cost: int = 500,
        *,
        lid: int = NOUN_ID,
        rid: int = NOUN_ID,
        node_count: int = 2,
        nodes: tuple[Node, ...] | None = None,
        learning_type: LearningType = LearningType.NONE,
    ) -> Candidate:
        if nodes is None:
            nodes = tuple(Node(value=value, lid=lid, rid=rid) for _ in range(node_count))
        return Candidate(
            value=value,
            cost=cost,
            structure_cost=structure_cost,
            lid=lid,
            rid=rid,
            nodes=nodes,
            learning_type=learning_type,
        )

    return _make


@pytest.fixture
def fill_to_rank(make_candidate: CandidateFactory) -> Callable[[CandidateFilter, int], None]:
    """Accept distinct single-node candidates until the filter reaches a rank."""

    def _fill(candidate_filter: CandidateFilter, rank: int) -> None:
        i = 0
        while candidate_filter.rank < rank:
            filler = make_candidate(f"filler{i}", cost=1000, node_count=1)
            assert candidate_filter.filter(filler) is FilterResult.GOOD
            i += 1

    return _fill
