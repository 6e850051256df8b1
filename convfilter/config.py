from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# FILTER THRESHOLDS
# =============================================================================
#
# Costs are computed as cost = -500 * log(prob). If prob(A) = C * prob(B),
# then cost(B) - cost(A) = 500 * log(C), so an absolute cost difference is a
# fixed probability ratio:
#
#   C        500 * log(C)
#   10       1151.29
#   100      2302.58
#   1000     3453.87
#   10000    4605.17
#   100000   5756.46
#   1000000  6907.75

# How many distinct candidates we expand per session
MAX_CANDIDATES_SIZE = 200

# Floor applied to the top candidate's cost and structure cost
MIN_COST = 100

# ~1,000,000x probability gap
COST_OFFSET = 6907

# ~1000x gap in structure cost (drop, keep enumerating)
STRUCTURE_COST_OFFSET = 3453

# ~10x gap in structure cost (combined with COST_OFFSET)
MIN_STRUCTURE_COST_OFFSET = 1151

# Candidates ranked below this are not filtered aggressively
NO_FILTER_RANK = 3

# ~100x gap, used for the leniency window of the first ranks
NO_FILTER_COST_OFFSET = 2302
NO_FILTER_STRUCTURE_COST = 6907

# Below this rank a cost-gate hit is BAD, at or above it is STOP
STOP_ENUMERATION_CACHE_SIZE = 15


@dataclass(frozen=True, slots=True)
class FilterThresholds:
    """Tuning constants for a CandidateFilter."""

    max_candidates_size: int = MAX_CANDIDATES_SIZE
    min_cost: int = MIN_COST
    cost_offset: int = COST_OFFSET
    structure_cost_offset: int = STRUCTURE_COST_OFFSET
    min_structure_cost_offset: int = MIN_STRUCTURE_COST_OFFSET
    no_filter_rank: int = NO_FILTER_RANK
    no_filter_cost_offset: int = NO_FILTER_COST_OFFSET
    no_filter_structure_cost: int = NO_FILTER_STRUCTURE_COST
    stop_enumeration_cache_size: int = STOP_ENUMERATION_CACHE_SIZE


class Settings(BaseSettings):
    """Settings loaded from environment (CONVFILTER_*)."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CONVFILTER_")

    app_name: str = "convfilter"

    # Enables the ascending-cost precondition check
    debug: bool = False

    max_candidates_size: int = MAX_CANDIDATES_SIZE
    min_cost: int = MIN_COST
    cost_offset: int = COST_OFFSET
    structure_cost_offset: int = STRUCTURE_COST_OFFSET
    min_structure_cost_offset: int = MIN_STRUCTURE_COST_OFFSET
    no_filter_rank: int = NO_FILTER_RANK
    no_filter_cost_offset: int = NO_FILTER_COST_OFFSET
    no_filter_structure_cost: int = NO_FILTER_STRUCTURE_COST
    stop_enumeration_cache_size: int = STOP_ENUMERATION_CACHE_SIZE

    def thresholds(self) -> FilterThresholds:
        """Build filter thresholds from the loaded settings."""
        return FilterThresholds(
            max_candidates_size=self.max_candidates_size,
            min_cost=self.min_cost,
            cost_offset=self.cost_offset,
            structure_cost_offset=self.structure_cost_offset,
            min_structure_cost_offset=self.min_structure_cost_offset,
            no_filter_rank=self.no_filter_rank,
            no_filter_cost_offset=self.no_filter_cost_offset,
            no_filter_structure_cost=self.no_filter_structure_cost,
            stop_enumeration_cache_size=self.stop_enumeration_cache_size,
        )


settings = Settings()
