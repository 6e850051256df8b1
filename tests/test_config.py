"""Tests for settings and filter thresholds."""

import pytest

from convfilter.config import (
    COST_OFFSET,
    MAX_CANDIDATES_SIZE,
    STOP_ENUMERATION_CACHE_SIZE,
    FilterThresholds,
    Settings,
)


class TestFilterThresholds:
    def test_defaults(self) -> None:
        thresholds = FilterThresholds()

        assert thresholds.max_candidates_size == 200
        assert thresholds.min_cost == 100
        assert thresholds.cost_offset == 6907
        assert thresholds.structure_cost_offset == 3453
        assert thresholds.min_structure_cost_offset == 1151
        assert thresholds.no_filter_rank == 3
        assert thresholds.no_filter_cost_offset == 2302
        assert thresholds.no_filter_structure_cost == 6907
        assert thresholds.stop_enumeration_cache_size == 15

    def test_is_immutable(self) -> None:
        with pytest.raises(AttributeError):
            FilterThresholds().cost_offset = 1  # type: ignore[misc]


class TestSettings:
    def test_defaults_match_constants(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CONVFILTER_COST_OFFSET", raising=False)
        thresholds = Settings(_env_file=None).thresholds()

        assert thresholds.cost_offset == COST_OFFSET
        assert thresholds.max_candidates_size == MAX_CANDIDATES_SIZE
        assert thresholds.stop_enumeration_cache_size == STOP_ENUMERATION_CACHE_SIZE

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONVFILTER_COST_OFFSET", "4605")
        monkeypatch.setenv("CONVFILTER_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.debug is True
        assert settings.thresholds().cost_offset == 4605
