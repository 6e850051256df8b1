"""
Replay a recorded candidate dump through the candidate filter.

Run this job to see how a candidate list captured from the converter would
be pruned:

    python -m convfilter.jobs.replay_candidates dump.json --pos-table pos.json
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic import TypeAdapter, ValidationError

from convfilter.config import settings
from convfilter.filtering.candidate_filter import CandidateFilter, FilterResult
from convfilter.models.candidate import Candidate, CandidateRecord
from convfilter.models.pos_matcher import TablePosMatcher

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[CandidateRecord])

# Used when no POS table is given: nothing is a noun prefix or a name
_EMPTY_POS_TABLE = TablePosMatcher.create(noun_prefix_ids=(), last_name_id=-1, first_name_id=-1)


def load_candidates(path: Path) -> list[Candidate]:
    """Load and validate a JSON list of candidates."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
        records = _records_adapter.validate_json(raw)
    except FileNotFoundError:
        logger.error("Candidate dump '%s' not found.", path)
        raise
    except ValidationError as e:
        logger.error("Invalid candidate dump '%s': %s", path, e)
        raise
    logger.info("Loaded %d candidates from %s", len(records), path)
    return [r.to_candidate() for r in records]


def replay(
    candidates: Sequence[Candidate],
    candidate_filter: CandidateFilter,
    out: TextIO,
) -> list[FilterResult]:
    """
    Feed every candidate to the filter and write one line per decision.

    Unlike filter_candidates(), candidates after a STOP are still shown
    (as STOP) so the whole dump can be inspected.
    """
    candidate_filter.reset()
    results: list[FilterResult] = []
    stopped = False
    for candidate in candidates:
        result = FilterResult.STOP if stopped else candidate_filter.filter(candidate)
        stopped = stopped or result is FilterResult.STOP
        results.append(result)
        out.write(f"{result.name}\t{candidate.value}\n")
    return results


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("dump", type=Path, help="JSON list of candidates")
    parser.add_argument("--pos-table", type=Path, help="JSON POS id table")
    parser.add_argument("--debug", action="store_true", help="verbose logs, check cost order")
    args = parser.parse_args(argv)

    debug = args.debug or settings.debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        pos_matcher = (
            TablePosMatcher.from_json_file(args.pos_table) if args.pos_table else _EMPTY_POS_TABLE
        )
    except (OSError, ValidationError) as e:
        logger.error("Failed to load POS table: %s", e)
        raise

    candidates = load_candidates(args.dump)
    candidate_filter = CandidateFilter(
        pos_matcher,
        thresholds=settings.thresholds(),
        check_order=debug,
    )
    replay(candidates, candidate_filter, sys.stdout)

    metrics = candidate_filter.metrics
    logger.info(
        "Replay complete: %d good, %d bad, %d stop", metrics.good, metrics.bad, metrics.stop
    )


if __name__ == "__main__":
    main()
