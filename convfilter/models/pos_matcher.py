"""
Part-of-speech capability consumed by the candidate filter.

The filter only needs three lookups. They are injected at construction so
the filter carries no global table and can be tested with fakes.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class PosMatcher(Protocol):
    """Read-only part-of-speech classification queries."""

    def is_noun_prefix(self, pos_id: int) -> bool: ...

    def get_last_name_id(self) -> int: ...

    def get_first_name_id(self) -> int: ...


@dataclass(frozen=True, slots=True)
class TablePosMatcher:
    """
    PosMatcher backed by a fixed id table.

    Usage:
        matcher = TablePosMatcher(
            noun_prefix_ids=frozenset({1850}),
            last_name_id=1923,
            first_name_id=1924,
        )
    """

    noun_prefix_ids: frozenset[int]
    last_name_id: int
    first_name_id: int

    def is_noun_prefix(self, pos_id: int) -> bool:
        return pos_id in self.noun_prefix_ids

    def get_last_name_id(self) -> int:
        return self.last_name_id

    def get_first_name_id(self) -> int:
        return self.first_name_id

    @classmethod
    def create(
        cls,
        noun_prefix_ids: Iterable[int],
        last_name_id: int,
        first_name_id: int,
    ) -> "TablePosMatcher":
        return cls(
            noun_prefix_ids=frozenset(noun_prefix_ids),
            last_name_id=last_name_id,
            first_name_id=first_name_id,
        )

    @classmethod
    def from_record(cls, record: "PosTableRecord") -> "TablePosMatcher":
        return cls.create(
            noun_prefix_ids=record.noun_prefix_ids,
            last_name_id=record.last_name_id,
            first_name_id=record.first_name_id,
        )

    @classmethod
    def from_mapping(cls, data: Any) -> "TablePosMatcher":
        """
        Build from a mapping with keys ``noun_prefix_ids`` (list of ints),
        ``last_name_id`` and ``first_name_id``.

        Raises:
            ValidationError: If the data is not a valid POS table
        """
        try:
            record = PosTableRecord.model_validate(data)
        except ValidationError as e:
            logger.error("Invalid POS table: %s", e)
            raise
        return cls.from_record(record)

    @classmethod
    def from_json_file(cls, path: Path) -> "TablePosMatcher":
        """Load a POS table written as a JSON object."""
        raw = Path(path).read_text(encoding="utf-8")
        try:
            record = PosTableRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.error("Invalid POS table '%s': %s", path, e)
            raise
        logger.info("Loaded POS table from %s", path)
        return cls.from_record(record)


class PosTableRecord(BaseModel):
    """POS id table as it appears in a JSON file."""

    noun_prefix_ids: list[int] = Field(default_factory=list)
    last_name_id: int
    first_name_id: int
