"""Record provider boundary - where interaction records come from.

Fetching may suspend (network, disk); the engine only ever sees the
materialized sequence it returns.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol

from loop_insights.schemas.record import InteractionRecord


class RecordProvider(Protocol):
    async def fetch_records(
        self, person_name: str
    ) -> Sequence[InteractionRecord | Mapping]: ...


class StaticRecordProvider:
    """Serves pre-loaded records keyed by person name."""

    def __init__(self, records_by_person: Mapping[str, Sequence[InteractionRecord | Mapping]]):
        self._records = {name: list(records) for name, records in records_by_person.items()}

    async def fetch_records(self, person_name: str) -> list[InteractionRecord | Mapping]:
        """Return a copy of the person's records; unknown people have none."""
        return list(self._records.get(person_name, []))
