"""Read-only species data keyed by chemical formula."""

from __future__ import annotations

from typing import Iterator, Mapping

from thermokin.errors import UnknownSpeciesError
from thermokin.models import ThermodynamicRecord


class SpeciesTable(Mapping[str, ThermodynamicRecord]):
    """Formation data for the species of a single request."""

    def __init__(self, records: Mapping[str, ThermodynamicRecord]):
        self._records = dict(records)

    def __getitem__(self, formula: str) -> ThermodynamicRecord:
        return self._records[formula]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def lookup(self, formula: str, role: str) -> ThermodynamicRecord:
        """Return the record for ``formula``.

        ``role`` ("reactant", "product" or "substance") only labels the error.
        """
        try:
            return self._records[formula]
        except KeyError:
            raise UnknownSpeciesError(formula, role) from None
