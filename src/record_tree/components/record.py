from typing import Callable, Iterable

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """A flat input row: an ID and the ID of its parent.

    The root record points at itself (``id == parent``). Input may use either
    ``id``/``parent`` or the capitalised ``ID``/``Parent`` keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    id: int = Field(alias="ID")
    parent: int = Field(alias="Parent")

    @property
    def is_root(self) -> bool:
        return self.id == self.parent


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Return a new list of *records* ordered by ID."""
    return sorted(records, key=lambda r: r.id)


def partition(
    records: Iterable[Record], test: Callable[[Record], bool]
) -> tuple[list[Record], list[Record]]:
    """Split *records* into those passing *test* and the remainder, keeping order."""
    matched: list[Record] = []
    remainder: list[Record] = []
    for record in records:
        if test(record):
            matched.append(record)
        else:
            remainder.append(record)
    return matched, remainder
