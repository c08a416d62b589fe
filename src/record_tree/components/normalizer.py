import logging
from typing import Sequence

from ..errors import (
    DuplicateIDError,
    InvalidRootIDError,
    NonContiguousIDError,
    RootCardinalityError,
)
from .record import Record, partition, sort_records

logger = logging.getLogger(__name__)


def normalize(records: Sequence[Record]) -> tuple[Record, list[Record]]:
    """
    Order *records* by ID and split off the root record.

    Args:
        records: The records to normalise. Not modified.

    Returns:
        A ``(root, remainder)`` tuple where *remainder* holds every other
        record, sorted by ID.

    Raises:
        DuplicateIDError: an ID occurs more than once.
        NonContiguousIDError: the IDs are not exactly ``0..len(records) - 1``.
        RootCardinalityError: not exactly one record has ``ID == Parent``.
        InvalidRootIDError: the root record's ID is not 0.
    """
    ordered = sort_records(records)
    if not ordered:
        raise RootCardinalityError(0)

    _check_contiguous(ordered)

    roots, remainder = partition(ordered, lambda r: r.is_root)
    if len(roots) != 1:
        raise RootCardinalityError(len(roots))

    root = roots[0]
    if root.id != 0:
        raise InvalidRootIDError(root.id)

    logger.debug("normalize: root %d, %d candidate records", root.id, len(remainder))
    return root, remainder


def _check_contiguous(ordered: list[Record]) -> None:
    # n distinct sorted IDs running from 0 to n-1 are exactly 0..n-1.
    count = len(ordered)
    for previous, record in zip(ordered, ordered[1:]):
        if previous.id == record.id:
            raise DuplicateIDError(record.id, count=count)

    if ordered[0].id != 0 or ordered[-1].id != count - 1:
        raise NonContiguousIDError(count, ordered[-1].id)
