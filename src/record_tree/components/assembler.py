import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from ..errors import DuplicateIDError, InvalidParentIDError
from .node import Node
from .record import Record, partition, sort_records

logger = logging.getLogger(__name__)


@dataclass
class _Level:
    """One node being filled: its claimed records and what it has not claimed."""

    node: Node
    unmatched: list[Record]
    counts: Counter = field(default_factory=Counter)
    pending: Iterator[Record] = field(default_factory=lambda: iter(()))


def _open_level(node: Node, candidates: Sequence[Record]) -> _Level:
    matched, unmatched = partition(candidates, lambda r: r.parent == node.id)
    if matched:
        logger.debug("assemble: node %d claims %d children", node.id, len(matched))
    return _Level(
        node=node,
        unmatched=unmatched,
        counts=Counter(r.id for r in matched),
        pending=iter(sort_records(matched)),
    )


def assemble(parent: Node, candidates: Sequence[Record]) -> list[Record]:
    """
    Attach every candidate whose ``parent`` is *parent*'s ID, then descend.

    Each matched record becomes a child :class:`Node` of *parent* and is then
    given the records still unattached so it can claim its own children.
    The descent uses an explicit stack, so tree height is not bounded by the
    interpreter's recursion limit. The candidates passed in are never
    modified; what is left after the whole subtree has been built is returned
    as a new list.

    Args:
        parent:     The node to attach children to. Its ``children`` list is
                    extended and sorted in place.
        candidates: Records not yet attached anywhere.

    Returns:
        The records that no node in this subtree claimed.

    Raises:
        DuplicateIDError: two matched records share an ID.
        InvalidParentIDError: a matched record's ID is lower than its parent's.
    """
    stack = [_open_level(parent, candidates)]
    while True:
        level = stack[-1]
        record = next(level.pending, None)

        if record is None:
            level.node.sort_children()
            stack.pop()
            if not stack:
                return level.unmatched
            # The finished child hands its leftovers back to its parent.
            stack[-1].unmatched = level.unmatched
            continue

        if level.counts[record.id] > 1:
            raise DuplicateIDError(record.id)
        if level.node.id > record.id:
            raise InvalidParentIDError(record.id, level.node.id)
        if record.parent > record.id:
            raise InvalidParentIDError(record.id, record.parent)

        child = Node(id=record.id)
        level.node.children.append(child)
        if level.unmatched:
            stack.append(_open_level(child, level.unmatched))
