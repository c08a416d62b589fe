"""
record-tree - assembles flat ``{ID, Parent}`` records into a validated tree.

Each input record names itself and its parent:

    {"ID": 3, "Parent": 1}

Exactly one record is the root (``ID == Parent``) and it must be ID 0. The
IDs must cover ``0..n-1`` and every parent ID must not exceed its child's ID.
Anything else raises a :class:`~record_tree.errors.TreeBuildError`.

Usage (CLI):
    record-tree <records.json> [--log-level DEBUG]

Usage (library):
    from record_tree import build_tree
    root = build_tree([{"ID": 0, "Parent": 0}, {"ID": 1, "Parent": 0}])
"""

import argparse
import json
import logging
import sys
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from record_tree.components.assembler import assemble
from record_tree.components.node import Node
from record_tree.components.normalizer import normalize
from record_tree.components.record import Record
from record_tree.config import settings
from record_tree.errors import InvalidRecordError, OrphanRecordsError, TreeBuildError

logger = logging.getLogger(__name__)


def build_tree(records: Iterable[Record | Mapping[str, Any]]) -> Node | None:
    """Build the tree described by *records* and return its root.

    Args:
        records: Records in any order. Mappings are validated into
                 :class:`Record` instances; the input itself is not modified.

    Returns:
        The root :class:`Node`, or ``None`` when *records* is empty.

    Raises:
        TreeBuildError: the records do not describe a single valid tree.
    """
    items = _coerce(records)
    if not items:
        logger.debug("build_tree: empty input, no tree built")
        return None

    try:
        root_record, remainder = normalize(items)
        root = Node(id=root_record.id)
        leftover = assemble(root, remainder)
        if leftover:
            raise OrphanRecordsError([r.id for r in leftover])
    except TreeBuildError as exc:
        logger.info("build_tree: rejected %d records: %s", len(items), exc)
        raise

    logger.debug("build_tree: built tree of %d nodes rooted at %d", len(items), root.id)
    return root


Build = build_tree


def _coerce(records: Iterable[Record | Mapping[str, Any]]) -> list[Record]:
    items: list[Record] = []
    for index, item in enumerate(records):
        if isinstance(item, Record):
            items.append(item)
            continue
        try:
            items.append(Record.model_validate(item))
        except ValidationError as exc:
            raise InvalidRecordError(index, exc) from exc
    return items


def _read_records(source: str) -> list[Any]:
    if source == "-":
        data = json.load(sys.stdin)
    else:
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON list of records, got {type(data).__name__}")
    return data


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Assemble flat {ID, Parent} records into a tree and print its outline."
    )
    parser.add_argument("input", help="JSON file holding a list of records, or - for stdin")
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help=f"Logging level (default: {settings.log_level})",
    )
    args = parser.parse_args(argv)

    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))

    try:
        root = build_tree(_read_records(args.input))
    except (OSError, ValueError) as exc:
        logger.debug("record-tree: failed to build %s", args.input, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(root.render() if root is not None else "<empty>")
    return 0


if __name__ == "__main__":
    sys.exit(main())
