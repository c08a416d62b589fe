"""Structural errors raised while turning flat records into a tree.

Every error is terminal: the build is aborted and no partial tree is
returned. All of them derive from :class:`TreeBuildError`, which is itself a
``ValueError`` so callers that only care about "bad input" can catch that.
"""

from __future__ import annotations

from typing import Any, Sequence


class TreeBuildError(ValueError):
    """Base class for every structural violation found in a record set."""


class RootCardinalityError(TreeBuildError):
    """Raised when the records do not hold exactly one self-parented record."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"records must have exactly 1 root record where ID == Parent, found {count}"
        )


class InvalidRootIDError(TreeBuildError):
    """Raised when the self-parented record is not ID 0."""

    def __init__(self, root_id: int) -> None:
        self.root_id = root_id
        super().__init__(f"root record must have ID 0, found ID {root_id}")


class NonContiguousIDError(TreeBuildError):
    """Raised when the IDs do not cover the dense range ``0..n-1``."""

    def __init__(
        self,
        count: int | None = None,
        max_id: int | None = None,
        message: str | None = None,
    ) -> None:
        self.count = count
        self.max_id = max_id
        super().__init__(
            message
            or f"non contiguous ids detected: {count} records do not cover 0..{count - 1} (highest ID {max_id})"
        )


class DuplicateIDError(NonContiguousIDError):
    """Raised when the same ID occurs more than once."""

    def __init__(self, record_id: int, count: int | None = None) -> None:
        self.record_id = record_id
        super().__init__(
            count=count, message=f"duplicate record ID {record_id} detected"
        )


class InvalidParentIDError(TreeBuildError):
    """Raised when a parent reference is larger than the child's own ID."""

    def __init__(self, record_id: int, parent_id: int) -> None:
        self.record_id = record_id
        self.parent_id = parent_id
        super().__init__(
            f"invalid parent id detected: record {record_id} has parent {parent_id}"
        )


class OrphanRecordsError(TreeBuildError):
    """Raised when records are left over after assembly."""

    def __init__(self, orphan_ids: Sequence[int]) -> None:
        self.orphan_ids = sorted(orphan_ids)
        ids = ", ".join(str(i) for i in self.orphan_ids)
        super().__init__(f"detected orphans: {ids}")


class InvalidRecordError(TreeBuildError):
    """Raised when an input item cannot be read as an ``{ID, Parent}`` record."""

    def __init__(self, index: int, cause: Any) -> None:
        self.index = index
        self.cause = cause
        super().__init__(f"record at position {index} is not a valid {{ID, Parent}} pair: {cause}")
