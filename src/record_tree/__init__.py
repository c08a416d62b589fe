"""Assemble flat parent-referencing records into a validated tree."""

from record_tree.builder import Build, build_tree
from record_tree.components import Node, Record
from record_tree.errors import (
    DuplicateIDError,
    InvalidParentIDError,
    InvalidRecordError,
    InvalidRootIDError,
    NonContiguousIDError,
    OrphanRecordsError,
    RootCardinalityError,
    TreeBuildError,
)

__all__ = [
    "Build",
    "DuplicateIDError",
    "InvalidParentIDError",
    "InvalidRecordError",
    "InvalidRootIDError",
    "Node",
    "NonContiguousIDError",
    "OrphanRecordsError",
    "Record",
    "RootCardinalityError",
    "TreeBuildError",
    "build_tree",
]
