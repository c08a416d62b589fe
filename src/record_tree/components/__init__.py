from .assembler import assemble
from .node import Node
from .normalizer import normalize
from .record import Record, partition, sort_records

__all__ = ["Node", "Record", "assemble", "normalize", "partition", "sort_records"]
