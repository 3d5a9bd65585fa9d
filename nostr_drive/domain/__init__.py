"""
Domain types for drives and folders.

Value types (Coordinate, Address, FolderEntry) are immutable; the Drive and
Folder aggregates are mutable and validate their invariants on construction
and in each mutator.
"""

from .coordinate import Address, Coordinate
from .drive import Drive
from .entry import FolderEntry
from .folder import Folder

__all__ = [
    "Address",
    "Coordinate",
    "Drive",
    "Folder",
    "FolderEntry",
]
