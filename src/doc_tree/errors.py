"""Typed exception hierarchy for document tree errors."""

from typing import Iterable


class DocTreeError(Exception):
    """Base exception for all document tree errors."""
    pass


class TreeCycleError(DocTreeError):
    """Raised when parent references form a cycle (self-parenting included)."""

    def __init__(self, item_ids: Iterable[int]):
        self.item_ids = sorted(item_ids)
        super().__init__(
            f"Parent references form a cycle; unreachable items: "
            f"{', '.join(str(i) for i in self.item_ids)}"
        )
