"""Data models for document trees."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class DocTreeNode:
    """A node in the document navigation tree.

    Attributes:
        id: Item id the node was built from
        label: Display label (the item name)
        path: Route to the document, e.g. ``/docs/getting-started``
        children: Child nodes, sorted ascending by id
    """
    id: int
    label: str
    path: str
    children: List['DocTreeNode'] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the plain nested dict form used by navigation renderers."""
        return {
            'id': self.id,
            'label': self.label,
            'path': self.path,
            'children': [child.to_dict() for child in self.children],
        }
