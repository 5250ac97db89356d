"""Build a document tree from a flat list of items.

Each item may name a parent by id. Items whose parent is not in the list are
treated as roots, and every level of the result is sorted ascending by id.
Parent references that loop back on themselves are reported as a
TreeCycleError instead of being silently dropped.
"""

import logging
from typing import Dict, List, Protocol, Sequence, Tuple

from .errors import TreeCycleError
from .models import DocTreeNode

logger = logging.getLogger(__name__)

DEFAULT_PATH_PREFIX = "/docs"


class TreeItem(Protocol):
    """Anything with the fields build_tree reads (Item satisfies this)."""
    id: int
    name: str
    slug: str
    parent_id: object


def build_tree(
    items: Sequence[TreeItem],
    path_prefix: str = DEFAULT_PATH_PREFIX,
) -> List[DocTreeNode]:
    """Convert a flat item list into an ordered forest of DocTreeNode.

    The input is never mutated and new nodes are built on every call, so
    repeated calls on the same list give structurally identical trees.

    Args:
        items: Flat list of items, each with id, name, slug and parent_id
        path_prefix: Route prefix for node paths

    Returns:
        Root nodes sorted by id; every child list is sorted by id as well

    Raises:
        ValueError: If two items share an id
        TreeCycleError: If parent references form a cycle
    """
    prefix = path_prefix.rstrip('/')

    nodes: Dict[int, DocTreeNode] = {}
    for item in items:
        if item.id in nodes:
            raise ValueError(f"Duplicate item id {item.id}")
        nodes[item.id] = DocTreeNode(
            id=item.id,
            label=item.name,
            path=f"{prefix}/{item.slug}",
        )

    roots: List[DocTreeNode] = []
    for item in items:
        node = nodes[item.id]
        parent_id = item.parent_id
        if parent_id is not None and parent_id in nodes:
            nodes[parent_id].children.append(node)
        else:
            if parent_id is not None:
                logger.debug(
                    f"Item {item.id} references unknown parent {parent_id}, treating as root"
                )
            roots.append(node)

    roots.sort(key=_node_id)
    for node in nodes.values():
        node.children.sort(key=_node_id)

    # Every node has at most one parent, so anything unreachable from a
    # root sits on or below a cycle.
    visited = set()
    stack = list(roots)
    while stack:
        node = stack.pop()
        visited.add(node.id)
        stack.extend(node.children)

    unreachable = set(nodes) - visited
    if unreachable:
        logger.error(f"Cycle in parent references among items {sorted(unreachable)}")
        raise TreeCycleError(unreachable)

    logger.debug(f"Built document tree: {len(roots)} roots, {len(nodes)} nodes")
    return roots


def flatten_tree(roots: Sequence[DocTreeNode]) -> List[Tuple[DocTreeNode, int]]:
    """Flatten a tree back to a pre-order list of (node, depth) tuples."""
    result: List[Tuple[DocTreeNode, int]] = []
    stack = [(node, 0) for node in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        result.append((node, depth))
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return result


def _node_id(node: DocTreeNode) -> int:
    return node.id
