"""Document tree library.

This package turns the flat item lists returned by the content API into
ordered navigation trees. It has no I/O and no dependency on the client.
"""

from .errors import DocTreeError, TreeCycleError
from .models import DocTreeNode
from .tree_builder import build_tree, flatten_tree

__all__ = [
    'DocTreeError',
    'TreeCycleError',
    'DocTreeNode',
    'build_tree',
    'flatten_tree',
]
