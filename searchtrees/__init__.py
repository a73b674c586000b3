import sys
import warnings

_RECURSION_LIMIT_SETUP = False
MAX_RECURSION_LIMIT = 50_000

def setup(recursion_limit: int = 20_000):
    """Raises the interpreter recursion limit to recursion_limit. Reads and validate walk the tree with an explicit stack,
    but insert and delete recurse once per level. That is harmless for AVLTree, but a BinarySearchTree filled in sorted
    order is as deep as it is large. The limit is capped at MAX_RECURSION_LIMIT to stay clear of the C stack.
    Only the first call has an effect."""
    global _RECURSION_LIMIT_SETUP
    if _RECURSION_LIMIT_SETUP:
        return

    if recursion_limit <= 0 or recursion_limit > MAX_RECURSION_LIMIT:
        raise ValueError(f"Invalid recursion limit {recursion_limit}, expected a value between 1 and {MAX_RECURSION_LIMIT}")

    current = sys.getrecursionlimit()
    if recursion_limit <= current:
        warnings.warn(f"Recursion limit is already {current}, which is at least {recursion_limit}. Keeping the current limit.")
    else:
        sys.setrecursionlimit(recursion_limit)

    _RECURSION_LIMIT_SETUP = True

from .errors import InvalidInvariant
from .node import Node
from .avl import AVLNode, rebalance, rotate_left, rotate_right
from .tree import AVLTree, BinarySearchTree
from .util import Comparator, comparator_from_key, natural_order, reverse_order
