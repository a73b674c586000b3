from typing import Any, Literal

InvariantName = Literal["size", "height", "left-order", "right-order", "balance"]

class InvalidInvariant(Exception):
    """Reports a node that violates one of the structural invariants of a search tree.
    Only ever raised by validate(), never during insert or delete."""
    def __init__(self, key: Any, invariant: InvariantName, message: str = ""):
        self.key = key
        self.invariant: InvariantName = invariant
        super().__init__(message or f"Invalid {invariant} invariant at key {key!r}")
