"""
Reference Result Dataclasses

Shared data structures for oracle and heuristic engine results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class OperationType(Enum):
    """Kinds of step in an alignment."""
    MATCH = "match"
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


@dataclass(frozen=True)
class EditOperation:
    """Single alignment step."""
    kind: OperationType
    position: int                  # Index in the string being edited
    from_char: Optional[str] = None
    to_char: Optional[str] = None

    @property
    def cost(self) -> int:
        return 0 if self.kind is OperationType.MATCH else 1

    def describe(self) -> str:
        """Short label such as Replace(k->s)."""
        if self.kind is OperationType.MATCH:
            return f"Match({self.from_char})"
        if self.kind is OperationType.INSERT:
            return f"Insert({self.to_char})"
        if self.kind is OperationType.DELETE:
            return f"Delete({self.from_char})"
        return f"Replace({self.from_char}->{self.to_char})"


@dataclass(frozen=True)
class ReferenceResult:
    """Complete result of one engine run."""
    distance: int                              # Edit count produced by the engine
    operations: Tuple[EditOperation, ...]      # Alignment, empty if not tracked
    final_string: str                          # Source after applying operations
    computation_time_ms: float                 # Time taken
    engine_name: str = ""
    matrix: Optional[np.ndarray] = None        # DP table (full-table engine only)

    @property
    def edits(self) -> Tuple[EditOperation, ...]:
        """Operations excluding matches."""
        return tuple(op for op in self.operations if op.kind is not OperationType.MATCH)

    def describe_edits(self) -> str:
        return " ".join(op.describe() for op in self.edits)


def apply_operations(source: str, operations: Tuple[EditOperation, ...]) -> str:
    """
    Replay an alignment on source.

    Positions index the working string as it stands when each operation
    runs, so operations are applied strictly in order.
    """
    chars = list(source)
    for op in operations:
        if op.kind is OperationType.INSERT:
            chars.insert(op.position, op.to_char)
        elif op.kind is OperationType.DELETE:
            del chars[op.position]
        elif op.kind is OperationType.REPLACE:
            chars[op.position] = op.to_char
    return "".join(chars)
