"""Data models for RECUR value validation."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Optional, Union

PartValue = Union[str, list[str]]
Parts = dict[str, PartValue]


class DiagnosticLevel(IntEnum):
    """Problem level reported by validation.

    REPAIRED means the issue was fixed, WARNING is inconsequential and SEVERE
    needs attention.
    """

    REPAIRED = 1
    WARNING = 2
    SEVERE = 3


class RepairAction(str, Enum):
    """What the owner of a validated value has to do after validation."""

    NONE = "none"
    REPAIRED = "repaired"
    REMOVE = "remove"


@dataclass
class Diagnostic:
    """Individual validation problem."""

    level: DiagnosticLevel
    message: str
    node: Any = None

    def __str__(self) -> str:
        return f"[{self.level.name}] {self.message}"


@dataclass
class ValidationOutcome:
    """Result of one validation pass over a set of rule parts."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    action: RepairAction = RepairAction.NONE
    parts: Optional[Parts] = None

    @property
    def requires_removal(self) -> bool:
        """Check if the owning property must be detached from its parent."""
        return self.action == RepairAction.REMOVE

    @property
    def is_valid(self) -> bool:
        """Check if validation found no problems."""
        return not self.diagnostics
