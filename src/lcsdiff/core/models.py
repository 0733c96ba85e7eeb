"""Edit script types and comparison results"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class OpKind(str, Enum):
    """Restrict edit operations to the three LCS outcomes"""
    same = "same"
    added = "added"
    removed = "removed"


@dataclass(frozen=True)
class Op(Generic[T]):
    """One step of an edit script: a line or token tagged with what happened to it."""
    kind:  OpKind
    value: T


@dataclass(frozen=True)
class Plain:
    """A line operation rendered on its own."""
    op: Op[str]


@dataclass(frozen=True)
class ModifiedPair:
    """A removed line and an added line treated as one changed line."""
    old: str    # always the removed value
    new: str    # always the added value


class DiffSummary(BaseModel):
    """Line totals and per-kind operation counts for one comparison."""
    original_total: int = Field(..., ge=0)
    modified_total: int = Field(..., ge=0)
    same:           int = Field(..., ge=0)
    added:          int = Field(..., ge=0)
    removed:        int = Field(..., ge=0)
    changed_pairs:  int = Field(..., ge=0)


@dataclass
class Comparison:
    """Everything computed for one original/modified comparison; not persisted."""
    original_lines: list[str]
    modified_lines: list[str]
    ops:            list[Op[str]]
    items:          list[Plain | ModifiedPair]
    summary:        DiffSummary
