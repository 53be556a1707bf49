"""Shared domain models used across ZB Core."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class ProjectionKind(str, Enum):
    IDENTITY = "IDENTITY"
    TRUNCATED = "TRUNCATED"
    ASTRAL = "ASTRAL"


@dataclass(slots=True)
class ProjectedChar:
    index: int
    code_point: int
    code_unit: int
    byte: int
    kind: ProjectionKind

    def lossy(self) -> bool:
        return self.kind != ProjectionKind.IDENTITY


@dataclass(slots=True)
class ProjectionReport:
    chars: Tuple[ProjectedChar, ...] = field(default_factory=tuple)

    def values(self) -> List[int]:
        return [char.byte for char in self.chars]

    def lossy_count(self) -> int:
        return sum(1 for char in self.chars if char.lossy())

    def astral_count(self) -> int:
        return sum(1 for char in self.chars if char.kind == ProjectionKind.ASTRAL)

    def is_lossless(self) -> bool:
        return self.lossy_count() == 0

    def summary(self) -> Dict[str, int]:
        return {
            "code_points": len(self.chars),
            "lossy": self.lossy_count(),
            "astral": self.astral_count(),
        }
