# ============================================================================
# src/medication_safety/core/interaction.py
# ============================================================================
"""
Interaction reference records
- Directional pairwise facts
- Named drug groups
- Group-level interaction rules
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

@dataclass(frozen=True)
class InteractionFact:
    subject: str
    object: str
    description: str

@dataclass(frozen=True)
class DrugGroup:
    name: str
    members: FrozenSet[str]

    def __contains__(self, key: str) -> bool:
        return key in self.members

@dataclass(frozen=True)
class GroupInteractionRule:
    groups: Tuple[str, ...]
    description: str

    def __post_init__(self):
        if not 2 <= len(self.groups) <= 3:
            raise ValueError(
                f"Group rule must involve 2 or 3 groups, got {len(self.groups)}: {self.groups}"
            )

    def applies_to(self, present_groups) -> bool:
        return all(group in present_groups for group in self.groups)

@dataclass
class InteractionReport:
    """Detector output, split by the pass that produced each message."""
    forward: List[str] = field(default_factory=list)
    reverse: List[str] = field(default_factory=list)
    group: List[str] = field(default_factory=list)

    @property
    def all(self) -> List[str]:
        return self.forward + self.reverse + self.group

    @property
    def has_interactions(self) -> bool:
        return bool(self.forward or self.reverse or self.group)
