# ============================================================================
# src/medication_safety/interactions/drug_groups.py
# ============================================================================
"""
Drug Group Registry

Named, read-only sets of normalized medication keys used for class-level
interaction reasoning. Membership is exact key equality.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Set, Tuple

from ..constants.drug_groups import DRUG_GROUPS, GROUP_INTERACTION_RULES
from ..core.interaction import DrugGroup, GroupInteractionRule


class DrugGroupRegistry:
    """Lookup of drug groups by name and by member key."""

    def __init__(self, groups: Optional[Mapping[str, Iterable[str]]] = None):
        source = DRUG_GROUPS if groups is None else groups
        self._groups: Mapping[str, DrugGroup] = MappingProxyType({
            name: DrugGroup(name=name, members=frozenset(members))
            for name, members in source.items()
        })

        # Reverse index: key -> group names
        index: Dict[str, Set[str]] = {}
        for group in self._groups.values():
            for key in group.members:
                index.setdefault(key, set()).add(group.name)
        self._key_index: Mapping[str, FrozenSet[str]] = MappingProxyType({
            key: frozenset(names) for key, names in index.items()
        })

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._groups)

    def get(self, group_name: str) -> DrugGroup:
        return self._groups[group_name]

    def members_of(self, group_name: str) -> FrozenSet[str]:
        """Members of a group. Raises KeyError for an unknown group."""
        return self._groups[group_name].members

    def groups_containing(self, key: str) -> Set[str]:
        """Names of every group whose member set contains this exact key."""
        return set(self._key_index.get(key, ()))

    def groups_present(self, keys: Iterable[str]) -> Set[str]:
        """Names of every group that at least one of the keys belongs to."""
        present: Set[str] = set()
        for key in keys:
            present.update(self._key_index.get(key, ()))
        return present

    def __contains__(self, group_name: str) -> bool:
        return group_name in self._groups

    def __len__(self) -> int:
        return len(self._groups)


def load_group_rules(rules=GROUP_INTERACTION_RULES) -> Tuple[GroupInteractionRule, ...]:
    """Build the ordered group interaction rules from the static table."""
    return tuple(
        GroupInteractionRule(groups=tuple(groups), description=description)
        for groups, description in rules
    )
