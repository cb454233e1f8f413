# ============================================================================
# src/medication_safety/interactions/index.py
# ============================================================================
"""
Pairwise Interaction Index

Directed lookup: subject key -> facts about other medications. The same
fact list is shared by several aliases (e.g. every NSAID in the table),
and facts are not mirrored, so callers must check both directions.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..constants.interactions import PAIRWISE_INTERACTIONS
from ..core.interaction import InteractionFact


class PairwiseInteractionIndex:
    """Read-only directional interaction table."""

    def __init__(self, table: Optional[Iterable] = None):
        source = PAIRWISE_INTERACTIONS if table is None else table

        facts: Dict[str, List[InteractionFact]] = {}
        for subjects, pairs in source:
            for subject in subjects:
                bucket = facts.setdefault(subject, [])
                bucket.extend(
                    InteractionFact(subject=subject, object=obj, description=description)
                    for obj, description in pairs
                )

        self._facts: Mapping[str, Tuple[InteractionFact, ...]] = MappingProxyType({
            subject: tuple(bucket) for subject, bucket in facts.items()
        })

    def facts_for(self, subject: str) -> Tuple[InteractionFact, ...]:
        """All facts registered under a subject key (empty if unknown)."""
        return self._facts.get(subject, ())

    def lookup(self, subject: str, obj: str) -> Tuple[InteractionFact, ...]:
        """Facts in the subject -> object direction only."""
        return tuple(fact for fact in self.facts_for(subject) if fact.object == obj)

    def subjects(self) -> Tuple[str, ...]:
        return tuple(self._facts)

    def __contains__(self, subject: str) -> bool:
        return subject in self._facts

    def __len__(self) -> int:
        return len(self._facts)
