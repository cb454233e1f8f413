# ============================================================================
# src/medication_safety/interactions/detector.py
# ============================================================================
"""
Interaction Detector

Advisory drug-interaction check over a patient's medication list:
1. Normalize every name (repeats are kept)
2. Forward pass: facts registered under the earlier medication
3. Reverse pass: facts registered under the later medication, skipping
   pairs the forward pass already reported
4. Group pass: class-level rules (e.g. NSAID + ACEI/ARB, triple whammy)

Never raises; unknown medications simply produce no matches.
"""

import logging
from typing import FrozenSet, Iterable, List, Optional, Sequence, Set, Union

from ..config import safety_settings
from ..core.enums import DedupStrategy
from ..core.interaction import GroupInteractionRule, InteractionReport
from ..utils.exceptions import ConfigurationError
from ..utils.name_normalizer import NameNormalizer, capitalize_first
from .drug_groups import DrugGroupRegistry, load_group_rules
from .index import PairwiseInteractionIndex

logger = logging.getLogger(__name__)


def format_interaction(first: str, second: str, description: str) -> str:
    return f"{pair_prefix(first, second)}: {description}"


def pair_prefix(first: str, second: str) -> str:
    return f"{capitalize_first(first)} + {capitalize_first(second)}"


class InteractionDetector:
    """
    Detects pairwise and group-level interactions.

    Reference data is injected once and never mutated, so one detector can
    serve concurrent callers.
    """

    def __init__(
        self,
        index: Optional[PairwiseInteractionIndex] = None,
        registry: Optional[DrugGroupRegistry] = None,
        rules: Optional[Sequence[GroupInteractionRule]] = None,
        normalizer: Optional[NameNormalizer] = None,
        dedup_strategy: Union[DedupStrategy, str, None] = None,
    ):
        self.index = index if index is not None else PairwiseInteractionIndex()
        self.registry = registry if registry is not None else DrugGroupRegistry()
        self.rules = tuple(rules) if rules is not None else load_group_rules()
        self.normalizer = normalizer or NameNormalizer()
        strategy = dedup_strategy or safety_settings.INTERACTION_DEDUP_STRATEGY
        try:
            self.dedup_strategy = DedupStrategy(strategy)
        except ValueError:
            raise ConfigurationError(f"Unknown interaction dedup strategy: {strategy}")

    def detect(
        self,
        current_medications: Optional[Iterable[Optional[str]]],
        candidate_medication: Optional[str] = None
    ) -> List[str]:
        """
        Check a medication list (plus an optional candidate) for interactions.

        Args:
            current_medications: Raw names of the patient's current medications
            candidate_medication: Raw name of a medication being considered

        Returns:
            Warning strings: forward, then reverse, then group messages
        """
        return self.detect_report(current_medications, candidate_medication).all

    def detect_report(
        self,
        current_medications: Optional[Iterable[Optional[str]]],
        candidate_medication: Optional[str] = None
    ) -> InteractionReport:
        """Same as detect(), with messages kept apart per pass."""
        medications = self.normalizer.normalize_all(current_medications or ())
        if candidate_medication:
            medications.append(self.normalizer.normalize(candidate_medication))

        report = InteractionReport()

        if len(medications) < 2:
            logger.debug("Fewer than 2 medications, no interactions possible")
            return report

        reported_pairs = self._forward_pass(medications, report)
        self._reverse_pass(medications, report, reported_pairs)
        self._group_pass(medications, report)

        logger.info(
            f"Interaction check complete: {len(medications)} medications, "
            f"{len(report.all)} interactions "
            f"({len(report.forward)} forward, {len(report.reverse)} reverse, {len(report.group)} group)"
        )
        return report

    def _forward_pass(self, medications: List[str], report: InteractionReport) -> Set[FrozenSet[str]]:
        reported_pairs: Set[FrozenSet[str]] = set()

        for i, first in enumerate(medications):
            facts = self.index.facts_for(first)
            if not facts:
                continue

            for second in medications[i + 1:]:
                for fact in facts:
                    if fact.object != second:
                        continue
                    message = format_interaction(first, second, fact.description)
                    report.forward.append(message)
                    reported_pairs.add(frozenset((first, second)))
                    logger.debug(f"Interaction found: {message}")

        return reported_pairs

    def _reverse_pass(
        self,
        medications: List[str],
        report: InteractionReport,
        reported_pairs: Set[FrozenSet[str]]
    ) -> None:
        for i, first in enumerate(medications):
            for second in medications[i + 1:]:
                for fact in self.index.facts_for(second):
                    if fact.object != first:
                        continue
                    if self._already_reported(first, second, report, reported_pairs):
                        continue
                    message = format_interaction(second, first, fact.description)
                    report.reverse.append(message)
                    logger.debug(f"Interaction found (reverse direction): {message}")

    def _already_reported(
        self,
        first: str,
        second: str,
        report: InteractionReport,
        reported_pairs: Set[FrozenSet[str]]
    ) -> bool:
        if self.dedup_strategy is DedupStrategy.MESSAGE_PREFIX:
            prefix = pair_prefix(first, second)
            return any(
                existing.startswith(prefix)
                for existing in report.forward + report.reverse
            )
        return frozenset((first, second)) in reported_pairs

    def _group_pass(self, medications: List[str], report: InteractionReport) -> None:
        present = self.registry.groups_present(medications)
        if not present:
            return

        for rule in self.rules:
            if rule.applies_to(present):
                report.group.append(rule.description)
                logger.debug(f"Group interaction found: {rule.description}")
