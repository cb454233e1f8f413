# ============================================================================
# src/medication_safety/services/prescription_service.py
# ============================================================================
"""
Prescription Safety Service

Facade over the safety stages, run in order:
1. Content validation (rules, guard, allergies) - may reject
2. Interaction detection - advisory only
3. Lifecycle / refill ledger - may reject

A stage that rejects stops the pipeline; nothing is mutated before all
checks for an operation have passed.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..config import logging_settings
from ..core.prescription import Prescription, PrescriptionRequest
from ..interactions.detector import InteractionDetector
from ..lifecycle.prescription_lifecycle import PrescriptionLifecycle
from ..lifecycle.refill_ledger import RefillLedger
from ..utils.exceptions import RefillError, ValidationError
from ..utils.logging import prescription_logger
from ..utils.metrics import MetricsCollector, Timer, get_metrics
from ..validators.allergy import Allergies
from ..validators.prescription_validator import PrescriptionContentValidator

logger = logging.getLogger(__name__)


@dataclass
class SafetyResult:
    prescription: Prescription
    warnings: List[str] = field(default_factory=list)
    interactions: List[str] = field(default_factory=list)

    @property
    def has_interactions(self) -> bool:
        return bool(self.interactions)


class PrescriptionSafetyService:

    def __init__(
        self,
        validator: Optional[PrescriptionContentValidator] = None,
        detector: Optional[InteractionDetector] = None,
        lifecycle: Optional[PrescriptionLifecycle] = None,
        ledger: Optional[RefillLedger] = None,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.validator = validator or PrescriptionContentValidator()
        self.detector = detector or InteractionDetector()
        self.lifecycle = lifecycle or PrescriptionLifecycle()
        self.ledger = ledger or RefillLedger()
        self.metrics = metrics or get_metrics()

    def _count(self, name: str) -> None:
        if logging_settings.ENABLE_METRICS:
            self.metrics.increment(name)

    def _validate(self, request: PrescriptionRequest, allergies: Allergies) -> List[str]:
        try:
            return self.validator.validate(request.items, request.diagnosis, allergies)
        except ValidationError:
            self._count("prescriptions.rejected")
            raise

    def _interactions_for(
        self,
        request: PrescriptionRequest,
        current_medications: Iterable[str]
    ) -> List[str]:
        names = list(current_medications) + [item.medication_name for item in request.items]
        interactions = self.detector.detect(names)
        if interactions:
            self._count("interactions.detected")
            for message in interactions:
                logger.warning(f"Drug interaction for patient {request.patient_id}: {message}")
        return interactions

    def create_prescription(
        self,
        request: PrescriptionRequest,
        allergies: Allergies = None,
        current_medications: Iterable[str] = ()
    ) -> SafetyResult:
        """
        Validate and create a prescription.

        Args:
            request: Creation request
            allergies: Patient's recorded allergies
            current_medications: Names the patient is already taking

        Returns:
            SafetyResult with the new ACTIVE prescription, content warnings and
            advisory interaction messages

        Raises:
            ValidationError: if any content rule rejects the request
        """
        with Timer(self.metrics, "prescriptions.create"):
            warnings = self._validate(request, allergies)
            interactions = self._interactions_for(request, current_medications)
            prescription = self.lifecycle.create(request)

        self._count("prescriptions.created")
        return SafetyResult(prescription, warnings, interactions)

    def update_prescription(
        self,
        prescription: Prescription,
        request: PrescriptionRequest,
        allergies: Allergies = None,
        current_medications: Iterable[str] = ()
    ) -> SafetyResult:
        """Validate a replacement request and apply it to an ACTIVE prescription."""
        self.lifecycle.ensure_modifiable(prescription)

        warnings = self._validate(request, allergies)
        interactions = self._interactions_for(request, current_medications)
        self.lifecycle.apply_update(prescription, request)

        return SafetyResult(prescription, warnings, interactions)

    def check_interactions(
        self,
        current_medications: Optional[Iterable[Optional[str]]],
        candidate: Optional[str] = None
    ) -> List[str]:
        interactions = self.detector.detect(current_medications, candidate)
        if interactions:
            self._count("interactions.detected")
        return interactions

    @staticmethod
    def current_medications(prescriptions: Iterable[Prescription]) -> List[str]:
        """Medication names from the patient's ACTIVE prescriptions."""
        return [
            name
            for prescription in prescriptions
            if prescription.is_active
            for name in prescription.medication_names
        ]

    def process_refill(self, prescription: Prescription, item_id: int, count: int = 1) -> int:
        """
        Refill one item of an ACTIVE prescription.

        Returns:
            Updated refills_used for the item
        """
        if not prescription.is_active:
            reason = f"Refills require an active prescription (status: {prescription.status.value})"
            logger.warning(f"Refill rejected: {reason}")
            self._count("refills.rejected")
            raise RefillError(reason)

        item = prescription.find_item(item_id)
        try:
            refills_used = self.ledger.request_refill(item, count)
        except RefillError:
            self._count("refills.rejected")
            raise

        self._count("refills.processed")
        prescription_logger(logger, prescription, item_id=item_id).info(
            f"Refill processed for item {item_id}: {refills_used}/{item.refills_allowed} used"
        )
        return refills_used

    def cancel_prescription(self, prescription: Prescription, reason: str) -> Prescription:
        return self.lifecycle.cancel(prescription, reason)

    def complete_prescription(self, prescription: Prescription) -> Prescription:
        return self.lifecycle.complete(prescription)

    def renew_prescription(
        self,
        prescription: Prescription,
        allergies: Allergies = None,
        current_medications: Iterable[str] = ()
    ) -> SafetyResult:
        """
        Renew a prescription after re-validating it as a new creation.

        Catches contraindications recorded since the original was issued
        (e.g. a new allergy, or a medication the patient started taking).
        The original prescription is not modified.
        """
        renewal_request = prescription.to_request()
        warnings = self._validate(renewal_request, allergies)
        interactions = self._interactions_for(renewal_request, current_medications)

        renewed = self.lifecycle.renew(prescription)
        self._count("prescriptions.created")
        return SafetyResult(renewed, warnings, interactions)
