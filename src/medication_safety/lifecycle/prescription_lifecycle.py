# ============================================================================
# src/medication_safety/lifecycle/prescription_lifecycle.py
# ============================================================================
"""
Prescription Lifecycle

Status transitions and note bookkeeping:

    ACTIVE -> COMPLETED
    ACTIVE -> CANCELED
    any    -> renewal (new ACTIVE prescription, source unchanged)

COMPLETED and CANCELED are terminal. Content validation is not done here;
callers validate before create/apply_update.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from ..config import SafetySettings, safety_settings
from ..core.enums import PrescriptionStatus
from ..core.prescription import Prescription, PrescriptionItem, PrescriptionRequest
from ..utils.exceptions import PrescriptionStateError, ValidationError

logger = logging.getLogger(__name__)


def append_marker(notes: Optional[str], marker: str) -> str:
    """Append a bracketed marker, separated from existing notes by a blank line."""
    if notes is None:
        return marker
    return f"{notes}\n\n{marker}"


def _state_error(reason: str, status: PrescriptionStatus) -> PrescriptionStateError:
    logger.warning(f"Lifecycle transition rejected: {reason}")
    return PrescriptionStateError(reason, status=status)


def _build_items(request: PrescriptionRequest) -> List[PrescriptionItem]:
    return [
        PrescriptionItem.from_request(item_request, item_id=index)
        for index, item_request in enumerate(request.items, start=1)
    ]


def _item_key(medication_name: Optional[str]) -> str:
    return (medication_name or "").lower().strip()


class PrescriptionLifecycle:

    def __init__(self, settings: Optional[SafetySettings] = None):
        self.settings = settings or safety_settings

    def create(self, request: PrescriptionRequest, issue_date: Optional[datetime] = None) -> Prescription:
        """Build a new ACTIVE prescription from an already-validated request."""
        prescription = Prescription(
            doctor_id=request.doctor_id,
            patient_id=request.patient_id,
            diagnosis=request.diagnosis,
            items=_build_items(request),
            notes=request.notes,
            status=PrescriptionStatus.ACTIVE,
            issue_date=issue_date or datetime.now(),
        )
        logger.info(
            f"Created prescription for patient {request.patient_id} "
            f"with {len(prescription.items)} items"
        )
        return prescription

    def cancel(self, prescription: Prescription, reason: Optional[str]) -> Prescription:
        if reason is None or not reason.strip():
            logger.warning("Cancellation rejected: no reason given")
            raise ValidationError("Cancellation reason is required")

        if prescription.status is PrescriptionStatus.COMPLETED:
            raise _state_error(
                "Cannot cancel a completed prescription", prescription.status
            )
        if prescription.status is PrescriptionStatus.CANCELED:
            raise _state_error(
                "Prescription is already canceled", prescription.status
            )

        if prescription.printed:
            logger.warning(
                f"Canceling printed prescription {prescription.id} - "
                f"pharmacy notification may be required"
            )

        prescription.status = PrescriptionStatus.CANCELED
        prescription.notes = append_marker(prescription.notes, f"[CANCELED: {reason}]")
        logger.info(f"Canceled prescription {prescription.id}: {reason}")
        return prescription

    def complete(self, prescription: Prescription) -> Prescription:
        if not prescription.is_active:
            raise _state_error(
                f"Only active prescriptions can be completed (status: {prescription.status.value})",
                prescription.status
            )

        prescription.status = PrescriptionStatus.COMPLETED
        logger.info(f"Completed prescription {prescription.id}")
        return prescription

    def renew(self, prescription: Prescription, issue_date: Optional[datetime] = None) -> Prescription:
        """
        Create a new ACTIVE prescription from an existing one.

        Items are copied with refills_used reset to 0. The source prescription
        keeps its status and notes.
        """
        renewed = Prescription(
            doctor_id=prescription.doctor_id,
            patient_id=prescription.patient_id,
            diagnosis=prescription.diagnosis,
            items=[
                PrescriptionItem.from_request(item.to_request(), item_id=item.id)
                for item in prescription.items
            ],
            notes=f"Renewed from prescription #{prescription.id}",
            status=PrescriptionStatus.ACTIVE,
            issue_date=issue_date or datetime.now(),
        )
        logger.info(f"Renewed prescription {prescription.id}")
        return renewed

    def mark_printed(self, prescription: Prescription, when: Optional[datetime] = None) -> Prescription:
        prescription.printed = True
        prescription.print_date = when or datetime.now()
        logger.info(f"Marked prescription {prescription.id} as printed")
        return prescription

    def update_notes(self, prescription: Prescription, notes: Optional[str]) -> Prescription:
        prescription.notes = notes
        return prescription

    def archive(self, prescription: Prescription, reason: str) -> Prescription:
        """Soft archive: records an [ARCHIVED: reason] marker, status unchanged."""
        prescription.notes = append_marker(prescription.notes, f"[ARCHIVED: {reason}]")
        logger.info(f"Archived prescription {prescription.id}: {reason}")
        return prescription

    def ensure_modifiable(self, prescription: Prescription, now: Optional[datetime] = None) -> None:
        if not prescription.is_active:
            raise _state_error(
                f"Cannot modify {prescription.status.value.lower()} prescription",
                prescription.status
            )

        now = now or datetime.now()
        stale_after = timedelta(days=self.settings.STALE_PRESCRIPTION_DAYS)
        if prescription.issue_date < now - stale_after:
            logger.warning(
                f"Modifying prescription older than {self.settings.STALE_PRESCRIPTION_DAYS} days: "
                f"{prescription.id}"
            )

    def apply_update(self, prescription: Prescription, request: PrescriptionRequest) -> Prescription:
        """
        Replace diagnosis and notes (when given) and rebuild the item list.

        Refills already used carry over to the rebuilt item with the same
        medication name. An edit that would allow fewer refills than were
        already used is rejected and nothing is changed.
        """
        self.ensure_modifiable(prescription)

        used_by_name = {
            _item_key(item.medication_name): item.refills_used
            for item in prescription.items
        }
        items = _build_items(request)
        for item in items:
            refills_used = used_by_name.get(_item_key(item.medication_name), 0)
            if item.refills_allowed < refills_used:
                reason = (
                    f"Refills allowed ({item.refills_allowed}) below refills already used "
                    f"({refills_used}) for {item.medication_name}"
                )
                logger.warning(f"Update rejected for prescription {prescription.id}: {reason}")
                raise ValidationError(reason)
            item.refills_used = refills_used

        if request.diagnosis is not None:
            prescription.diagnosis = request.diagnosis
        if request.notes is not None:
            prescription.notes = request.notes
        prescription.items = items

        logger.info(f"Updated prescription {prescription.id}: {len(prescription.items)} items")
        return prescription
