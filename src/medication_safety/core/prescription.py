# ============================================================================
# src/medication_safety/core/prescription.py
# ============================================================================
"""
Prescription aggregate
- Caller-supplied requests (creation / update input)
- PrescriptionItem: one medication line, refill counters
- Prescription: aggregate root with status and notes
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .enums import PrescriptionStatus
from ..utils.exceptions import ValidationError


@dataclass
class PrescriptionItemRequest:
    medication_name: Optional[str]
    dosage: Optional[str]
    frequency: Optional[str]
    quantity: Optional[int]
    duration: Optional[str] = None
    instructions: Optional[str] = None
    route: Optional[str] = None
    refillable: bool = False
    refills_allowed: Optional[int] = 0


@dataclass
class PrescriptionRequest:
    doctor_id: Optional[int]
    patient_id: Optional[int]
    diagnosis: Optional[str]
    items: List[PrescriptionItemRequest] = field(default_factory=list)
    notes: Optional[str] = None


@dataclass
class PrescriptionItem:
    medication_name: str
    dosage: str
    frequency: str
    quantity: int
    duration: Optional[str] = None
    instructions: Optional[str] = None
    route: Optional[str] = None
    refillable: bool = False
    refills_allowed: int = 0
    refills_used: int = 0
    id: Optional[int] = None

    @property
    def remaining_refills(self) -> int:
        return self.refills_allowed - self.refills_used

    @classmethod
    def from_request(cls, request: PrescriptionItemRequest, item_id: Optional[int] = None) -> "PrescriptionItem":
        return cls(
            medication_name=request.medication_name,
            dosage=request.dosage,
            frequency=request.frequency,
            quantity=request.quantity,
            duration=request.duration,
            instructions=request.instructions,
            route=request.route,
            refillable=request.refillable,
            refills_allowed=request.refills_allowed or 0,
            refills_used=0,
            id=item_id,
        )

    def to_request(self) -> PrescriptionItemRequest:
        return PrescriptionItemRequest(
            medication_name=self.medication_name,
            dosage=self.dosage,
            frequency=self.frequency,
            quantity=self.quantity,
            duration=self.duration,
            instructions=self.instructions,
            route=self.route,
            refillable=self.refillable,
            refills_allowed=self.refills_allowed,
        )


@dataclass
class Prescription:
    doctor_id: Optional[int]
    patient_id: Optional[int]
    diagnosis: str
    items: List[PrescriptionItem] = field(default_factory=list)
    notes: Optional[str] = None
    status: PrescriptionStatus = PrescriptionStatus.ACTIVE
    issue_date: datetime = field(default_factory=datetime.now)
    printed: bool = False
    print_date: Optional[datetime] = None
    id: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.status is PrescriptionStatus.ACTIVE

    @property
    def medication_names(self) -> List[str]:
        return [item.medication_name for item in self.items]

    def find_item(self, item_id: int) -> PrescriptionItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise ValidationError(f"Prescription item not found: {item_id}")

    def to_request(self, notes: Optional[str] = None) -> PrescriptionRequest:
        """Rebuild the creation request this prescription corresponds to."""
        return PrescriptionRequest(
            doctor_id=self.doctor_id,
            patient_id=self.patient_id,
            diagnosis=self.diagnosis,
            items=[item.to_request() for item in self.items],
            notes=self.notes if notes is None else notes,
        )
