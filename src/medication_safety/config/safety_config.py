# ============================================================================
# src/medication_safety/config/safety_config.py
# ============================================================================
"""
Prescription Safety Settings
- Prescription size limits
- Diagnosis detail requirements
- Controlled substance caps
- Interaction dedup strategy
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

VALID_DEDUP_STRATEGIES = ("pair_key", "message_prefix")


class SafetySettings(BaseSettings):
    MAX_ITEMS_PER_PRESCRIPTION: int = Field(
        default=10,
        ge=1,
        description="Maximum medication items allowed on a single prescription"
    )
    MIN_DIAGNOSIS_LENGTH: int = Field(
        default=10,
        ge=0,
        description="Minimum diagnosis length (characters) at prescription creation"
    )
    MAX_DIAGNOSIS_LENGTH: int = Field(
        default=500,
        ge=1,
        description="Maximum diagnosis length (characters)"
    )
    MAX_CONTROLLED_REFILLS: int = Field(
        default=5,
        ge=0,
        description="Maximum refills allowed for a controlled substance item"
    )
    CONTROLLED_QUANTITY_WARNING: int = Field(
        default=90,
        ge=1,
        description="Controlled substance quantity above this raises a warning (not a rejection)"
    )
    INTERACTION_DEDUP_STRATEGY: str = Field(
        default="pair_key",
        description="Reverse-pass dedup: 'pair_key' (unordered pair set) or 'message_prefix' (legacy text match)"
    )
    STALE_PRESCRIPTION_DAYS: int = Field(
        default=30,
        ge=0,
        description="Editing a prescription older than this logs a warning"
    )

    @field_validator("INTERACTION_DEDUP_STRATEGY")
    @classmethod
    def _check_dedup_strategy(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in VALID_DEDUP_STRATEGIES:
            raise ValueError(
                f"INTERACTION_DEDUP_STRATEGY must be one of {VALID_DEDUP_STRATEGIES}, got {value!r}"
            )
        return value


safety_settings = SafetySettings()
