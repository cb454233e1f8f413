# ============================================================================
# src/medication_safety/config/logging_config.py
# ============================================================================
"""
Logging & Monitoring Settings
- Log level
- Log format
- Metrics collection
"""

from pydantic import Field
from pydantic_settings import BaseSettings

class LoggingSettings(BaseSettings):
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit log records as JSON lines"
    )
    ENABLE_METRICS: bool = Field(
        default=True,
        description="Enable counter collection for validations, interactions and refills"
    )

logging_settings = LoggingSettings()
