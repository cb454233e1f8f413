# ============================================================================
# src/medication_safety/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .safety_config import SafetySettings, safety_settings
from .logging_config import LoggingSettings, logging_settings
