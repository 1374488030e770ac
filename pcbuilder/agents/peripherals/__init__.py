"""
Peripheral Recommendation - prompt templates for build-matched peripherals.
"""

from pcbuilder.agents.peripherals.prompts import (
    PERIPHERALS_OUTPUT_SCHEMA,
    PERIPHERALS_SYSTEM_PROMPT,
    build_peripherals_user_prompt,
)

__all__ = [
    "PERIPHERALS_OUTPUT_SCHEMA",
    "PERIPHERALS_SYSTEM_PROMPT",
    "build_peripherals_user_prompt",
]
