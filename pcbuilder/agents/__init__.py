"""
Prompt templates for the AI recommendation endpoints.

1. Build generation (three tiers: Good, Better, Best)
   - Located in: pcbuilder/agents/build/prompts.py

2. Peripheral recommendation (monitor, keyboard, mouse, headset)
   - Located in: pcbuilder/agents/peripherals/prompts.py

Both prompt pairs are sent through the same bounded-retry completion
gateway (pcbuilder/services/completion_gateway.py). The model output is
passed through to the caller without parsing.
"""

from pcbuilder.agents.build import BUILD_SYSTEM_PROMPT, build_pc_build_user_prompt
from pcbuilder.agents.peripherals import (
    PERIPHERALS_SYSTEM_PROMPT,
    build_peripherals_user_prompt,
)

__all__ = [
    "BUILD_SYSTEM_PROMPT",
    "build_pc_build_user_prompt",
    "PERIPHERALS_SYSTEM_PROMPT",
    "build_peripherals_user_prompt",
]
