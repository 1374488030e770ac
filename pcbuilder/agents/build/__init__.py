"""
PC Build Generation - prompt templates for three-tier build recommendations.

The service layer is in:
- pcbuilder/services/recommendation_service.py
"""

from pcbuilder.agents.build.prompts import (
    BUILD_OUTPUT_SCHEMA,
    BUILD_SYSTEM_PROMPT,
    build_pc_build_user_prompt,
)

__all__ = [
    "BUILD_OUTPUT_SCHEMA",
    "BUILD_SYSTEM_PROMPT",
    "build_pc_build_user_prompt",
]
