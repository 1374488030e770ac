"""
Peripheral Recommendation Prompt Templates

Used by POST /functions/v1/recommend-peripherals. The chosen build is only
read for its CPU and GPU model names; the rest of the snapshot is ignored.
"""

from typing import Any, Optional

from pcbuilder.agents.formatting import format_budget, format_text

PERIPHERALS_SYSTEM_PROMPT = (
    "You are an expert in computer peripherals with deep knowledge of gaming monitors, "
    "keyboards, mice, and headsets. Your goal is to recommend peripherals that complement "
    "the PC build and use case."
)

PERIPHERALS_OUTPUT_SCHEMA = """{
  "peripherals": [
    {
      "category": "monitor|keyboard|mouse|headset",
      "model": "specific model name",
      "price": number,
      "reason": "why this is recommended",
      "specs": {
        "key": "value pairs of important specs"
      }
    }
  ]
}"""


def build_peripherals_user_prompt(
    budget: Any,
    use_case: Any,
    cpu_model: Optional[str],
    gpu_model: Optional[str],
) -> str:
    """Build the user prompt listing the remaining budget and the build's CPU/GPU."""
    return "\n".join([
        "Recommend peripherals for this PC build:",
        "Build Details:",
        f"- Budget Remaining: ${format_budget(budget)}",
        f"- Use Case: {format_text(use_case)}",
        f"- CPU: {format_text(cpu_model)}",
        f"- GPU: {format_text(gpu_model)}",
        "",
        "Provide recommendations for monitor, keyboard, mouse, and headset in this JSON format:",
        PERIPHERALS_OUTPUT_SCHEMA,
    ])
