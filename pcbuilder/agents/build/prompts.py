"""
PC Build Generation Prompt Templates

Contains the system prompt and user prompt builder for the build generation
endpoint (POST /functions/v1/generate-pc-build).

The model is asked for three tiers (Good, Better, Best) in one JSON object:
{"builds": [...]}. The completion is passed through to the browser as-is,
so the schema below is the contract the frontend renders.
"""

from typing import Any

from pcbuilder.agents.formatting import NOT_SPECIFIED, format_budget, format_text

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

BUILD_SYSTEM_PROMPT = """You are an expert PC builder with deep knowledge of hardware compatibility, performance optimization, and price-to-performance ratios. Your goal is to recommend three PC build tiers (Good, Better, Best) within the user's budget.

For each build, provide:
1. Complete component list with specific models and prices
2. Performance expectations for the use case
3. Bottleneck analysis
4. Compatibility notes
5. Total estimated cost

Use realistic current market prices and ensure all components are compatible."""


# =============================================================================
# OUTPUT SCHEMA
# =============================================================================

BUILD_OUTPUT_SCHEMA = """{
  "builds": [
    {
      "tier": "Good|Better|Best",
      "totalCost": number,
      "performanceScore": number (1-10),
      "bottleneckPercentage": number,
      "powerConsumption": number,
      "components": {
        "cpu": { "model": "", "price": number, "reason": "" },
        "gpu": { "model": "", "price": number, "reason": "" },
        "ram": { "model": "", "price": number, "reason": "" },
        "motherboard": { "model": "", "price": number, "reason": "" },
        "storage": { "model": "", "price": number, "reason": "" },
        "psu": { "model": "", "price": number, "reason": "" },
        "case": { "model": "", "price": number, "reason": "" },
        "cooling": { "model": "", "price": number, "reason": "" }
      },
      "performanceExpectations": {
        "gaming": "",
        "productivity": "",
        "ml": ""
      },
      "compatibilityNotes": ""
    }
  ]
}"""


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_pc_build_user_prompt(
    budget: Any,
    use_case: Any,
    custom_requirements: Any = None,
) -> str:
    """
    Build the user prompt for three-tier build generation.

    The custom requirements line is left out entirely when the user gave
    none (None, blank or an empty list), so the bullet list never has an
    empty entry.

    Args:
        budget: Total budget in USD (any JSON value, see format_budget)
        use_case: Primary use case (e.g. "Gaming", "Video Editing")
        custom_requirements: Free-text extra requirements (optional)

    Returns:
        The complete user prompt
    """
    lines = [
        "Create three optimized PC builds (Good, Better, Best tiers) for:",
        f"- Budget: ${format_budget(budget)}",
        f"- Primary Use Case: {format_text(use_case)}",
    ]

    requirements = format_text(custom_requirements)
    if requirements != NOT_SPECIFIED:
        lines.append(f"- Custom Requirements: {requirements}")

    lines.append("")
    lines.append("For each tier, provide a JSON response with this structure:")
    lines.append(BUILD_OUTPUT_SCHEMA)

    return "\n".join(lines)
