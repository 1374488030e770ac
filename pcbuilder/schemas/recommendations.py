"""
Pydantic schemas for the AI recommendation endpoints.

Request models accept the camelCase bodies the web client sends. Every field
is optional, accepts any JSON type, and unknown fields are kept: the values
are interpolated into a prompt and the model tolerates gaps, so a JSON object
is never rejected for its shape. Only `build` must be an object when present.

Response models (BuildRecommendation, PeripheralRecommendation) document the
JSON the model is asked to produce. They feed the OpenAPI docs only; the
completion is passed through without being validated against them.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class BuildGenerationRequest(BaseModel):
    """
    Request to generate three PC build tiers.

    Frontend scenario:
    - User fills budget, use case and optional notes, clicks "Generate builds"
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    budget: Optional[Any] = Field(
        None,
        description="Total budget in USD",
        examples=[1500, 2499.99]
    )
    use_case: Optional[Any] = Field(
        None,
        alias="useCase",
        description="Primary use case for the machine",
        examples=["Gaming", "Video Editing", "Machine Learning"]
    )
    custom_requirements: Optional[Any] = Field(
        None,
        alias="customRequirements",
        description="Free-text extra requirements. Omitted from the prompt when empty.",
        examples=["Must be quiet, small form factor, no RGB"]
    )


class BuildSnapshot(BaseModel):
    """
    The build tier the user picked, as returned by generate-pc-build.

    Treated as opaque: only components.cpu.model and components.gpu.model
    are read.
    """
    model_config = ConfigDict(extra="allow")

    components: Optional[Dict[str, Any]] = Field(
        None,
        description="Component map keyed by part type (cpu, gpu, ram, ...)",
        examples=[{
            "cpu": {"model": "AMD Ryzen 5 7600", "price": 199, "reason": "..."},
            "gpu": {"model": "NVIDIA RTX 4060", "price": 299, "reason": "..."}
        }]
    )

    def component_model(self, part: str) -> Optional[str]:
        """Return components[part]["model"] if present, else None."""
        if not isinstance(self.components, dict):
            return None
        component = self.components.get(part)
        if not isinstance(component, dict):
            return None
        model = component.get("model")
        return str(model) if model is not None else None


class PeripheralRequest(BaseModel):
    """
    Request to recommend peripherals that match a chosen build.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    budget: Optional[Any] = Field(
        None,
        description="Budget remaining for peripherals in USD",
        examples=[400]
    )
    build: Optional[BuildSnapshot] = Field(
        None,
        description="The selected build tier"
    )
    use_case: Optional[Any] = Field(
        None,
        alias="useCase",
        description="Primary use case for the machine",
        examples=["Gaming"]
    )


# ============================================================================
# RESPONSE MODELS (documentation only)
# ============================================================================

class ComponentChoice(BaseModel):
    """A single part inside a build tier."""
    model: str = Field(..., examples=["AMD Ryzen 7 7800X3D"])
    price: float = Field(..., examples=[449.0])
    reason: str = Field(..., examples=["Best gaming CPU in this price range"])


class BuildComponents(BaseModel):
    """The eight parts every build tier lists."""
    cpu: ComponentChoice
    gpu: ComponentChoice
    ram: ComponentChoice
    motherboard: ComponentChoice
    storage: ComponentChoice
    psu: ComponentChoice
    case: ComponentChoice
    cooling: ComponentChoice


class PerformanceExpectations(BaseModel):
    gaming: Optional[str] = None
    productivity: Optional[str] = None
    ml: Optional[str] = None


class BuildRecommendation(BaseModel):
    """
    One recommended build tier.

    The model is asked for exactly three of these (Good, Better, Best).
    """
    tier: Literal["Good", "Better", "Best"]
    totalCost: float
    performanceScore: float = Field(..., description="1-10")
    bottleneckPercentage: float
    powerConsumption: float = Field(..., description="Estimated draw in watts")
    components: BuildComponents
    performanceExpectations: PerformanceExpectations
    compatibilityNotes: str


class BuildGenerationResponse(BaseModel):
    """Documented shape of a successful generate-pc-build body."""
    builds: List[BuildRecommendation]


class PeripheralRecommendation(BaseModel):
    """One recommended peripheral."""
    category: Literal["monitor", "keyboard", "mouse", "headset"]
    model: str
    price: float
    reason: str
    specs: Dict[str, Any] = Field(default_factory=dict)


class PeripheralResponse(BaseModel):
    """Documented shape of a successful recommend-peripherals body."""
    peripherals: List[PeripheralRecommendation]


class ErrorResponse(BaseModel):
    """
    Error envelope returned with status 402, 429 or 500.

    The frontend shows `error` in a toast as-is.
    """
    error: str = Field(
        ...,
        description="User-facing error message",
        examples=[
            "Rate limit exceeded. Please try again in a moment.",
            "The AI service is temporarily unavailable. Please try again in a moment."
        ]
    )
