"""Request and response models for journal prompt generation."""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class GenerationRequest(BaseModel):
    """Resolved form values. Presence is checked by the relay, not here."""

    model_config = ConfigDict(populate_by_name=True)

    age: Optional[str] = Field(None, description="Age-range label, e.g. '26-35'.")
    issue: Optional[str] = Field(None, description="Life situation to explore (preset or free text).")
    lens: Optional[str] = Field(None, description="Philosophical or spiritual lens (preset or free text).")
    num_prompts: Optional[str] = Field(
        None,
        alias="numPrompts",
        description="Requested number of prompts as display text: '1', '3-5', '10' or '15'.",
    )


class GenerationResult(BaseModel):
    prompts: str = Field(..., description="Generated text, returned exactly as the provider produced it.")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    message: str
