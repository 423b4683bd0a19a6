"""Data Transfer Objects - API contracts."""

from pydantic import BaseModel, ConfigDict, Field

from coverage_demo.models.domain import InfoPayload


class CalculationResponse(BaseModel):
    """Result of a sum or product calculation."""
    result: int


class ParityResponse(BaseModel):
    """Result of a parity check."""
    number: int
    is_even: bool = Field(alias="isEven")

    model_config = ConfigDict(populate_by_name=True)


class GreetingResponse(BaseModel):
    """Generated greeting."""
    greeting: str


class InfoResponse(BaseModel):
    """Application information."""
    name: str
    version: str
    description: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_payload(cls, payload: InfoPayload) -> "InfoResponse":
        return cls.model_validate(payload)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
