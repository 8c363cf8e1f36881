"""API request / response schemas for the CRUD endpoints.

Wire payloads use the upper-case column names of the existing tables
(``AGENT_CODE``, ``COMPANY_ID``, ...).  Python code uses snake_case field
names; ``alias_generator=str.upper`` maps between the two.

- **Create** schemas validate user input and coerce numeric fields.
- **Patch** schemas accept a non-empty subset of the updatable columns and
  reject anything else.
- **Replace** schemas require every updatable column with a truthy value.
- **Response** schemas serialize ORM rows via ``from_attributes``.

Every input schema caps string lengths at the column widths in
``db.tables``, so an over-long value is a 400 rather than a store error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

_WIRE_INPUT = ConfigDict(alias_generator=str.upper)
_WIRE_OUTPUT = ConfigDict(alias_generator=str.upper, populate_by_name=True, from_attributes=True)

# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------


class AgentCreate(BaseModel):
    """Input for creating an agent.  Only the code is mandatory."""

    model_config = _WIRE_INPUT

    agent_code: str = Field(min_length=1, max_length=6)
    agent_name: str | None = Field(default=None, max_length=40)
    working_area: str | None = Field(default=None, max_length=35)
    commission: float | None = Field(default=None, allow_inf_nan=False)
    phone_no: str | None = Field(default=None, max_length=15)
    country: str | None = Field(default=None, max_length=25)


class AgentPatch(BaseModel):
    """Partial update.

    Only the five updatable columns are accepted; unknown keys (including
    ``AGENT_CODE``) fail validation.  Use ``model_dump(exclude_unset=True)``
    to get the columns the caller actually sent.
    """

    model_config = ConfigDict(alias_generator=str.upper, extra="forbid")

    agent_name: str | None = Field(default=None, max_length=40)
    working_area: str | None = Field(default=None, max_length=35)
    commission: float | None = Field(default=None, allow_inf_nan=False)
    phone_no: str | None = Field(default=None, max_length=15)
    country: str | None = Field(default=None, max_length=25)

    @model_validator(mode="after")
    def _require_some_field(self) -> AgentPatch:
        if not self.model_fields_set:
            msg = "At least one field must be supplied."
            raise ValueError(msg)
        return self


class AgentReplace(BaseModel):
    """Full replacement of an agent's details.  Every field must be truthy."""

    model_config = _WIRE_INPUT

    agent_name: str = Field(min_length=1, max_length=40)
    working_area: str = Field(min_length=1, max_length=35)
    commission: float = Field(allow_inf_nan=False)
    phone_no: str = Field(min_length=1, max_length=15)
    country: str = Field(min_length=1, max_length=25)

    @field_validator("commission")
    @classmethod
    def _non_zero_commission(cls, value: float) -> float:
        if value == 0:
            msg = "COMMISSION must be non-zero."
            raise ValueError(msg)
        return value


class AgentResponse(BaseModel):
    """Serialized agent row."""

    model_config = _WIRE_OUTPUT

    agent_code: str
    agent_name: str | None = None
    working_area: str | None = None
    commission: float | None = None
    phone_no: str | None = None
    country: str | None = None


class AgentCreated(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Agent created successfully"
    agent_id: str


# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------


class CompanyCreate(BaseModel):
    """Input for creating a company.  ``COMPANY_ID`` is coerced to an integer."""

    model_config = _WIRE_INPUT

    company_id: int
    company_name: str | None = Field(default=None, max_length=25)
    company_city: str | None = Field(default=None, max_length=25)


class CompanyResponse(BaseModel):
    """Serialized company row."""

    model_config = _WIRE_OUTPUT

    company_id: int
    company_name: str | None = None
    company_city: str | None = None


class CompanyCreated(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Company created successfully"
    company_id: str


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of 404 / 503 responses (FastAPI ``HTTPException``)."""

    detail: str


class ValidationErrorResponse(BaseModel):
    """Body of 400 responses for malformed or incomplete input."""

    detail: str = "Invalid request body."
    errors: list[dict[str, Any]] = Field(default_factory=list)


class ServerErrorResponse(BaseModel):
    """Body of 500 responses.  ``error_id`` matches the server-side log entry."""

    detail: str = "Internal Server Error"
    error_id: str
