"""Data models for the CRUD API."""

from agentbook.crud_api.models.api import (
    AgentCreate,
    AgentCreated,
    AgentPatch,
    AgentReplace,
    AgentResponse,
    CompanyCreate,
    CompanyCreated,
    CompanyResponse,
    ErrorResponse,
    MessageResponse,
    ServerErrorResponse,
    ValidationErrorResponse,
)

__all__ = [
    # Agents
    "AgentCreate",
    "AgentCreated",
    "AgentPatch",
    "AgentReplace",
    "AgentResponse",
    # Companies
    "CompanyCreate",
    "CompanyCreated",
    "CompanyResponse",
    # Shared
    "ErrorResponse",
    "MessageResponse",
    "ServerErrorResponse",
    "ValidationErrorResponse",
]
